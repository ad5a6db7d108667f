# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING, NoReturn

from chait import __version__
from chait.adapters.sqlalchemy import SqlAlchemyThesaurusGateway
from chait.app import ingest_file
from chait.config import (
    VALID_ORGANIZATIONS,
    ConfigurationError,
    configure_logging,
    get_store_config,
    load_env_file,
    validate_organization,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        raise ValueError(message)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = _ArgumentParser(prog="chait", description="CLI for CHAI-T, adding new data")
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "-f",
        "--file",
        required=True,
        help="Path to the input file",
    )
    parser.add_argument(
        "-o",
        "--org",
        required=True,
        help=f"Organization ({', '.join(VALID_ORGANIZATIONS)})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every record at DEBUG level",
    )
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        organization = validate_organization(parsed_args.org)
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(1)

    if parsed_args.verbose:
        configure_logging(verbose=True, force=True)

    try:
        log.info("Initializing database connection...")
        with SqlAlchemyThesaurusGateway(get_store_config()) as gateway:
            gateway.connect()
            result = ingest_file(parsed_args.file, organization, gateway=gateway)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)

    print(json.dumps(result.to_dict(), indent=2))

    if result.failed > 0:
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_env_file()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
