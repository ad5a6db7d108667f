"""Console logging setup for the ingestion CLI."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Loggers that drown out per-record output at DEBUG level.
_NOISY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool")


def configure_logging(*, verbose: bool = False, force: bool = False) -> None:
    """Send log records to stderr, at DEBUG when ``verbose`` else INFO.

    SQLAlchemy's own loggers stay at WARNING either way. ``force=True`` replaces
    handlers installed by an earlier call.
    """

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        force=force,
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
