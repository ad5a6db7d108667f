"""Environment loading for the ingestion CLI."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from dotenv import find_dotenv, load_dotenv

from .errors import MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def load_env_file(path: str | Path | None = None) -> bool:
    """Load ``.env`` values into ``os.environ`` without overriding existing ones."""

    dotenv_path = path if path is not None else find_dotenv(usecwd=True)
    return load_dotenv(dotenv_path=dotenv_path, override=False)


def require_env_vars(names: Sequence[str]) -> dict[str, str]:
    """Return the named variables; blank values count as missing."""

    values = {name: os.getenv(name, "") for name in names}
    missing = [name for name, value in values.items() if not value.strip()]
    if missing:
        raise MissingConfigurationError(missing)
    return values


def require_env_var(name: str) -> str:
    return require_env_vars([name])[name]
