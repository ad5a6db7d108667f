"""Thesaurus store configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import ArgumentError

from .env import require_env_vars
from .errors import ConfigurationError

DEFAULT_TABLE_NAME: Final[str] = "THESAURI"
STORE_URL_VAR: Final[str] = "DATABASE_URL"
STORE_KEY_VAR: Final[str] = "DATABASE_KEY"


@dataclass(frozen=True, slots=True)
class StoreConfig:
    url: str
    key: str
    table_name: str = DEFAULT_TABLE_NAME

    def engine_url(self) -> URL:
        """Return the SQLAlchemy URL with the access key set as password.

        SQLite has no notion of credentials, so its URLs are passed through as-is.
        """

        try:
            parsed = make_url(self.url)
        except (ArgumentError, ValueError) as exc:
            raise ConfigurationError(f"Invalid store URL: {self.url}") from exc
        if parsed.get_backend_name() == "sqlite":
            return parsed
        return parsed.set(password=self.key)


def get_store_config() -> StoreConfig:
    values = require_env_vars((STORE_URL_VAR, STORE_KEY_VAR))
    return StoreConfig(url=values[STORE_URL_VAR], key=values[STORE_KEY_VAR])
