"""SQLAlchemy-backed persistence gateway for thesaurus records."""

from __future__ import annotations

import time
from logging import getLogger
from typing import TYPE_CHECKING, Any, Literal

from sqlalchemy import MetaData, create_engine, func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError

from chait.adapters.resilience import RetryExhaustedError, Sleeper, retry_call
from chait.config import DEFAULT_TABLE_NAME, ConfigurationError, RetryPolicy, get_store_config
from chait.domain.model import PersistResult, ThesaurusRecordDraft, normalize_record

from .mappings import build_thesaurus_table, thesaurus_table

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from sqlalchemy import Table
    from sqlalchemy.engine import Engine

    from chait.config import StoreConfig

log = getLogger(__name__)

# Any failure of the lookup or the write is retried; validation happens before either.
RETRYABLE_ERRORS: tuple[type[BaseException], ...] = (Exception,)

_INSERT_BY_DIALECT: dict[str, Callable[[Table], Any]] = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class StoreConnectionError(RuntimeError):
    """Raised when the thesaurus store cannot be reached."""


class RecordValidationError(ValueError):
    """Raised when a record lacks the fields the store requires."""


class SqlAlchemyThesaurusGateway:
    """Upsert thesaurus records into a SQL table keyed by ``puri``.

    The gateway owns its connection state: pass an ``engine`` for tests or let
    ``connect()`` build one from :class:`~chait.config.StoreConfig` (read from the
    environment when no config is given). ``upsert`` connects lazily on first use.
    """

    def __init__(
        self,
        config: StoreConfig | None = None,
        *,
        engine: Engine | None = None,
        retry_policy: RetryPolicy | None = None,
        sleep: Sleeper = time.sleep,
    ) -> None:
        self._config = config
        self._engine = engine
        self._owns_engine = engine is None
        self._connected = False
        self.retry_policy = retry_policy or RetryPolicy()
        self._sleep = sleep

        table_name = config.table_name if config is not None else DEFAULT_TABLE_NAME
        self.table = (
            thesaurus_table
            if table_name == DEFAULT_TABLE_NAME
            else build_thesaurus_table(MetaData(), table_name)
        )

    def __enter__(self) -> SqlAlchemyThesaurusGateway:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        self.close()
        return False

    @property
    def is_connected(self) -> bool:
        return self._connected and self._engine is not None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise StoreConnectionError("Store engine not initialised. Call connect() first.")
        return self._engine

    def connect(self) -> None:
        """Build the engine if needed and verify the store answers a test query."""

        if self._engine is None:
            config = self._config or get_store_config()
            self._config = config
            self._engine = create_engine(config.engine_url(), future=True, pool_pre_ping=True)
            self._owns_engine = True

        dialect = self._engine.dialect.name
        if dialect not in _INSERT_BY_DIALECT:
            raise StoreConnectionError(f"Unsupported store dialect: {dialect}")

        try:
            with self._engine.connect() as connection:
                connection.execute(select(func.count()).select_from(self.table)).scalar_one()
        except SQLAlchemyError as exc:
            self._connected = False
            raise StoreConnectionError(f"Connection test failed: {exc}") from exc

        self._connected = True
        log.info("Successfully connected to the thesaurus store (%s)", dialect)

    def close(self) -> None:
        if self._engine is not None and self._owns_engine:
            self._engine.dispose()
            self._engine = None
        self._connected = False

    def upsert(self, record: ThesaurusRecordDraft) -> PersistResult:
        """Insert ``record`` or overwrite the stored row with the same ``puri``.

        Never raises: every failure is reported through the returned result.
        """

        puri = record.puri or None
        try:
            missing = record.missing_required_fields()
            if missing:
                msg = f"Missing required fields: {', '.join(missing)}"
                raise RecordValidationError(msg)  # noqa: TRY301

            row = normalize_record(record)
            self._ensure_connected()
            log.debug(
                "Processing record puri=%s identifier=%s provenance=%s",
                row["puri"],
                row["identifier"],
                row["provenance"],
            )

            existing = retry_call(
                "select",
                lambda: self._find_existing(row["puri"]),
                policy=self.retry_policy,
                retry_on=RETRYABLE_ERRORS,
                sleep=self._sleep,
            )
            retry_call(
                "upsert",
                lambda: self._write(row),
                policy=self.retry_policy,
                retry_on=RETRYABLE_ERRORS,
                sleep=self._sleep,
            )
        except Exception as exc:  # noqa: BLE001
            context = describe_error(exc, puri=puri)
            log.error("Database operation failed: %s", context)  # noqa: TRY400
            return PersistResult(success=False, puri=puri, error=str(exc), error_detail=context)

        return PersistResult(
            success=True,
            puri=puri,
            operation="updated" if existing is not None else "inserted",
        )

    def _ensure_connected(self) -> None:
        if self.is_connected:
            return
        try:
            self.connect()
        except (StoreConnectionError, ConfigurationError) as exc:
            raise StoreConnectionError(f"Failed to initialize database connection: {exc}") from exc

    def _find_existing(self, puri: str | None) -> str | None:
        statement = select(self.table.c.puri).where(self.table.c.puri == puri)
        with self.engine.connect() as connection:
            return connection.execute(statement).scalar_one_or_none()

    def _write(self, row: dict[str, str | None]) -> None:
        insert = _INSERT_BY_DIALECT[self.engine.dialect.name]
        statement = insert(self.table).values(row)
        statement = statement.on_conflict_do_update(
            index_elements=[self.table.c.puri],
            set_={name: statement.excluded[name] for name in row if name != "puri"},
        )
        with self.engine.begin() as connection:
            connection.execute(statement)


def describe_error(exc: BaseException, *, puri: str | None) -> dict[str, Any]:
    """Collect the diagnostics available for a failed store operation."""

    cause = exc.last_error if isinstance(exc, RetryExhaustedError) else exc
    original = getattr(cause, "orig", None)  # DBAPI error wrapped by SQLAlchemy
    diagnostics = getattr(original, "diag", None)
    return {
        "message": str(exc),
        "code": (
            getattr(original, "sqlstate", None)
            or getattr(original, "pgcode", None)
            or getattr(cause, "code", None)
        ),
        "hint": getattr(diagnostics, "message_hint", None),
        "details": getattr(diagnostics, "message_detail", None),
        "puri": puri,
    }
