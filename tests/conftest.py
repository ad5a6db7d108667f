from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002

from chait.adapters.sqlalchemy import SqlAlchemyThesaurusGateway, create_all_tables
from chait.config import RetryPolicy
from tests.helpers.sleep import RecordingSleep

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    create_all_tables(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def sqlite_gateway(
    sqlite_engine: Engine,
    recording_sleep: RecordingSleep,
) -> Iterator[SqlAlchemyThesaurusGateway]:
    with SqlAlchemyThesaurusGateway(
        engine=sqlite_engine,
        retry_policy=RetryPolicy(),
        sleep=recording_sleep,
    ) as gateway:
        yield gateway
