"""SQLAlchemy table metadata for the thesaurus store."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Column, MetaData, String, Table

from chait.config import DEFAULT_TABLE_NAME
from chait.domain.model import FIELD_LIMITS, LABEL_COLUMNS, SCOPE_COLUMNS

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

metadata = MetaData()


def _limited(name: str, *, nullable: bool = True) -> Column[str]:
    return Column(name, String(FIELD_LIMITS[name]), nullable=nullable)


def build_thesaurus_table(target: MetaData, name: str = DEFAULT_TABLE_NAME) -> Table:
    """Describe the thesaurus table; one row per concept, keyed by ``puri``."""

    return Table(
        name,
        target,
        Column("puri", String(FIELD_LIMITS["puri"]), primary_key=True),
        _limited("provenance", nullable=False),
        _limited("identifier", nullable=False),
        *(_limited(column) for column in LABEL_COLUMNS.values()),
        *(_limited(column) for column in SCOPE_COLUMNS.values()),
        Column("modified_at", String, nullable=True),
        _limited("AAT"),
        _limited("Wikidata"),
    )


thesaurus_table = build_thesaurus_table(metadata)


def create_all_tables(engine: Engine, *, table: Table | None = None) -> None:
    """Create the thesaurus table on local or test databases.

    Production schemas are managed outside this project.
    """

    (table if table is not None else thesaurus_table).create(engine, checkfirst=True)
