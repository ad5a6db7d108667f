"""SQLAlchemy adapter package for the thesaurus store."""

from __future__ import annotations

from .gateway import (
    RETRYABLE_ERRORS,
    RecordValidationError,
    SqlAlchemyThesaurusGateway,
    StoreConnectionError,
    describe_error,
)
from .mappings import build_thesaurus_table, create_all_tables, metadata, thesaurus_table

__all__ = [
    "RETRYABLE_ERRORS",
    "RecordValidationError",
    "SqlAlchemyThesaurusGateway",
    "StoreConnectionError",
    "build_thesaurus_table",
    "create_all_tables",
    "describe_error",
    "metadata",
    "thesaurus_table",
]
