"""Domain model for thesaurus ingestion."""

from __future__ import annotations

from .enums import Language, Organization
from .outcomes import (
    BatchError,
    BatchResult,
    Mapped,
    MappedOutcome,
    PersistOperation,
    PersistResult,
    Skipped,
)
from .record import (
    FIELD_LIMITS,
    LABEL_COLUMNS,
    REQUIRED_FIELDS,
    SCOPE_COLUMNS,
    UNAVAILABLE,
    ThesaurusRecordDraft,
    normalize_record,
)

__all__ = [
    "FIELD_LIMITS",
    "LABEL_COLUMNS",
    "REQUIRED_FIELDS",
    "SCOPE_COLUMNS",
    "UNAVAILABLE",
    "BatchError",
    "BatchResult",
    "Language",
    "Mapped",
    "MappedOutcome",
    "Organization",
    "PersistOperation",
    "PersistResult",
    "Skipped",
    "ThesaurusRecordDraft",
    "normalize_record",
]
