"""Results produced by the mapping, persistence, and batch stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from .record import ThesaurusRecordDraft

PersistOperation = Literal["inserted", "updated"]


@dataclass(slots=True, frozen=True)
class Mapped:
    record: ThesaurusRecordDraft


@dataclass(slots=True, frozen=True)
class Skipped:
    reason: str
    record_id: str | None = None


MappedOutcome = Mapped | Skipped


@dataclass(slots=True, frozen=True)
class PersistResult:
    """Outcome of a single upsert; failures carry diagnostics instead of raising."""

    success: bool
    puri: str | None
    operation: PersistOperation | None = None
    error: str | None = None
    error_detail: dict[str, Any] | None = None


@dataclass(slots=True, frozen=True)
class BatchError:
    index: int
    reason: str | None = None
    error: str | None = None
    id: str | None = None
    puri: str | None = None

    def to_dict(self) -> dict[str, Any]:
        entry: dict[str, Any] = {"index": self.index}
        for name in ("id", "puri", "reason", "error"):
            value = getattr(self, name)
            if value is not None:
                entry[name] = value
        return entry


@dataclass(slots=True)
class BatchResult:
    """Running tally of one batch; mutated once per input record."""

    total: int
    successful: int = 0
    failed: int = 0
    skipped: int = 0
    errors: list[BatchError] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return self.successful + self.failed + self.skipped

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "successful": self.successful,
            "failed": self.failed,
            "skipped": self.skipped,
            "errors": [error.to_dict() for error in self.errors],
        }
