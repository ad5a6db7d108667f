"""Ports for persisting thesaurus records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from chait.domain.model import PersistResult, ThesaurusRecordDraft


@runtime_checkable
class ThesaurusGateway(Protocol):
    """Persistence contract for the thesaurus store.

    ``upsert`` reports failures through its result and never raises.
    """

    def upsert(self, record: ThesaurusRecordDraft) -> PersistResult: ...


__all__ = ["ThesaurusGateway"]
