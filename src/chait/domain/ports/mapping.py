"""Ports for translating provider exports into thesaurus records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from chait.domain.model import MappedOutcome


@runtime_checkable
class RecordMapper(Protocol):
    """Callable port mapping one provider record to a draft or a skip."""

    def __call__(self, source: object) -> MappedOutcome: ...


__all__ = ["RecordMapper"]
