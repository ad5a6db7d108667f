"""Domain port definitions for adapters."""

from __future__ import annotations

from .mapping import RecordMapper
from .persistence import ThesaurusGateway

__all__ = ["RecordMapper", "ThesaurusGateway"]
