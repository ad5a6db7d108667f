"""Public interface for the MoMU thesaurus adapter."""

from __future__ import annotations

from .schema import ConceptPayload, ConceptPayloadInput, LiteralValue, NodeReference
from .translator import INVALID_URI_REASON, MISSING_ID_REASON, is_concept_uri, map_concept

__all__ = [
    "INVALID_URI_REASON",
    "MISSING_ID_REASON",
    "ConceptPayload",
    "ConceptPayloadInput",
    "LiteralValue",
    "NodeReference",
    "is_concept_uri",
    "map_concept",
]
