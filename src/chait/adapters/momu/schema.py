"""Pydantic models describing the JSON-LD concepts in a MoMU thesaurus export.

All predicate-URI lookups live here; the rest of the adapter works with the named
attributes below.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

IDENTITY_KEY: Final[str] = "@id"
IDENTIFIER_PREDICATE: Final[str] = "http://purl.org/dc/terms/identifier"
MODIFIED_PREDICATE: Final[str] = "http://purl.org/dc/terms/modified"
PREF_LABEL_PREDICATE: Final[str] = "http://www.w3.org/2004/02/skos/core#prefLabel"
SCOPE_NOTE_PREDICATE: Final[str] = "http://www.w3.org/2004/02/skos/core#scopeNote"
EXACT_MATCH_PREDICATE: Final[str] = "http://www.w3.org/2004/02/skos/core#exactMatch"


def _list_or_empty(value: object) -> object:
    # Predicates that are not arrays carry nothing we can read.
    if isinstance(value, list):
        return value
    return []


class JsonLdBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class LiteralValue(JsonLdBaseModel):
    value: str | None = Field(default=None, alias="@value")
    language: str | None = Field(default=None, alias="@language")

    @field_validator("value", mode="before")
    @classmethod
    def _stringify_scalars(cls, value: object) -> object:
        if isinstance(value, bool):
            return str(value).lower()
        if isinstance(value, int | float):
            return str(value)
        return value


class NodeReference(JsonLdBaseModel):
    id: str | None = Field(default=None, alias="@id")


class ConceptPayload(JsonLdBaseModel):
    id: str | None = Field(default=None, alias=IDENTITY_KEY)
    identifiers: list[LiteralValue] = Field(default_factory=list, alias=IDENTIFIER_PREDICATE)
    modified: list[LiteralValue] = Field(default_factory=list, alias=MODIFIED_PREDICATE)
    pref_labels: list[LiteralValue] = Field(default_factory=list, alias=PREF_LABEL_PREDICATE)
    scope_notes: list[LiteralValue] = Field(default_factory=list, alias=SCOPE_NOTE_PREDICATE)
    exact_matches: list[NodeReference] = Field(default_factory=list, alias=EXACT_MATCH_PREDICATE)

    _coerce_lists = field_validator(
        "identifiers",
        "modified",
        "pref_labels",
        "scope_notes",
        "exact_matches",
        mode="before",
    )(_list_or_empty)

    @property
    def identifier(self) -> str | None:
        return self.identifiers[0].value if self.identifiers else None

    @property
    def modified_at(self) -> str | None:
        return self.modified[0].value if self.modified else None


ConceptPayloadInput = ConceptPayload | Mapping[str, object]
