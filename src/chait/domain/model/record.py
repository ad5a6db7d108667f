"""Thesaurus concept records and their normalised store representation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from .enums import Language

UNAVAILABLE: Final[str] = "UNAVAILABLE"

REQUIRED_FIELDS: Final[tuple[str, ...]] = ("puri", "provenance", "identifier")

LABEL_COLUMNS: Final[dict[Language, str]] = {
    Language.NL: "label_NL",
    Language.FR: "label_FR",
    Language.EN: "label_EN",
}
SCOPE_COLUMNS: Final[dict[Language, str]] = {
    Language.NL: "scope_NL",
    Language.FR: "scope_FR",
    Language.EN: "scope_EN",
}

# Maximum lengths of the string columns in the thesaurus store.
FIELD_LIMITS: Final[dict[str, int]] = {
    "puri": 255,
    "provenance": 50,
    "identifier": 100,
    **dict.fromkeys(LABEL_COLUMNS.values(), 1000),
    **dict.fromkeys(SCOPE_COLUMNS.values(), 2000),
    "AAT": 255,
    "Wikidata": 255,
}


def _unavailable_slots() -> dict[Language, str]:
    return dict.fromkeys(Language, UNAVAILABLE)


@dataclass(slots=True)
class ThesaurusRecordDraft:
    """A mapped concept that has not been validated against the store schema yet.

    Every language slot starts out as :data:`UNAVAILABLE` so that a language the
    source never mentions stays distinguishable from one it left empty.
    """

    provenance: str
    puri: str
    identifier: str | None = None
    modified_at: str | None = None
    labels: dict[Language, str] = field(default_factory=_unavailable_slots)
    scopes: dict[Language, str] = field(default_factory=_unavailable_slots)
    aat: str | None = None
    wikidata: str | None = None

    def missing_required_fields(self) -> list[str]:
        return [name for name in REQUIRED_FIELDS if not getattr(self, name)]


def _truncate(value: str | None, column: str) -> str | None:
    if not value:
        return None
    return value[: FIELD_LIMITS[column]]


def normalize_record(draft: ThesaurusRecordDraft) -> dict[str, str | None]:
    """Return the store row for ``draft`` keyed by column name.

    Strings are cut to their column limit; absent or empty optional values become
    ``None`` rather than empty strings.
    """

    row: dict[str, str | None] = {
        "puri": _truncate(draft.puri, "puri"),
        "provenance": _truncate(draft.provenance, "provenance"),
        "identifier": _truncate(draft.identifier, "identifier"),
    }
    for language, column in LABEL_COLUMNS.items():
        row[column] = _truncate(draft.labels.get(language), column)
    for language, column in SCOPE_COLUMNS.items():
        row[column] = _truncate(draft.scopes.get(language), column)
    row["modified_at"] = draft.modified_at or None
    row["AAT"] = _truncate(draft.aat, "AAT")
    row["Wikidata"] = _truncate(draft.wikidata, "Wikidata")
    return row
