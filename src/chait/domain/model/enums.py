"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class Language(StrEnum):
    """Languages with a dedicated label/scope slot in the thesaurus store."""

    NL = "NL"
    FR = "FR"
    EN = "EN"

    @classmethod
    def parse(cls, tag: str | None) -> Language | None:
        """Return the language for a JSON-LD language tag, or ``None`` if unsupported."""

        if not tag:
            return None
        try:
            return cls(tag.strip().upper())
        except ValueError:
            return None


class Organization(StrEnum):
    MOMU = "MOMU"

    @property
    def provenance(self) -> str:
        return _PROVENANCE_LABELS[self]


_PROVENANCE_LABELS: dict[Organization, str] = {
    Organization.MOMU: "MoMU",
}
