"""Organizations whose exports can be ingested."""

from __future__ import annotations

from typing import Final

from .errors import InvalidOrganizationError

VALID_ORGANIZATIONS: Final[tuple[str, ...]] = ("MOMU",)


def validate_organization(name: str) -> str:
    """Return the canonical (upper-case) organization name or raise."""

    candidate = name.strip().upper()
    if candidate not in VALID_ORGANIZATIONS:
        raise InvalidOrganizationError(name, VALID_ORGANIZATIONS)
    return candidate
