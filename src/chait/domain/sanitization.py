"""Reduce provider-supplied free text to plain text."""

from __future__ import annotations

from html import escape
from typing import Final

from bs4 import BeautifulSoup

# Elements whose content is code or form state rather than readable text.
NON_TEXT_TAGS: Final[tuple[str, ...]] = ("script", "style", "textarea", "option")

_MARKUP_CHARACTERS: Final[frozenset[str]] = frozenset("<>&")


def strip_markup(value: str) -> str:
    """Return ``value`` with every tag and attribute removed.

    Text inside ordinary elements is kept; the content of non-text elements such as
    ``<script>`` is dropped entirely. The remaining text is HTML-escaped, so markup
    that arrived entity-encoded stays inert and a second pass changes nothing.
    """

    if _MARKUP_CHARACTERS.isdisjoint(value):
        return value
    soup = BeautifulSoup(value, "html.parser")
    for element in soup.find_all(list(NON_TEXT_TAGS)):
        element.decompose()
    return escape(soup.get_text(), quote=False)
