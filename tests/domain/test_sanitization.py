from __future__ import annotations

import pytest

from chait.domain.sanitization import strip_markup


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("<b>Bag</b>", "Bag"),
        ('<p class="note" onclick="x()">Long <i>woollen</i> coat</p>', "Long woollen coat"),
        ("<script>alert('x')</script>Hat", "Hat"),
        ("<style>p { color: red }</style>Scarf", "Scarf"),
        ("Fish &amp; chips", "Fish &amp; chips"),
        ("Fish & chips", "Fish &amp; chips"),
        ("&lt;script&gt;alert(1)&lt;/script&gt;Coat", "&lt;script&gt;alert(1)&lt;/script&gt;Coat"),
        ("1 > 0", "1 &gt; 0"),
        ("Plain text", "Plain text"),
    ],
)
def test_strip_markup(raw: str, expected: str) -> None:
    assert strip_markup(raw) == expected


def test_strip_markup_is_idempotent() -> None:
    once = strip_markup("<div><b>Bag</b> with <a href='#'>strap</a></div>")

    assert once == "Bag with strap"
    assert strip_markup(once) == once


def test_strip_markup_never_decodes_entities_into_tags() -> None:
    raw = "&lt;img src=x onerror=alert(1)&gt;Dress"

    once = strip_markup(raw)
    twice = strip_markup(once)

    assert "<" not in once
    assert "<" not in twice
    assert twice == once
