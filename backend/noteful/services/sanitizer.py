"""
Noteful Backend — Markup Sanitizer
====================================

What:  Neutralizes HTML/script markup in free-text fields.
How:   Text with no '<' is returned unchanged. Anything else goes through
       bleach.clean() with a small formatting allow-list: tags outside the
       list are escaped (<script> becomes &lt;script&gt;), attributes outside
       the list are dropped, and entities already present are kept as-is, so
       running the sanitizer twice gives the same text as running it once.
Who:   Called by the resource services on every write and every read.

Example:
    >>> sanitize("<script>alert('xss')</script>Hello")
    "&lt;script&gt;alert('xss')&lt;/script&gt;Hello"
    >>> sanitize('<a href="https://x.test" onclick="steal()">x</a>')
    '<a href="https://x.test">x</a>'
"""

from typing import Any, Dict, Iterable

import bleach

ALLOWED_TAGS = frozenset({
    "a", "abbr", "b", "blockquote", "br", "code", "em",
    "i", "li", "ol", "p", "pre", "strong", "ul",
})

ALLOWED_ATTRIBUTES = {
    "a": ["href", "title"],
    "abbr": ["title"],
}

ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})


def sanitize(text: str) -> str:
    """
    Return `text` with unsafe markup neutralized.

    Text without a '<' cannot open a tag and is returned as-is, so plain
    text like "Tom & Jerry" or "5 > 3" is never escaped.
    """
    if not text or "<" not in text:
        return text
    return bleach.clean(
        text,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=False,
        strip_comments=True,
    )


def sanitize_fields(data: Dict[str, Any], fields: Iterable[str]) -> Dict[str, Any]:
    """
    Copy of `data` with every string value under `fields` sanitized.

    Missing keys and non-string values are left alone; the validator is in
    charge of deciding whether they are acceptable.
    """
    cleaned = dict(data)
    for name in fields:
        value = cleaned.get(name)
        if isinstance(value, str):
            cleaned[name] = sanitize(value)
    return cleaned
