"""Domain helpers for blog slug generation and validation."""
from __future__ import annotations

import re
import unicodedata

SLUG_PATTERN = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")
_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")


def generate_slug(title: str | None) -> str:
    """
    Build a URL-safe slug from a (typically Vietnamese) title.

    >>> generate_slug("Lộ Trình Học JLPT N5 Trong 3 Tháng")
    'lo-trinh-hoc-jlpt-n5-trong-3-thang'
    """
    value = (title or "").lower()
    value = unicodedata.normalize("NFD", value)
    value = _COMBINING_MARKS.sub("", value)
    # "đ" has no NFD decomposition
    value = value.replace("đ", "d")
    value = _DISALLOWED.sub("", value).strip()
    value = _WHITESPACE.sub("-", value)
    return _HYPHENS.sub("-", value)


def is_valid_slug(value: str | None) -> bool:
    """Return True when the slug only holds lowercase ASCII words joined by single hyphens."""
    if not value:
        return False
    return bool(SLUG_PATTERN.fullmatch(value))
