"""Field-name translation between document keys (camelCase) and SQL columns (snake_case)."""
from __future__ import annotations

import re
from typing import Any, Mapping

_UPPER = re.compile(r"[A-Z]")
_UNDERSCORE_LOWER = re.compile(r"_([a-z0-9])")


def to_snake(name: str) -> str:
    """``isActive`` -> ``is_active``; already snake_case names are returned unchanged."""
    return _UPPER.sub(lambda m: "_" + m.group(0).lower(), name)


def to_camel(name: str) -> str:
    """``is_active`` -> ``isActive``; already camelCase names are returned unchanged."""
    return _UNDERSCORE_LOWER.sub(lambda m: m.group(1).upper(), name)


def keys_to_snake(data: Mapping[str, Any]) -> dict[str, Any]:
    # Top-level only: nested JSON values (syllabus weeks, author) keep their own keys.
    return {to_snake(key): value for key, value in data.items()}


def keys_to_camel(data: Mapping[str, Any]) -> dict[str, Any]:
    return {to_camel(key): value for key, value in data.items()}
