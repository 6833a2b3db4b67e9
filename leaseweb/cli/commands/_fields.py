"""Helpers for pulling table cells out of API responses."""

from __future__ import annotations

import math
from typing import Any
from urllib.parse import quote

from ..labels import raw_text


def dig(obj: Any, path: str) -> Any:
    """Value at a dotted `path` in nested dicts, or None when any step is missing."""
    current = obj
    for part in path.split("."):
        if not isinstance(current, dict) or part not in current:
            return None
        current = current[part]
    return current


def cell(obj: Any, path: str) -> str:
    """Plain-text cell for a table; missing values render empty."""
    value = dig(obj, path)
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value == math.trunc(value):
        return str(math.trunc(value))
    if isinstance(value, (str, int, float)):
        return str(value)
    return raw_text(value)


def items(data: Any, key: str) -> list[dict[str, Any]]:
    """The object elements of `data[key]`; anything else yields an empty list."""
    value = data.get(key) if isinstance(data, dict) else None
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def date_only(value: str) -> str:
    head, sep, _ = value.partition("T")
    return head if sep and head else value


def segment(value: str) -> str:
    """Escape one user-supplied URL path segment."""
    return quote(value, safe="")
