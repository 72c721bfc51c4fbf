"""Placeholder substitution over scalar and nested data."""

from __future__ import annotations

import copy
import re
from collections.abc import Mapping
from typing import Any

__all__ = ["substitute"]


def _compile(placeholders: Mapping[str, Any]) -> re.Pattern[str] | None:
    # Longest first so that "%user_name%" wins over "%user%" at the same position.
    keys = sorted((k for k in placeholders if k), key=len, reverse=True)
    if not keys:
        return None
    return re.compile("|".join(re.escape(k) for k in keys))


def _walk(data: Any, placeholders: Mapping[str, Any], pattern: re.Pattern[str]) -> Any:
    if isinstance(data, str):
        if data and data in placeholders:
            return copy.deepcopy(placeholders[data])
        return pattern.sub(lambda m: str(placeholders[m.group(0)]), data)
    if isinstance(data, dict):
        return {k: _walk(v, placeholders, pattern) for k, v in data.items()}
    if isinstance(data, list):
        return [_walk(item, placeholders, pattern) for item in data]
    return data


def substitute(data: Any, placeholders: Mapping[str, Any]) -> Any:
    """Replace placeholder substrings in every string leaf of ``data``.

    All placeholders are matched in a single pass, so replacement text is
    never scanned again. A string that is exactly one placeholder is replaced
    by a deep copy of the raw value, keeping its type; elsewhere values are
    inserted with ``str()``. Mappings and lists are rebuilt, never mutated.
    Non-string scalars pass through unchanged.

    Args:
        data: A scalar, mapping or list.
        placeholders: Literal placeholder -> replacement value.

    Returns:
        The substituted data, or ``data`` itself when ``placeholders`` is empty.
    """
    pattern = _compile(placeholders) if placeholders else None
    if pattern is None:
        return data
    return _walk(data, placeholders, pattern)
