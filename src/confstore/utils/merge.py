"""Merge and replace strategies for combining configuration data."""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Callable

from confstore.errors import InvalidArgumentError, UnsupportedStrategyError

__all__ = [
    "MergeStrategy",
    "merge",
    "merge_recursive",
    "replace",
    "replace_recursive",
    "combine",
]


class MergeStrategy(str, Enum):
    """How two values are combined."""

    MERGE = "merge"
    MERGE_RECURSIVE = "merge_recursive"
    REPLACE = "replace"
    REPLACE_RECURSIVE = "replace_recursive"

    @classmethod
    def _missing_(cls, value: object) -> MergeStrategy | None:
        # Accept camelCase spellings such as "mergeRecursive".
        if isinstance(value, str):
            normalized = re.sub(r"(?<!^)(?=[A-Z])", "_", value).lower()
            for member in cls:
                if member.value == normalized:
                    return member
        return None


def _check_operands(name: str, base: Any, other: Any) -> None:
    if isinstance(base, dict) and isinstance(other, dict):
        return
    if isinstance(base, list) and isinstance(other, list):
        return
    raise InvalidArgumentError(
        f"Cannot {name} {type(other).__name__} into {type(base).__name__}: "
        "both operands must be mappings or both must be lists.",
        details={"strategy": name},
    )


def _replace_positions(base: list[Any], other: list[Any]) -> list[Any]:
    result = list(base)
    for i, item in enumerate(other):
        if i < len(result):
            result[i] = item
        else:
            result.append(item)
    return result


def merge(base: Any, other: Any) -> Any:
    """Shallow merge: mapping keys of ``other`` overwrite, lists are concatenated."""
    _check_operands("merge", base, other)
    if isinstance(base, list):
        return base + other
    return {**base, **other}


def replace(base: Any, other: Any) -> Any:
    """Shallow replace: mapping keys of ``other`` overwrite, list items overwrite by position."""
    _check_operands("replace", base, other)
    if isinstance(base, list):
        return _replace_positions(base, other)
    return {**base, **other}


def merge_recursive(base: Any, other: Any) -> Any:
    """Deep merge.

    Shared keys holding two mappings are merged recursively, shared keys
    holding two lists are concatenated, and any other shared key takes the
    value from ``other``.
    """
    _check_operands("merge_recursive", base, other)
    if isinstance(base, list):
        return base + other
    result = dict(base)
    for key, value in other.items():
        current = result.get(key)
        if key in result and isinstance(current, dict) and isinstance(value, dict):
            result[key] = merge_recursive(current, value)
        elif key in result and isinstance(current, list) and isinstance(value, list):
            result[key] = current + value
        else:
            result[key] = value
    return result


def replace_recursive(base: Any, other: Any) -> Any:
    """Deep replace.

    Shared keys holding two mappings are merged recursively; any other shared
    key, lists included, takes the value from ``other`` wholesale.
    """
    _check_operands("replace_recursive", base, other)
    if isinstance(base, list):
        return _replace_positions(base, other)
    result = dict(base)
    for key, value in other.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = replace_recursive(current, value)
        else:
            result[key] = value
    return result


_STRATEGIES: dict[MergeStrategy, Callable[[Any, Any], Any]] = {
    MergeStrategy.MERGE: merge,
    MergeStrategy.MERGE_RECURSIVE: merge_recursive,
    MergeStrategy.REPLACE: replace,
    MergeStrategy.REPLACE_RECURSIVE: replace_recursive,
}


def combine(strategy: MergeStrategy | str, base: Any, other: Any) -> Any:
    """Combine ``base`` and ``other`` with the named strategy.

    Raises:
        UnsupportedStrategyError: If ``strategy`` is not a known strategy name.
    """
    try:
        func = _STRATEGIES[MergeStrategy(strategy)]
    except ValueError as exc:
        raise UnsupportedStrategyError(strategy=str(strategy)) from exc
    return func(base, other)
