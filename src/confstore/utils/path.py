"""Dotted-path access over nested mappings."""

from __future__ import annotations

from typing import Any

__all__ = ["get_path", "has_path", "set_path", "split_path"]


def split_path(path: str, separator: str = ".") -> list[str]:
    """Split a dotted path into its keys.

    A path that does not contain the separator is a single root key.
    """
    return path.split(separator)


def get_path(tree: dict[str, Any], path: str, separator: str = ".", default: Any = None) -> Any:
    """Return the value at ``path``, or ``default`` on the first missing key.

    Args:
        tree: The mapping to descend into.
        path: Keys joined by ``separator``.
        separator: Key delimiter.
        default: Returned as soon as a key is missing or a non-mapping is met.
    """
    current: Any = tree
    for key in split_path(path, separator):
        if isinstance(current, dict) and key in current:
            current = current[key]
        else:
            return default
    return current


def has_path(tree: dict[str, Any], path: str, separator: str = ".") -> bool:
    """Return True if every key of ``path`` resolves. ``None`` values count as present."""
    current: Any = tree
    for key in split_path(path, separator):
        if not isinstance(current, dict) or key not in current:
            return False
        current = current[key]
    return True


def set_path(tree: dict[str, Any], path: str, value: Any, separator: str = ".") -> None:
    """Assign ``value`` at ``path``, mutating ``tree`` in place.

    Intermediate keys that are missing, or that hold something other than a
    mapping, are replaced by an empty mapping.
    """
    keys = split_path(path, separator)
    current = tree
    for key in keys[:-1]:
        child = current.get(key)
        if not isinstance(child, dict):
            child = {}
            current[key] = child
        current = child
    current[keys[-1]] = value
