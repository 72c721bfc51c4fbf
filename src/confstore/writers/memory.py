"""Writer that discards its input."""

from __future__ import annotations

from typing import Any

__all__ = ["InMemoryWriter"]


class InMemoryWriter:
    """No-op writer for stores that live only in memory."""

    def write(self, data: dict[str, Any], options: dict[str, Any]) -> None:
        return None
