"""Writer protocol."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

__all__ = ["Writer"]


@runtime_checkable
class Writer(Protocol):
    """Persists a configuration mapping to a declared sink."""

    def write(self, data: dict[str, Any], options: dict[str, Any]) -> None:
        """Write ``data`` to the sink."""
        ...
