"""Reader protocol."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

__all__ = ["Reader"]


@runtime_checkable
class Reader(Protocol):
    """Produces a configuration mapping from a declared source."""

    def read(self, options: dict[str, Any]) -> dict[str, Any]:
        """Read and return the source's data."""
        ...
