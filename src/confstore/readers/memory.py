"""Reader that returns data handed over in its options."""

from __future__ import annotations

from typing import Any

from confstore.errors import InvalidArgumentError

__all__ = ["InMemoryReader"]


class InMemoryReader:
    """Returns ``options["data"]`` verbatim."""

    def read(self, options: dict[str, Any]) -> dict[str, Any]:
        data = options.get("data")
        if data is None:
            raise InvalidArgumentError('Parameter "data" is mandatory.', details={"option": "data"})
        if not isinstance(data, dict):
            raise InvalidArgumentError(
                f'Parameter "data" must be a mapping, got {type(data).__name__}.',
                details={"option": "data"},
            )
        return data
