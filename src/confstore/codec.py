"""File codec: decode and encode configuration files as YAML or JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from confstore.errors import ConfigParseError, UnsupportedFormatError

__all__ = ["FileCodec"]

logger = logging.getLogger(__name__)

_SUFFIX_FORMATS: dict[str, str] = {
    ".yml": "yaml",
    ".yaml": "yaml",
    ".json": "json",
}


class FileCodec:
    """Reads and writes configuration mappings, choosing the format by file suffix.

    Recognised options (all others are ignored):

    - ``format``: ``"yaml"`` or ``"json"``, overriding the suffix.
    - ``encoding``: text encoding, default ``"utf-8"``.
    - ``indent``: JSON indentation, default 2.
    - ``sort_keys``: sort mapping keys on write, default False.
    - ``create_dirs``: create missing parent directories on write.
    """

    def format_for(self, file_path: str, options: dict[str, Any]) -> str:
        """Return the format name for ``file_path``."""
        fmt = options.get("format") or _SUFFIX_FORMATS.get(Path(file_path).suffix.lower())
        if fmt not in ("yaml", "json"):
            raise UnsupportedFormatError(file_path=file_path, file_format=str(fmt or Path(file_path).suffix))
        return fmt

    def load(self, file_path: str, **options: Any) -> dict[str, Any]:
        """Decode ``file_path`` into a mapping. An empty file yields ``{}``."""
        fmt = self.format_for(file_path, options)
        encoding = options.get("encoding") or "utf-8"

        try:
            content = Path(file_path).read_text(encoding=encoding)
        except UnicodeDecodeError as e:
            raise ConfigParseError(file_path=file_path, reason=f"not valid {encoding} text: {e}", cause=e) from e

        try:
            if fmt == "yaml":
                data = yaml.safe_load(content)
            else:
                data = json.loads(content) if content.strip() else None
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigParseError(file_path=file_path, reason=f"invalid {fmt}: {e}", cause=e) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigParseError(
                file_path=file_path,
                reason=f"document root must be a mapping, got {type(data).__name__}",
            )
        logger.debug("Decoded %s file %s", fmt, file_path)
        return data

    def dump(self, data: dict[str, Any], file_path: str, **options: Any) -> None:
        """Encode ``data`` and write it to ``file_path``."""
        fmt = self.format_for(file_path, options)
        sort_keys = bool(options.get("sort_keys", False))

        if fmt == "yaml":
            content = yaml.safe_dump(data, default_flow_style=False, sort_keys=sort_keys, allow_unicode=True)
        else:
            indent = options.get("indent", 2)
            content = json.dumps(data, indent=indent, sort_keys=sort_keys, ensure_ascii=False) + "\n"

        path = Path(file_path)
        if options.get("create_dirs"):
            path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding=options.get("encoding") or "utf-8")
        logger.debug("Wrote %s file %s", fmt, file_path)
