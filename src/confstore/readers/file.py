"""Reader that decodes a configuration file."""

from __future__ import annotations

import os
from typing import Any

from confstore.codec import FileCodec
from confstore.errors import (
    FileDoesNotExistError,
    FileIsNotReadableError,
    InvalidOptionTypeError,
    MissingOptionError,
)

__all__ = ["FileReader"]


class FileReader:
    """Reads ``options["file"]`` through a :class:`FileCodec`.

    The remaining options are passed to the codec, e.g. ``encoding`` or
    ``format``.
    """

    def __init__(self, codec: FileCodec | None = None) -> None:
        self._codec = codec if codec is not None else FileCodec()

    @property
    def codec(self) -> FileCodec:
        return self._codec

    def read(self, options: dict[str, Any]) -> dict[str, Any]:
        """Read the configured file.

        Raises:
            MissingOptionError: ``file`` is absent.
            InvalidOptionTypeError: ``file`` is not a string.
            FileDoesNotExistError: ``file`` is not a regular file.
            FileIsNotReadableError: ``file`` cannot be read.
        """
        file_path = options.get("file")
        if file_path is None:
            raise MissingOptionError(option="file")
        if not isinstance(file_path, str):
            raise InvalidOptionTypeError(option="file", types="str", actual=file_path)
        if not os.path.isfile(file_path):
            raise FileDoesNotExistError(file_path=file_path)
        if not os.access(file_path, os.R_OK):
            raise FileIsNotReadableError(file_path=file_path)

        codec_options = {k: v for k, v in options.items() if k not in ("file", "data")}
        return self._codec.load(file_path, **codec_options)
