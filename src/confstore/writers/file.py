"""Writer that encodes configuration into a file."""

from __future__ import annotations

from typing import Any

from confstore.codec import FileCodec
from confstore.errors import InvalidArgumentError

__all__ = ["FileWriter"]


class FileWriter:
    """Writes data to ``options["file"]`` through a :class:`FileCodec`.

    The remaining options are passed to the codec. ``OSError`` from the
    filesystem propagates unchanged.
    """

    def __init__(self, codec: FileCodec | None = None) -> None:
        self._codec = codec if codec is not None else FileCodec()

    @property
    def codec(self) -> FileCodec:
        return self._codec

    def write(self, data: dict[str, Any], options: dict[str, Any]) -> None:
        file_path = options.get("file")
        if file_path is None:
            raise InvalidArgumentError('Parameter "file" is mandatory.', details={"option": "file"})
        if not isinstance(file_path, str) or not file_path:
            raise InvalidArgumentError('Parameter "file" must be a non-empty string.', details={"option": "file"})

        codec_options = {k: v for k, v in options.items() if k != "file"}
        self._codec.dump(data, file_path, **codec_options)
