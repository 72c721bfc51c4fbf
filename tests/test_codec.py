"""Tests for FileCodec."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from confstore.codec import FileCodec
from confstore.errors import ConfigParseError, InvalidArgumentError, UnsupportedFormatError


@pytest.fixture
def codec() -> FileCodec:
    return FileCodec()


class TestLoad:
    def test_yaml(self, codec: FileCodec, tmp_path: Path) -> None:
        path = tmp_path / "config.yml"
        path.write_text("db:\n  host: localhost\n  port: 5432\n")
        assert codec.load(str(path)) == {"db": {"host": "localhost", "port": 5432}}

    def test_yaml_long_suffix(self, codec: FileCodec, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("a: 1\n")
        assert codec.load(str(path)) == {"a": 1}

    def test_json(self, codec: FileCodec, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text('{"a": {"b": [1, 2]}}')
        assert codec.load(str(path)) == {"a": {"b": [1, 2]}}

    @pytest.mark.parametrize("name", ["empty.yml", "empty.json"])
    def test_empty_file_is_empty_mapping(self, codec: FileCodec, tmp_path: Path, name: str) -> None:
        path = tmp_path / name
        path.write_text("")
        assert codec.load(str(path)) == {}

    def test_format_option_overrides_suffix(self, codec: FileCodec, tmp_path: Path) -> None:
        path = tmp_path / "config.conf"
        path.write_text("a: 1\n")
        assert codec.load(str(path), format="yaml") == {"a": 1}

    def test_unknown_suffix(self, codec: FileCodec, tmp_path: Path) -> None:
        path = tmp_path / "config.ini"
        path.write_text("[a]\n")
        with pytest.raises(UnsupportedFormatError) as exc_info:
            codec.load(str(path))
        assert isinstance(exc_info.value, InvalidArgumentError)
        assert exc_info.value.code == "UNSUPPORTED_FORMAT"

    def test_invalid_yaml(self, codec: FileCodec, tmp_path: Path) -> None:
        path = tmp_path / "bad.yml"
        path.write_text("a: [unclosed\n")
        with pytest.raises(ConfigParseError) as exc_info:
            codec.load(str(path))
        assert isinstance(exc_info.value.__cause__, yaml.YAMLError)

    def test_invalid_json(self, codec: FileCodec, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{nope")
        with pytest.raises(ConfigParseError):
            codec.load(str(path))

    def test_non_mapping_root(self, codec: FileCodec, tmp_path: Path) -> None:
        path = tmp_path / "list.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigParseError, match="must be a mapping"):
            codec.load(str(path))

    def test_undecodable_bytes(self, codec: FileCodec, tmp_path: Path) -> None:
        path = tmp_path / "binary.yml"
        path.write_bytes(b"a: \xff\xfe\n")
        with pytest.raises(ConfigParseError) as exc_info:
            codec.load(str(path))
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


class TestDump:
    def test_yaml_preserves_key_order(self, codec: FileCodec, tmp_path: Path) -> None:
        path = tmp_path / "out.yml"
        codec.dump({"b": 1, "a": {"c": [1, 2]}}, str(path))
        assert yaml.safe_load(path.read_text()) == {"b": 1, "a": {"c": [1, 2]}}
        assert path.read_text().index("b:") < path.read_text().index("a:")

    def test_json_indent_and_sort_keys(self, codec: FileCodec, tmp_path: Path) -> None:
        path = tmp_path / "out.json"
        codec.dump({"b": 1, "a": 2}, str(path), indent=4, sort_keys=True)
        text = path.read_text()
        assert json.loads(text) == {"a": 2, "b": 1}
        assert text.startswith('{\n    "a"')

    def test_create_dirs(self, codec: FileCodec, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "dir" / "out.yml"
        codec.dump({"a": 1}, str(path), create_dirs=True)
        assert codec.load(str(path)) == {"a": 1}

    def test_missing_parent_dir_raises_os_error(self, codec: FileCodec, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            codec.dump({"a": 1}, str(tmp_path / "missing" / "out.yml"))

    def test_unknown_suffix(self, codec: FileCodec, tmp_path: Path) -> None:
        with pytest.raises(UnsupportedFormatError):
            codec.dump({"a": 1}, str(tmp_path / "out.txt"))
