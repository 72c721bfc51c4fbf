"""Tests for option models."""

from __future__ import annotations

import pytest

from confstore.errors import InvalidArgumentError
from confstore.options import LoadOptions, SaveOptions, StoreOptions, parse_options
from confstore.utils.merge import MergeStrategy


class TestStoreOptions:
    def test_defaults(self) -> None:
        opts = parse_options(StoreOptions, None)
        assert opts.reader == "file"
        assert opts.writer == "file"
        assert opts.separator == "."
        assert opts.on_after_load is None
        assert opts.on_before_save is None
        assert opts.template_variables == {}
        assert opts.default_load_strategy is MergeStrategy.REPLACE_RECURSIVE
        assert opts.read_only is False

    def test_camel_case_aliases(self) -> None:
        opts = parse_options(
            StoreOptions,
            {"templateVariables": {"%a%": "b"}, "defaultLoadStrategy": "merge_recursive", "readOnly": True},
        )
        assert opts.template_variables == {"%a%": "b"}
        assert opts.default_load_strategy is MergeStrategy.MERGE_RECURSIVE
        assert opts.read_only is True

    def test_snake_case_names(self) -> None:
        opts = parse_options(StoreOptions, {"template_variables": {"%a%": "b"}})
        assert opts.template_variables == {"%a%": "b"}

    def test_extra_options_are_kept(self) -> None:
        opts = parse_options(StoreOptions, {"environment": "prod"})
        assert opts.model_extra == {"environment": "prod"}

    def test_empty_separator_is_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            parse_options(StoreOptions, {"separator": ""})
        assert exc_info.value.details["errors"][0]["field"] == "separator"

    def test_unknown_strategy_is_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            parse_options(StoreOptions, {"default_load_strategy": "shuffle"})

    def test_template_variables_must_be_a_mapping(self) -> None:
        with pytest.raises(InvalidArgumentError, match="template_variables|templateVariables"):
            parse_options(StoreOptions, {"templateVariables": ["%a%"]})


class TestLoadOptions:
    def test_defaults(self) -> None:
        opts = parse_options(LoadOptions, {})
        assert opts.data is None
        assert opts.file is None
        assert opts.load_in_key is None
        assert opts.process_imports is False
        assert opts.clear_first is False
        assert opts.reader_options == {}
        assert opts.strategy is None

    def test_aliases(self) -> None:
        opts = parse_options(
            LoadOptions,
            {"loadInKey": "cfg", "processImports": True, "clearFirst": True, "readerOptions": {"x": 1}},
        )
        assert opts.load_in_key == "cfg"
        assert opts.process_imports is True
        assert opts.clear_first is True
        assert opts.reader_options == {"x": 1}

    def test_reader_options_must_be_a_mapping(self) -> None:
        with pytest.raises(InvalidArgumentError):
            parse_options(LoadOptions, {"readerOptions": "nope"})


class TestSaveOptions:
    def test_defaults(self) -> None:
        opts = parse_options(SaveOptions, None)
        assert opts.file is None
        assert opts.writer_options == {}

    def test_alias(self) -> None:
        assert parse_options(SaveOptions, {"writerOptions": {"indent": 4}}).writer_options == {"indent": 4}
