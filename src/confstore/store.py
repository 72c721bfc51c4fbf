"""ConfigStore: the configuration container."""

from __future__ import annotations

import copy
import logging
import os
from typing import Any, Callable

from confstore.errors import (
    ConfigurationError,
    ImportDirectiveError,
    InvalidArgumentError,
    InvalidOptionTypeError,
    ReadOnlyError,
    UnsupportedStrategyError,
)
from confstore.options import LoadOptions, SaveOptions, StoreOptions, parse_options
from confstore.readers import FileReader, InMemoryReader, Reader
from confstore.utils.merge import MergeStrategy, combine, replace_recursive
from confstore.utils.path import get_path, has_path, set_path
from confstore.utils.template import substitute
from confstore.writers import FileWriter, InMemoryWriter, Writer

__all__ = ["ConfigStore"]

logger = logging.getLogger(__name__)

_BUILTIN_READERS: dict[str, Callable[[], Reader]] = {
    "array": InMemoryReader,
    "file": FileReader,
}

_BUILTIN_WRITERS: dict[str, Callable[[], Writer]] = {
    "array": InMemoryWriter,
    "file": FileWriter,
}

_ALIASES: dict[str, str] = {
    field.alias: name for name, field in StoreOptions.model_fields.items() if field.alias
}


def _noop(store: ConfigStore, options: Any) -> None:
    return None


def _option_name(name: str) -> str:
    return _ALIASES.get(name, name)


def _options_dict(options: StoreOptions) -> dict[str, Any]:
    # Field values as stored; reader and writer instances stay unserialized.
    values = {name: getattr(options, name) for name in StoreOptions.model_fields}
    values.update(options.model_extra or {})
    return values


class ConfigStore:
    """In-memory configuration tree with pluggable readers and writers.

    Values are addressed by dotted paths (``"db.primary.host"``). Data is
    brought in with :meth:`load` through the configured reader and persisted
    with :meth:`save` through the configured writer. Both return the store so
    calls can be chained.

    Not thread-safe: a store is meant to have a single owner.

    Args:
        data: Initial tree. Template variables are substituted into it.
        options: Store options, see :class:`~confstore.options.StoreOptions`.
    """

    def __init__(
        self, data: dict[str, Any] | None = None, options: dict[str, Any] | StoreOptions | None = None
    ) -> None:
        self._data: dict[str, Any] = {}
        self.set_options(options)
        self._assign({} if data is None else data, replace_template_variables=True)

    # === Options ===

    @property
    def options(self) -> StoreOptions:
        """The validated store options."""
        return self._options

    def set_options(self, options: dict[str, Any] | StoreOptions | None) -> ConfigStore:
        """Replace all options, applying defaults, and re-resolve reader, writer and hooks.

        Raises:
            InvalidArgumentError: If an option value is invalid or the reader or
                writer cannot be resolved.
            ConfigurationError: If a hook is not callable.
        """
        if isinstance(options, StoreOptions):
            options = _options_dict(options)
        parsed = parse_options(StoreOptions, options)

        reader = self._resolve("reader", parsed.reader, _BUILTIN_READERS, Reader)
        writer = self._resolve("writer", parsed.writer, _BUILTIN_WRITERS, Writer)
        on_after_load = self._resolve_hook("on_after_load", parsed.on_after_load)
        on_before_save = self._resolve_hook("on_before_save", parsed.on_before_save)

        self._options = parsed
        self._reader = reader
        self._writer = writer
        self._on_after_load = on_after_load
        self._on_before_save = on_before_save
        return self

    def set_option(self, name: str, value: Any) -> ConfigStore:
        """Change a single option, keeping the others."""
        current = _options_dict(self._options)
        current[_option_name(name)] = value
        return self.set_options(current)

    def get_option(self, name: str, default: Any = None) -> Any:
        """Return an option by snake_case or camelCase name, or ``default``."""
        name = _option_name(name)
        if name in StoreOptions.model_fields:
            return getattr(self._options, name)
        return (self._options.model_extra or {}).get(name, default)

    @staticmethod
    def _resolve(kind: str, value: Any, builtins: dict[str, Callable[[], Any]], protocol: type) -> Any:
        if isinstance(value, str):
            factory = builtins.get(value)
            if factory is None:
                raise InvalidArgumentError(
                    f'Invalid {kind} "{value}". Valid {kind} strings: {", ".join(builtins)}.',
                    details={"option": kind, "value": value},
                )
            logger.debug("Using built-in %s '%s'", kind, value)
            return factory()
        if isinstance(value, protocol):
            return value
        raise InvalidArgumentError(
            f'Option "{kind}" must be a string or an object implementing {protocol.__name__}, '
            f"got {type(value).__name__}.",
            details={"option": kind},
        )

    @staticmethod
    def _resolve_hook(name: str, value: Any) -> Callable[[ConfigStore, Any], Any]:
        if value is None:
            return _noop
        if not callable(value):
            raise ConfigurationError(f'Option "{name}" must be a callable, got {type(value).__name__}.')
        return value

    # === Reader / writer ===

    @property
    def reader(self) -> Reader:
        return self._reader

    @reader.setter
    def reader(self, reader: Reader) -> None:
        self.set_reader(reader)

    def set_reader(self, reader: Reader) -> ConfigStore:
        self._reader = self._resolve("reader", reader, _BUILTIN_READERS, Reader)
        return self

    @property
    def writer(self) -> Writer:
        return self._writer

    @writer.setter
    def writer(self, writer: Writer) -> None:
        self.set_writer(writer)

    def set_writer(self, writer: Writer) -> ConfigStore:
        self._writer = self._resolve("writer", writer, _BUILTIN_WRITERS, Writer)
        return self

    # === Read-only guard ===

    @property
    def read_only(self) -> bool:
        return self._options.read_only

    def set_read_only(self, read_only: bool = True) -> ConfigStore:
        """Mark the store read-only; every mutating call then raises ReadOnlyError.

        The flag is validated with the other options. Reader, writer and hooks
        already in place are kept.

        Raises:
            InvalidArgumentError: If ``read_only`` is not a boolean value.
        """
        current = _options_dict(self._options)
        current["read_only"] = read_only
        self._options = parse_options(StoreOptions, current)
        return self

    def _check_writable(self, operation: str) -> None:
        if self._options.read_only:
            raise ReadOnlyError(operation=operation)

    # === Data ===

    @property
    def data(self) -> dict[str, Any]:
        """The owned tree. Mutate it through the store's methods."""
        return self._data

    def get_data(self) -> dict[str, Any]:
        return self._data

    def set_data(self, data: dict[str, Any], replace_template_variables: bool = True) -> ConfigStore:
        """Replace the whole tree with a copy of ``data``."""
        self._check_writable("set_data")
        self._assign(data, replace_template_variables)
        return self

    def clear(self) -> ConfigStore:
        self._check_writable("clear")
        self._data = {}
        return self

    def _assign(self, data: Any, replace_template_variables: bool) -> None:
        if not isinstance(data, dict):
            raise InvalidArgumentError(f"Config data must be a mapping, got {type(data).__name__}.")
        data = copy.deepcopy(data)
        if replace_template_variables:
            data = self.replace_template_variables(data)
        self._data = data

    def replace_template_variables(self, data: Any) -> Any:
        """Substitute the configured template variables into ``data``."""
        return substitute(data, self._options.template_variables)

    def _separator(self, separator: str | None) -> str:
        return separator if separator else self._options.separator

    def get(self, index: str, default: Any = None, *, separator: str | None = None) -> Any:
        """Return the value at ``index`` or ``default`` if any key is missing."""
        return get_path(self._data, index, self._separator(separator), default)

    def has(self, index: str, *, separator: str | None = None) -> bool:
        return has_path(self._data, index, self._separator(separator))

    def set(self, index: str, value: Any, *, separator: str | None = None) -> ConfigStore:
        """Assign a copy of ``value`` at ``index``, creating intermediate mappings."""
        self._check_writable("set")
        set_path(self._data, index, copy.deepcopy(value), self._separator(separator))
        return self

    # === Merge / replace ===

    def merge(self, index: str, value: Any, default: Any = None, *, separator: str | None = None) -> ConfigStore:
        """Shallow-merge ``value`` into the value at ``index``."""
        return self._combine(MergeStrategy.MERGE, index, value, default, separator)

    def merge_recursive(
        self, index: str, value: Any, default: Any = None, *, separator: str | None = None
    ) -> ConfigStore:
        """Deep-merge ``value`` into the value at ``index``; lists are concatenated."""
        return self._combine(MergeStrategy.MERGE_RECURSIVE, index, value, default, separator)

    def replace(self, index: str, value: Any, default: Any = None, *, separator: str | None = None) -> ConfigStore:
        """Shallow-replace keys of the value at ``index`` with those of ``value``."""
        return self._combine(MergeStrategy.REPLACE, index, value, default, separator)

    def replace_recursive(
        self, index: str, value: Any, default: Any = None, *, separator: str | None = None
    ) -> ConfigStore:
        """Deep-replace the value at ``index`` with ``value``; lists are overwritten."""
        return self._combine(MergeStrategy.REPLACE_RECURSIVE, index, value, default, separator)

    def call_function(
        self, name: str, index: str, value: Any, default: Any = None, *, separator: str | None = None
    ) -> ConfigStore:
        """Apply the merge strategy called ``name`` (e.g. ``"mergeRecursive"``).

        Raises:
            UnsupportedStrategyError: If ``name`` is not a known strategy.
        """
        try:
            strategy = MergeStrategy(name)
        except ValueError as e:
            raise UnsupportedStrategyError(strategy=str(name)) from e
        return self._combine(strategy, index, value, default, separator)

    def _combine(
        self, strategy: MergeStrategy, index: str, value: Any, default: Any, separator: str | None
    ) -> ConfigStore:
        self._check_writable(strategy.value)
        sep = self._separator(separator)
        value = copy.deepcopy(value)
        current = get_path(self._data, index, sep, copy.deepcopy(default))
        if current is None:
            current = [] if isinstance(value, list) else {}
        set_path(self._data, index, combine(strategy, current, value), sep)
        return self

    # === Load / save ===

    def load(self, options: dict[str, Any] | None = None, **kwargs: Any) -> ConfigStore:
        """Read data with the configured reader and merge it into the tree.

        Options (mapping and/or keyword arguments, either naming style):
            data: Data for the in-memory reader.
            file: File for the file reader; also the base for relative imports.
            load_in_key: Merge the data under this path instead of at the root.
            process_imports: Follow the top-level ``import`` list.
            clear_first: Empty the tree before merging.
            reader_options: Passed to the reader; ``file`` and ``data`` are
                filled in from the options above when not set.
            strategy: Merge strategy, defaults to ``default_load_strategy``.

        Raises:
            InvalidOptionTypeError: If ``load_in_key`` is not a string.
            ImportDirectiveError: If the ``import`` directive is malformed.
            ReadOnlyError: If the store is read-only.
        """
        self._check_writable("load")
        opts = parse_options(LoadOptions, {**(options or {}), **kwargs})

        reader_options = dict(opts.reader_options)
        if reader_options.get("file") is None:
            reader_options["file"] = opts.file
        if reader_options.get("data") is None:
            reader_options["data"] = opts.data
        opts.reader_options = reader_options

        if opts.load_in_key is not None and not isinstance(opts.load_in_key, str):
            raise InvalidOptionTypeError(option="load_in_key", types="str", actual=opts.load_in_key)

        strategy = opts.strategy or self._options.default_load_strategy
        logger.debug(
            "Loading config (file=%s, strategy=%s, load_in_key=%s)",
            reader_options.get("file"),
            strategy.value,
            opts.load_in_key,
        )

        data = copy.deepcopy(self._reader.read(reader_options))

        if opts.process_imports and "import" in data:
            data = self._process_imports(data, opts, strategy)

        if opts.clear_first:
            self._data = {}

        if opts.load_in_key is not None:
            current = self.get(opts.load_in_key, {})
            if not isinstance(current, dict):
                current = {}
            self.set(opts.load_in_key, self.replace_template_variables(combine(strategy, current, data)))
        else:
            self._assign(combine(strategy, self._data, data), replace_template_variables=True)

        self._on_after_load(self, opts)
        return self

    def _process_imports(self, data: dict[str, Any], opts: LoadOptions, strategy: MergeStrategy) -> dict[str, Any]:
        imports = data["import"]
        if not isinstance(imports, list):
            raise ImportDirectiveError(f'"import" must be a list, got {type(imports).__name__}.')

        base_dir = os.path.dirname(opts.file) if isinstance(opts.file, str) and opts.file else None

        for i, entry in enumerate(imports):
            if not isinstance(entry, dict):
                raise ImportDirectiveError(
                    f'Each "import" element must be a mapping, element {i} is {type(entry).__name__}.'
                )
            entry = dict(entry)
            file_path = entry.get("file")
            if file_path is not None:
                if not isinstance(file_path, str):
                    raise ImportDirectiveError(f'"file" of import {i} must be a string.')
                if base_dir is not None and not file_path.startswith("/"):
                    file_path = os.path.join(base_dir, file_path)
                if not os.path.isfile(file_path):
                    logger.debug("Skipping import %d: %s does not exist", i, file_path)
                    continue
                entry["file"] = file_path

            logger.debug("Processing import %d (file=%s)", i, entry.get("file"))
            read_options = replace_recursive(opts.reader_options, entry)
            data = combine(strategy, data, copy.deepcopy(self._reader.read(read_options)))
        return data

    def save(self, options: dict[str, Any] | None = None, **kwargs: Any) -> ConfigStore:
        """Hand the tree to the configured writer.

        Options (mapping and/or keyword arguments):
            file: Target file, copied into ``writer_options`` when not set there.
            writer_options: Passed to the writer.
        """
        opts = parse_options(SaveOptions, {**(options or {}), **kwargs})

        writer_options = dict(opts.writer_options)
        if writer_options.get("file") is None:
            writer_options["file"] = opts.file
        opts.writer_options = writer_options

        self._on_before_save(self, opts)
        logger.debug("Saving config (file=%s)", writer_options.get("file"))
        self._writer.write(self._data, writer_options)
        return self
