"""confstore - In-memory configuration store with pluggable readers and writers."""

from __future__ import annotations

# Store
from confstore.store import ConfigStore

# Options
from confstore.options import LoadOptions, SaveOptions, StoreOptions

# Readers / writers
from confstore.codec import FileCodec
from confstore.readers import FileReader, InMemoryReader, Reader
from confstore.writers import FileWriter, InMemoryWriter, Writer

# Merge strategies
from confstore.utils.merge import MergeStrategy

# Errors
from confstore.errors import (
    ConfigParseError,
    ConfigStoreError,
    ConfigurationError,
    ErrorCodes,
    FileDoesNotExistError,
    FileIsNotReadableError,
    ImportDirectiveError,
    InvalidArgumentError,
    InvalidOptionTypeError,
    MissingOptionError,
    ReadOnlyError,
    UnsupportedFormatError,
    UnsupportedStrategyError,
)

__version__ = "0.1.0"

__all__ = [
    # Store
    "ConfigStore",
    # Options
    "StoreOptions",
    "LoadOptions",
    "SaveOptions",
    "MergeStrategy",
    # Readers / writers
    "Reader",
    "InMemoryReader",
    "FileReader",
    "Writer",
    "InMemoryWriter",
    "FileWriter",
    "FileCodec",
    # Errors
    "ErrorCodes",
    "ConfigStoreError",
    "InvalidArgumentError",
    "MissingOptionError",
    "InvalidOptionTypeError",
    "FileDoesNotExistError",
    "FileIsNotReadableError",
    "UnsupportedFormatError",
    "ConfigParseError",
    "ImportDirectiveError",
    "ConfigurationError",
    "ReadOnlyError",
    "UnsupportedStrategyError",
]
