"""Configuration readers."""

from confstore.readers.base import Reader
from confstore.readers.file import FileReader
from confstore.readers.memory import InMemoryReader

__all__ = ["Reader", "InMemoryReader", "FileReader"]
