"""Configuration writers."""

from confstore.writers.base import Writer
from confstore.writers.file import FileWriter
from confstore.writers.memory import InMemoryWriter

__all__ = ["Writer", "InMemoryWriter", "FileWriter"]
