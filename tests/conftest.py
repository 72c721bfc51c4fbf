"""Shared fixtures for the confstore test suite."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from confstore import ConfigStore
from store_helpers import RecordingReader, RecordingWriter


@pytest.fixture
def make_store() -> Callable[..., ConfigStore]:
    """Factory for stores backed by the in-memory reader and writer."""

    def factory(data: dict[str, Any] | None = None, **options: Any) -> ConfigStore:
        opts: dict[str, Any] = {"reader": "array", "writer": "array"}
        opts.update(options)
        return ConfigStore(data, opts)

    return factory


@pytest.fixture
def sample_data() -> dict[str, Any]:
    """A small nested tree used across store tests."""
    return {
        "user": {"email": "test@test.com", "profile": {"age": 15}},
        "group": "internal",
    }


@pytest.fixture
def recording_reader() -> RecordingReader:
    return RecordingReader({"from": "reader"})


@pytest.fixture
def recording_writer() -> RecordingWriter:
    return RecordingWriter()
