"""Fixtures for confstore integration tests."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Any, Callable

import pytest

from confstore import ConfigStore


@pytest.fixture
def fixtures_dir() -> Path:
    """Returns the absolute path to the tests/integration/fixtures/ directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def config_dir(tmp_path: Path, fixtures_dir: Path) -> Path:
    """Copies fixture files to a temp directory for test isolation."""
    dest = tmp_path / "config"
    shutil.copytree(fixtures_dir, dest, dirs_exist_ok=True)
    return dest


@pytest.fixture
def file_store() -> Callable[..., ConfigStore]:
    """Factory for stores backed by the file reader and writer."""

    def factory(data: dict[str, Any] | None = None, **options: Any) -> ConfigStore:
        opts: dict[str, Any] = {"reader": "file", "writer": "file"}
        opts.update(options)
        return ConfigStore(data, opts)

    return factory
