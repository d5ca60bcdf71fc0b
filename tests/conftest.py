"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from pile.settings import Settings


@pytest.fixture(autouse=True)
def isolate_settings(tmp_path, monkeypatch):
    """Point the settings store at a temp directory."""
    config = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config))
    monkeypatch.setattr(Settings, "_instance", None)
    return config / "pile" / "settings.json"


@pytest.fixture
def make_file(tmp_path):
    """Create a file of a given size below tmp_path/tree."""
    root = tmp_path / "tree"
    root.mkdir()

    def _make(relpath: str, size: int) -> Path:
        path = root / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"x" * size)
        return path

    _make.root = root
    return _make
