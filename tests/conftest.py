"""Shared test fixtures for stampback tests."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest


@pytest.fixture
def fixed_now() -> datetime:
    """Return a fixed backup timestamp."""
    return datetime(2024, 1, 1, 0, 0, 0)


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """Return a small regular file to back up."""
    path = tmp_path / "hosts"
    path.write_bytes(b"127.0.0.1 localhost\n")
    return path


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Return a directory with nested files to back up."""
    root = tmp_path / "project"
    (root / "sub" / "deep").mkdir(parents=True)
    (root / "a.txt").write_text("a")
    (root / "sub" / "b.txt").write_text("b")
    (root / "sub" / "deep" / "c.bin").write_bytes(b"\x00\x01\x02")
    return root


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """Return an empty existing target directory."""
    target = tmp_path / "backups"
    target.mkdir()
    return target

