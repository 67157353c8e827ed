"""Reject symlinks before any backup or restore logic runs."""

from __future__ import annotations

from pathlib import Path

from stampback.errors import SymlinkUnsupportedError


def ensure_no_symlinks(*paths: str | Path) -> None:
    """Raise if any of *paths* is a symbolic link.

    Missing paths are not symlinks and pass through; existence is checked
    later by the classifier.

    Raises:
        SymlinkUnsupportedError: On the first path that is a symlink.
    """
    for path in paths:
        if Path(path).is_symlink():
            msg = f"Symlinks are not supported: {path}"
            raise SymlinkUnsupportedError(msg)
