"""Backup and restore entry points: guard, classify, copy."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from stampback.classifier import BackupClassifier
from stampback.copier import BackupCopier
from stampback.guard import ensure_no_symlinks
from stampback.models import BackupResult, RestoreResult
from stampback.restorer import BackupRestorer

logger = logging.getLogger(__name__)


def run_backup(
    source: str | Path,
    target: str | Path | None = None,
    now: datetime | None = None,
) -> BackupResult:
    """Back up *source* into *target* (default: the current directory).

    Symlinks are rejected before classification, and classification errors
    surface before anything is written. Errors propagate as
    :class:`~stampback.errors.BackupError` subclasses; this function never
    exits the process.
    """
    tgt = Path.cwd() if target is None else Path(target)

    ensure_no_symlinks(source, tgt)
    shape = BackupClassifier().classify(source, tgt)
    logger.debug("Backup shape: %s", shape)
    return BackupCopier().backup(source, tgt, shape, now=now)


def run_restore(
    artifact: str | Path,
    destination: str | Path | None = None,
) -> RestoreResult:
    """Restore *artifact* into *destination* (default: the current directory)."""
    return BackupRestorer().restore(artifact, destination)
