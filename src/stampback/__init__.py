"""Stampback: timestamped backup and restore of files and directories."""

__version__ = "0.1.0"

from stampback.errors import (
    BackupError,
    CopyFailedError,
    MalformedBackupNameError,
    RestoreConflictError,
    SourceNotFoundError,
    SymlinkUnsupportedError,
    TargetNotFoundError,
    UnclassifiableError,
)
from stampback.models import BackupName, BackupResult, BackupShape, RestoreResult
from stampback.service import run_backup, run_restore

__all__ = [
    "BackupError",
    "BackupName",
    "BackupResult",
    "BackupShape",
    "CopyFailedError",
    "MalformedBackupNameError",
    "RestoreConflictError",
    "RestoreResult",
    "SourceNotFoundError",
    "SymlinkUnsupportedError",
    "TargetNotFoundError",
    "UnclassifiableError",
    "run_backup",
    "run_restore",
]
