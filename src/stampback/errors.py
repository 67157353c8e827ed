"""Exception hierarchy for backup and restore operations."""

from __future__ import annotations


class BackupError(Exception):
    """Base class for every error raised by the backup core."""


class SymlinkUnsupportedError(BackupError):
    """A source or target path is a symbolic link."""


class SourceNotFoundError(BackupError):
    """The source file or directory does not exist."""


class TargetNotFoundError(BackupError):
    """The target file or directory does not exist."""


class UnclassifiableError(BackupError):
    """Source and target exist but are not plain files or directories."""


class CopyFailedError(BackupError):
    """Creating the target container or copying data failed."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class MalformedBackupNameError(BackupError):
    """A file name does not follow ``<name>.<timestamp>.backup``."""


class RestoreConflictError(BackupError):
    """The path a restore would write to already exists."""
