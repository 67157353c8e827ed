"""Pydantic models for backup and restore operations."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator

from stampback.errors import MalformedBackupNameError
from stampback.naming import BACKUP_SUFFIX, compose_name, local_now, parse_timestamp

# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


class BackupShape(StrEnum):
    """Kind of backup, derived from the filesystem kinds of source and target."""

    FILE_TO_DIRECTORY = "file_to_directory"
    FILE_TO_FILE = "file_to_file"
    DIRECTORY_TO_DIRECTORY = "directory_to_directory"
    DIRECTORY_TO_FILE = "directory_to_file"

    @classmethod
    def from_kinds(cls, source_is_dir: bool, target_is_dir: bool) -> BackupShape:
        if source_is_dir:
            if target_is_dir:
                return cls.DIRECTORY_TO_DIRECTORY
            return cls.DIRECTORY_TO_FILE
        if target_is_dir:
            return cls.FILE_TO_DIRECTORY
        return cls.FILE_TO_FILE

    @property
    def source_is_dir(self) -> bool:
        return self in (BackupShape.DIRECTORY_TO_DIRECTORY, BackupShape.DIRECTORY_TO_FILE)

    @property
    def target_is_dir(self) -> bool:
        return self in (BackupShape.FILE_TO_DIRECTORY, BackupShape.DIRECTORY_TO_DIRECTORY)


# ---------------------------------------------------------------------------
# Naming
# ---------------------------------------------------------------------------


class BackupName(BaseModel):
    """Original name plus timestamp, as encoded in an artifact file name."""

    original_name: str
    timestamp: datetime

    @field_validator("original_name")
    @classmethod
    def _check_original_name(cls, value: str) -> str:
        if not value or "/" in value or value in (".", ".."):
            msg = f"Invalid original name: {value!r}"
            raise ValueError(msg)
        return value

    @field_validator("timestamp")
    @classmethod
    def _truncate_to_seconds(cls, value: datetime) -> datetime:
        return value.replace(microsecond=0)

    @classmethod
    def now(cls, original_name: str) -> BackupName:
        """Stamp *original_name* with the current local time."""
        return cls(original_name=original_name, timestamp=local_now())

    @classmethod
    def parse(cls, filename: str) -> BackupName:
        """Recover the original name and timestamp from an artifact file name.

        Args:
            filename: Bare file name such as ``hosts.2024-01-01_00-00-00.backup``.

        Raises:
            MalformedBackupNameError: If the suffix, the timestamp segment or
                the original name is missing or invalid.
        """
        if not filename.endswith(BACKUP_SUFFIX):
            msg = f"Not a backup artifact (missing {BACKUP_SUFFIX!r} suffix): {filename}"
            raise MalformedBackupNameError(msg)

        stem = filename[: -len(BACKUP_SUFFIX)]
        original, sep, stamp = stem.rpartition(".")
        if not sep or not original:
            msg = f"Backup name has no original name or timestamp: {filename}"
            raise MalformedBackupNameError(msg)

        try:
            timestamp = parse_timestamp(stamp)
        except ValueError as exc:
            msg = f"Backup name has an unparsable timestamp {stamp!r}: {filename}"
            raise MalformedBackupNameError(msg) from exc

        try:
            return cls(original_name=original, timestamp=timestamp)
        except ValidationError as exc:
            msg = f"Backup name has an invalid original name: {filename}"
            raise MalformedBackupNameError(msg) from exc

    @property
    def filename(self) -> str:
        return compose_name(self.original_name, self.timestamp)


# ---------------------------------------------------------------------------
# Operation results
# ---------------------------------------------------------------------------


class BackupResult(BaseModel):
    """Outcome of a completed backup."""

    shape: BackupShape
    source: Path
    target: Path
    artifact: Path
    name: BackupName


class RestoreResult(BaseModel):
    """Outcome of a completed restore."""

    artifact: Path
    destination: Path
    restored: Path
    name: BackupName
    is_directory: bool
