"""Restore backup artifacts under their original names."""

from __future__ import annotations

import logging
from pathlib import Path

from stampback.copier import copy_file_into_place, copy_tree_into_place
from stampback.errors import RestoreConflictError, SourceNotFoundError, TargetNotFoundError
from stampback.guard import ensure_no_symlinks
from stampback.models import BackupName, RestoreResult

logger = logging.getLogger(__name__)


class BackupRestorer:
    """Reverses a backup by copying an artifact back under its original name."""

    def restore(
        self,
        artifact: str | Path,
        destination: str | Path | None = None,
    ) -> RestoreResult:
        """Restore *artifact* into *destination*.

        The artifact name is parsed before anything else, so a malformed
        name fails without touching the filesystem. Existing files are never
        overwritten.

        Args:
            artifact: Path to a ``<name>.<timestamp>.backup`` file or directory.
            destination: Directory to restore into, or a file whose parent
                directory is used. Defaults to the current directory.

        Returns:
            Where the original was restored.

        Raises:
            MalformedBackupNameError: If the artifact name does not parse.
            SymlinkUnsupportedError: If artifact or destination is a symlink.
            SourceNotFoundError: If the artifact does not exist.
            TargetNotFoundError: If the destination does not exist.
            RestoreConflictError: If the restored path already exists.
            CopyFailedError: If copying fails.
        """
        src = Path(artifact)
        dst = Path.cwd() if destination is None else Path(destination)

        name = BackupName.parse(src.name)
        ensure_no_symlinks(src, dst)

        if not src.exists():
            msg = f"Backup artifact does not exist: {src}"
            raise SourceNotFoundError(msg)
        if not dst.exists():
            msg = f"Restore destination does not exist: {dst}"
            raise TargetNotFoundError(msg)

        container = dst if dst.is_dir() else dst.parent
        restored = container / name.original_name
        if restored.exists() or restored.is_symlink():
            msg = f"Refusing to overwrite existing path: {restored}"
            raise RestoreConflictError(msg)

        is_directory = src.is_dir()
        if is_directory:
            copy_tree_into_place(src, restored)
        else:
            copy_file_into_place(src, restored)

        logger.info(
            "Restored %s -> %s (backup taken %s)",
            src,
            restored,
            name.timestamp.isoformat(sep=" "),
        )
        return RestoreResult(
            artifact=src,
            destination=dst,
            restored=restored,
            name=name,
            is_directory=is_directory,
        )
