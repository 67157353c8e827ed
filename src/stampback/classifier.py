"""Determine the backup shape from current filesystem metadata."""

from __future__ import annotations

import logging
import stat
from pathlib import Path

from stampback.errors import SourceNotFoundError, TargetNotFoundError, UnclassifiableError
from stampback.models import BackupShape

logger = logging.getLogger(__name__)


class BackupClassifier:
    """Classifies a (source, target) pair into one of four backup shapes.

    Classification only reads metadata; it never touches the filesystem
    otherwise. Metadata is fetched fresh on every call.
    """

    def classify(self, source: str | Path, target: str | Path) -> BackupShape:
        """Return the shape for backing up *source* into *target*.

        Raises:
            SourceNotFoundError: If *source* cannot be stat'ed.
            TargetNotFoundError: If *target* cannot be stat'ed.
            UnclassifiableError: If either is neither a regular file nor a
                directory (device, fifo, socket).
        """
        try:
            source_mode = Path(source).stat().st_mode
        except OSError as exc:
            msg = f"Source file or directory does not exist: {source}"
            raise SourceNotFoundError(msg) from exc

        try:
            target_mode = Path(target).stat().st_mode
        except OSError as exc:
            msg = f"Target file or directory does not exist: {target}"
            raise TargetNotFoundError(msg) from exc

        if not _is_file_or_dir(source_mode) or not _is_file_or_dir(target_mode):
            msg = f"Cannot back up {source} into {target}: unsupported file type"
            raise UnclassifiableError(msg)

        shape = BackupShape.from_kinds(
            source_is_dir=stat.S_ISDIR(source_mode),
            target_is_dir=stat.S_ISDIR(target_mode),
        )
        logger.debug("Classified %s -> %s as %s", source, target, shape)
        return shape


def _is_file_or_dir(mode: int) -> bool:
    return stat.S_ISREG(mode) or stat.S_ISDIR(mode)
