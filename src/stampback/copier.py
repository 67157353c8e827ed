"""Create timestamped backup artifacts."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from stampback.errors import CopyFailedError
from stampback.models import BackupName, BackupResult, BackupShape

logger = logging.getLogger(__name__)

_PARTIAL_SUFFIX = ".partial"


class BackupCopier:
    """Copies a source into its timestamped artifact for a given shape.

    One routine serves all four shapes. The shape decides two things: whether
    the target is a directory that holds the artifact or a file whose parent
    directory does, and whether the artifact is a single file or a tree.
    """

    def backup(
        self,
        source: str | Path,
        target: str | Path,
        shape: BackupShape,
        now: datetime | None = None,
    ) -> BackupResult:
        """Write ``<source-name>.<timestamp>.backup`` next to or inside *target*.

        Args:
            source: File or directory to back up.
            target: Directory receiving the artifact, or a file whose parent
                directory receives it.
            shape: Shape returned by the classifier for this pair.
            now: Timestamp to use instead of the current local time.

        Returns:
            Where the artifact was written and under which name.

        Raises:
            CopyFailedError: If the source changed since classification, the
                container cannot be created, or copying fails.
        """
        src = Path(source)
        tgt = Path(target)

        if not src.exists():
            msg = f"Source disappeared before copy: {src}"
            raise CopyFailedError(msg)
        if src.is_dir() != shape.source_is_dir:
            msg = f"Source changed kind since classification: {src}"
            raise CopyFailedError(msg)

        container = self._ensure_container(tgt, shape)

        original_name = Path(os.path.abspath(src)).name
        if not original_name:
            msg = f"Source has no file name to back up under: {src}"
            raise CopyFailedError(msg)

        if now is None:
            name = BackupName.now(original_name)
        else:
            name = BackupName(original_name=original_name, timestamp=now)
        artifact = container / name.filename

        if shape.source_is_dir:
            copy_tree_into_place(src, artifact)
        else:
            copy_file_into_place(src, artifact)

        logger.info("Backed up %s -> %s", src, artifact)
        return BackupResult(
            shape=shape, source=src, target=tgt, artifact=artifact, name=name
        )

    def _ensure_container(self, target: Path, shape: BackupShape) -> Path:
        """Create the target in the form the shape expects, return the artifact's parent."""
        try:
            if shape.target_is_dir:
                if not target.is_dir():
                    logger.debug("Creating target directory: %s", target)
                    target.mkdir(parents=True, exist_ok=True)
                return target

            if not target.is_file():
                logger.debug("Creating target file: %s", target)
                target.parent.mkdir(parents=True, exist_ok=True)
                target.touch()
        except OSError as exc:
            msg = f"Cannot create target {target}: {exc}"
            raise CopyFailedError(msg) from exc
        return target.parent


# ---------------------------------------------------------------------------
# Copy-then-rename helpers (shared with the restorer)
# ---------------------------------------------------------------------------


def copy_file_into_place(source: Path, destination: Path) -> None:
    """Copy a file to *destination* through a temporary sibling.

    An existing entry at *destination* is replaced.

    Raises:
        CopyFailedError: On any filesystem error. No partial file is left.
    """
    staging: Path | None = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            dir=destination.parent,
            prefix=f".{destination.name}.",
            suffix=_PARTIAL_SUFFIX,
        )
        os.close(fd)
        staging = Path(tmp_name)
        shutil.copy2(source, staging)
        _discard_directory(destination)
        os.replace(staging, destination)
    except OSError as exc:
        if staging is not None:
            staging.unlink(missing_ok=True)
        msg = f"Cannot copy {source} to {destination}: {exc}"
        raise CopyFailedError(msg) from exc


def copy_tree_into_place(source: Path, destination: Path) -> None:
    """Recursively copy a directory to *destination* through a temporary sibling.

    Symlinks inside the tree are copied as links and never followed. An
    existing entry at *destination* is replaced.

    Raises:
        CopyFailedError: On any filesystem error. No partial tree is left.
    """
    staging: Path | None = None
    try:
        staging = Path(
            tempfile.mkdtemp(
                dir=destination.parent,
                prefix=f".{destination.name}.",
                suffix=_PARTIAL_SUFFIX,
            )
        )
        shutil.copytree(
            source,
            staging,
            symlinks=True,
            dirs_exist_ok=True,
            ignore=_exclude(staging, destination),
        )
        if destination.is_dir() and not destination.is_symlink():
            shutil.rmtree(destination)
        elif destination.exists() or destination.is_symlink():
            destination.unlink()
        os.replace(staging, destination)
    except OSError as exc:
        if staging is not None:
            shutil.rmtree(staging, ignore_errors=True)
        msg = f"Cannot copy {source} to {destination}: {exc}"
        raise CopyFailedError(msg) from exc


def _discard_directory(path: Path) -> None:
    # os.replace cannot overwrite a directory with a file
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)


def _exclude(*paths: Path) -> Callable[[str, list[str]], set[str]]:
    """Build a ``copytree`` ignore hook that skips *paths*.

    Needed when the artifact lands inside the tree being copied.
    """
    excluded = {p.resolve() for p in paths}

    def ignore(directory: str, names: list[str]) -> set[str]:
        base = Path(directory).resolve()
        return {name for name in names if base / name in excluded}

    return ignore
