"""Backup artifact naming convention: ``<name>.<YYYY-MM-DD_HH-MM-SS>.backup``."""

from __future__ import annotations

from datetime import datetime

BACKUP_SUFFIX = ".backup"
TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


def local_now() -> datetime:
    """Return local wall-clock time truncated to whole seconds."""
    return datetime.now().replace(microsecond=0)


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(text: str) -> datetime:
    """Parse a timestamp segment.

    Raises:
        ValueError: If *text* is not exactly ``YYYY-MM-DD_HH-MM-SS``.
    """
    parsed = datetime.strptime(text, TIMESTAMP_FORMAT)
    # strptime accepts unpadded fields such as "2024-1-1_0-0-0"
    if format_timestamp(parsed) != text:
        msg = f"Timestamp is not zero-padded: {text!r}"
        raise ValueError(msg)
    return parsed


def compose_name(original_name: str, moment: datetime) -> str:
    return f"{original_name}.{format_timestamp(moment)}{BACKUP_SUFFIX}"
