"""Static usage text and the exit path that prints it."""

from __future__ import annotations

from typing import NoReturn

import click

USAGE_LINES = [
    "Usage: backup [-v] <mode> <path/to/file/or/directory> [target]",
    "Backup and restore files or directories.",
    "",
    "Mode:",
    "    b, backup     Create a timestamped backup of the file or directory",
    "    r, restore    Restore the file or directory from a backup",
    "    h, help       Display this help message",
    "",
    "Options:",
    "    -v, --verbose Log every step",
    "",
    "If the target is not specified, the current directory is used.",
    "The target must exist. If it is a file, the backup is written next to it.",
    "Symlinks are not supported, neither as source nor as target.",
    "",
    "The backup file or directory will be named as follows:",
    "    <target directory>/<filename>.<timestamp>.backup",
    "",
    "A restore writes <filename> into the target (default: the current",
    "directory) and never overwrites an existing path.",
    "",
    "Examples:",
    "    backup b /etc/hosts",
    "    backup b /etc/hosts /home/user/backups",
    "    backup r /home/user/backups/hosts.2018-01-01_00-00-00.backup",
]


def usage_text() -> str:
    return "\n".join(USAGE_LINES)


def print_usage(exit_code: int, to_stdout: bool) -> NoReturn:
    """Print the usage text and terminate with *exit_code*.

    Args:
        exit_code: Process exit status.
        to_stdout: Write to stdout when ``True``, otherwise to stderr.
    """
    click.echo(usage_text(), err=not to_stdout)
    raise SystemExit(exit_code)
