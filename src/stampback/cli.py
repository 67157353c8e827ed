"""CLI for stampback using click."""

from __future__ import annotations

import logging
from typing import Any, NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from stampback.errors import BackupError
from stampback.service import run_backup, run_restore
from stampback.usage import print_usage, usage_text

console = Console()
err_console = Console(stderr=True)


def _setup_logging(verbose: bool) -> None:
    """Configure logging with rich handler."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False)],
    )


def _fail(message: str) -> NoReturn:
    """Report *message* with the usage text on stderr and exit 1."""
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    click.echo("", err=True)
    print_usage(1, to_stdout=False)


class ModeGroup(click.Group):
    """Command group that accepts single-letter mode aliases.

    Unknown modes, unknown options and extra arguments print the usage text
    and exit 1 instead of click's own usage error.
    """

    ALIASES = {"b": "backup", "r": "restore", "h": "help"}

    def make_context(
        self,
        info_name: str | None,
        args: list[str],
        parent: click.Context | None = None,
        **extra: Any,
    ) -> click.Context:
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as exc:
            _fail(exc.format_message())

    def invoke(self, ctx: click.Context) -> Any:
        # sub-command arguments are parsed here
        try:
            return super().invoke(ctx)
        except click.UsageError as exc:
            _fail(exc.format_message())

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        name = cmd_name.strip()
        return super().get_command(ctx, self.ALIASES.get(name, name))

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if self.get_command(ctx, args[0]) is None and not ctx.resilient_parsing:
            _fail(f"Unknown mode: {args[0]}")
        return super().resolve_command(ctx, args)

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        formatter.write(usage_text())
        formatter.write("\n")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


@click.group(cls=ModeGroup, invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Stampback: timestamped backup and restore."""
    _setup_logging(verbose)
    if ctx.invoked_subcommand is None:
        err_console.print("[red]No mode given[/red]")
        click.echo("", err=True)
        print_usage(1, to_stdout=False)


# ---------------------------------------------------------------------------
# Modes
# ---------------------------------------------------------------------------


@main.command(name="backup")
@click.argument("source", required=False)
@click.argument("target", required=False)
def backup_cmd(source: str | None, target: str | None) -> None:
    """Create a timestamped backup of SOURCE inside TARGET.

    TARGET defaults to the current directory.
    """
    if source is None:
        _fail("No action received")

    try:
        result = run_backup(source, target)
    except BackupError as exc:
        _fail(str(exc))

    console.print(f"[green]Backup created:[/green] {escape(str(result.artifact))}")


@main.command(name="restore")
@click.argument("artifact", required=False)
@click.argument("destination", required=False)
def restore_cmd(artifact: str | None, destination: str | None) -> None:
    """Restore ARTIFACT under its original name into DESTINATION.

    DESTINATION defaults to the current directory.
    """
    if artifact is None:
        _fail("No backup given to restore")

    try:
        result = run_restore(artifact, destination)
    except BackupError as exc:
        _fail(str(exc))

    kind = "Directory" if result.is_directory else "File"
    console.print(f"[green]{kind} restored:[/green] {escape(str(result.restored))}")


@main.command(name="help")
def help_cmd() -> None:
    """Display the usage text."""
    print_usage(0, to_stdout=True)
