"""Command-line interface for syncignore.

This module provides the main CLI entry point and assembles all commands.

Commands:
- check: Report whether paths are synced or ignored
- ls: List files that would be synced
- info: Show pattern information for a workspace
- defaults: Show the built-in pattern table
"""

from __future__ import annotations

import click

from syncignore.client.cli.check import check
from syncignore.client.cli.config import build_config, load_filter, setup_logging
from syncignore.client.cli.workspace import defaults, info, ls


@click.group()
@click.version_option(package_name="syncignore")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option("--filename", default=None, help="Pattern file name (default: .syncignore).")
@click.option("--no-defaults", is_flag=True, help="Do not apply the built-in patterns.")
@click.option(
    "--pattern",
    "-p",
    "patterns",
    multiple=True,
    help="Extra pattern, may be repeated.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    filename: str | None,
    no_defaults: bool,
    patterns: tuple[str, ...],
) -> None:
    """syncignore - Decide which workspace files are synced."""
    setup_logging(verbose)
    ctx.obj = build_config(filename, no_defaults, patterns)


# Path commands
cli.add_command(check)

# Workspace commands
cli.add_command(ls)
cli.add_command(info)
cli.add_command(defaults)


def main() -> None:
    """Entry point for the CLI."""
    cli()


__all__ = [
    # Main entry points
    "cli",
    "main",
    # Config utilities
    "build_config",
    "load_filter",
    "setup_logging",
]
