"""Workspace inspection commands for the syncignore CLI.

Commands:
- ls: List files that would be synced
- info: Show pattern information for a workspace
- defaults: Show the built-in pattern table
"""

from __future__ import annotations

from pathlib import Path

import click

from syncignore.client.cli.config import load_filter
from syncignore.client.scanner import scan_workspace
from syncignore.core.config import FilterConfig
from syncignore.core.defaults import DefaultPatternProvider


@click.command("ls")
@click.argument(
    "root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
)
@click.pass_obj
def ls(config: FilterConfig, root: Path) -> None:
    """List files under ROOT that would be synced."""
    ignore = load_filter(root, config)
    for path in scan_workspace(root, ignore):
        click.echo(path)


@click.command()
@click.argument(
    "root",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
)
@click.pass_obj
def info(config: FilterConfig, root: Path) -> None:
    """Show pattern information for the workspace at ROOT."""
    ignore = load_filter(root, config)
    details = ignore.get_info()
    summary = ignore.get_patterns()

    click.echo(f"Pattern file: {root / config.ignore_filename}")
    click.echo(f"Custom patterns loaded: {'yes' if details.custom_patterns_loaded else 'no'}")
    click.echo(f"Default patterns: {details.default_patterns_count}")
    click.echo(f"Ignore patterns: {len(summary.ignore)}")
    click.echo(f"Negated patterns: {len(summary.negate)}")


@click.command()
@click.pass_obj
def defaults(config: FilterConfig) -> None:
    """Show the built-in pattern table."""
    provider = DefaultPatternProvider(ignore_filename=config.ignore_filename)
    for group, patterns in provider.groups.items():
        click.echo(f"[{group}]")
        for pattern in patterns:
            click.echo(f"  {pattern}")
    click.echo("[self]")
    click.echo(f"  {provider.ignore_filename}")
