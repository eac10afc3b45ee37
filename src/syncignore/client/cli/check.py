"""Path checking command for the syncignore CLI.

Commands:
- check: Report whether paths are synced or ignored
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from syncignore.client.cli.config import load_filter
from syncignore.core.config import FilterConfig


@click.command()
@click.argument("paths", nargs=-1, required=True)
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Workspace root holding the pattern file.",
)
@click.option("--explain", is_flag=True, help="Show the pattern deciding each path.")
@click.pass_obj
def check(config: FilterConfig, paths: tuple[str, ...], root: Path, explain: bool) -> None:
    """Check whether PATHS would be synced.

    PATHS are relative to the workspace root. Exits with status 1 if any
    path is ignored.
    """
    ignore = load_filter(root, config)

    any_ignored = False
    for path in paths:
        rule = ignore.explain(path)
        ignored = rule is not None and not rule.negate
        any_ignored = any_ignored or ignored
        status = "ignored" if ignored else "synced"
        if explain and rule is not None:
            click.echo(f"{status}\t{path}\t({rule.raw})")
        else:
            click.echo(f"{status}\t{path}")

    if any_ignored:
        sys.exit(1)
