"""Configuration utilities for the syncignore CLI.

This module provides shared configuration functions used across CLI commands.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from syncignore.client.filter import IgnoreFilter
from syncignore.core.config import FilterConfig
from syncignore.core.types import SyncIgnoreError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ClickEchoHandler(logging.Handler):
    """Logging handler writing records to stderr through click.

    The stream is looked up on every record so output follows whatever
    stderr click is currently bound to.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def setup_logging(verbose: bool) -> None:
    """Configure logging for the ``syncignore`` logger.

    Args:
        verbose: Log debug messages instead of warnings only.
    """
    root_logger = logging.getLogger("syncignore")
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not any(isinstance(h, ClickEchoHandler) for h in root_logger.handlers):
        handler = ClickEchoHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(handler)


def build_config(
    filename: str | None,
    no_defaults: bool,
    patterns: tuple[str, ...],
) -> FilterConfig:
    """Merge command-line options over the environment configuration.

    Args:
        filename: Pattern file name override.
        no_defaults: Disable the built-in pattern table.
        patterns: Extra patterns given with ``--pattern``.

    Returns:
        The effective FilterConfig.
    """
    config = FilterConfig.from_env()
    try:
        return FilterConfig(
            ignore_filename=filename or config.ignore_filename,
            use_defaults=config.use_defaults and not no_defaults,
            extra_patterns=[*config.extra_patterns, *patterns],
        )
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--filename") from e


def load_filter(root: Path, config: FilterConfig) -> IgnoreFilter:
    """Build the filter for a workspace, exiting on read errors."""
    try:
        return IgnoreFilter.from_config(root, config)
    except SyncIgnoreError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
