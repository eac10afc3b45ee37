"""Configuration for ignore filters.

This module defines the configuration shared by the library entry points
and the command line.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from syncignore.core.defaults import IGNORE_FILENAME

# Environment variables read by FilterConfig.from_env
ENV_FILENAME = "SYNCIGNORE_FILENAME"
ENV_NO_DEFAULTS = "SYNCIGNORE_NO_DEFAULTS"
ENV_PATTERNS = "SYNCIGNORE_PATTERNS"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class FilterConfig:
    """Configuration for building an IgnoreFilter.

    Attributes:
        ignore_filename: Name of the pattern file in a workspace root.
        use_defaults: Whether the built-in pattern table is applied.
        extra_patterns: Patterns applied in addition to the pattern file.
    """

    ignore_filename: str = IGNORE_FILENAME
    use_defaults: bool = True
    extra_patterns: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Normalize and validate the pattern file name."""
        self.ignore_filename = self.ignore_filename.strip()
        if not self.ignore_filename:
            raise ValueError("ignore_filename must not be empty")
        if "/" in self.ignore_filename or "\\" in self.ignore_filename:
            raise ValueError(
                f"ignore_filename must be a bare file name: {self.ignore_filename!r}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> FilterConfig:
        """Build a configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``).

        Returns:
            Config with ``SYNCIGNORE_FILENAME``, ``SYNCIGNORE_NO_DEFAULTS``
            and comma separated ``SYNCIGNORE_PATTERNS`` applied.
        """
        env = os.environ if environ is None else environ
        patterns = [
            pattern.strip()
            for pattern in env.get(ENV_PATTERNS, "").split(",")
            if pattern.strip()
        ]
        return cls(
            ignore_filename=env.get(ENV_FILENAME) or IGNORE_FILENAME,
            use_defaults=env.get(ENV_NO_DEFAULTS, "").strip().lower() not in _TRUTHY,
            extra_patterns=patterns,
        )
