"""Shared types for syncignore.

This module provides:
- Rule: A single compiled ignore pattern
- FilterInfo, PatternSummary: Introspection results
- SyncIgnoreError, PatternFileError: Exception classes
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


class SyncIgnoreError(Exception):
    """Base exception for syncignore errors."""


class PatternFileError(SyncIgnoreError):
    """Failed to read a pattern file for a reason other than it being absent.

    Attributes:
        path: Path of the pattern file that could not be read.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot read pattern file {path}: {reason}")


@dataclass(frozen=True)
class Rule:
    """A compiled ignore pattern.

    Attributes:
        raw: Original pattern text, kept for diagnostics.
        ordinal: Position of the rule in load order.
        negate: Pattern started with ``!`` and re-includes matching paths.
        directory_anchored: Pattern ended with ``/``.
        basename_only: Pattern has no ``/`` and applies to single segments.
        any_depth: Pattern started with ``**/``.
        pattern: Glob text left after prefix/suffix stripping.
        glob: Compiled matcher for ``pattern``.
    """

    raw: str
    ordinal: int
    negate: bool
    directory_anchored: bool
    basename_only: bool
    any_depth: bool
    pattern: str
    glob: re.Pattern[str] = field(compare=False, repr=False)

    @property
    def effective_pattern(self) -> str:
        """Pattern text without the negation prefix."""
        return self.raw[1:] if self.negate else self.raw


@dataclass(frozen=True)
class FilterInfo:
    """Diagnostic summary of an IgnoreFilter."""

    default_patterns_count: int
    custom_patterns_loaded: bool

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PatternSummary:
    """Effective pattern texts split by kind.

    Negations are listed without their ``!`` prefix.
    """

    ignore: list[str]
    negate: list[str]
