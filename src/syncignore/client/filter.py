"""Ignore filter for workspace synchronization.

This module provides:
- IgnoreFilter: Decides which workspace paths are transferred
- load_pattern_file: Reads a ``.syncignore`` file
- split_lines: Splits pattern file content on ``\\n`` and ``\\r\\n``

An IgnoreFilter is built once per sync session and never changes
afterwards, so it can be shared between worker threads.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from pathlib import Path

from syncignore.core.config import FilterConfig
from syncignore.core.defaults import IGNORE_FILENAME, DefaultPatternProvider
from syncignore.core.matcher import evaluate, is_ignored
from syncignore.core.ruleset import RuleSet
from syncignore.core.types import FilterInfo, PatternFileError, PatternSummary, Rule

logger = logging.getLogger(__name__)


def split_lines(content: str) -> list[str]:
    """Split pattern file content on ``\\n`` and ``\\r\\n`` only.

    Other characters that ``str.splitlines`` treats as breaks (form feed,
    lone ``\\r``, ``\\u2028`` and the like) stay part of the line.
    """
    lines = [line.removesuffix("\r") for line in content.split("\n")]
    if lines[-1] == "":
        lines.pop()
    return lines


def load_pattern_file(path: Path) -> list[str] | None:
    """Read pattern lines from a file.

    Args:
        path: Pattern file to read.

    Returns:
        The file's lines (``\\n`` or ``\\r\\n`` endings), or None if the
        file does not exist.

    Raises:
        PatternFileError: If the file exists but cannot be read.
    """
    try:
        content = path.read_bytes().decode("utf-8", errors="replace")
    except FileNotFoundError:
        return None
    except OSError as e:
        raise PatternFileError(path, e.strerror or str(e)) from e
    return split_lines(content)


class IgnoreFilter:
    """Gitignore-style filter for workspace sync.

    Usage:
        ignore = IgnoreFilter.load_from_workspace(workspace_dir)
        to_upload = ignore.filter(candidate_paths)
    """

    def __init__(
        self,
        custom_patterns: Iterable[str] | None = None,
        *,
        defaults: DefaultPatternProvider | None = None,
        use_defaults: bool = True,
    ) -> None:
        """Initialize with custom patterns.

        Args:
            custom_patterns: Gitignore-style patterns applied after the
                defaults, in order.
            defaults: Default table (standard table if None).
            use_defaults: Set to False to skip the default table.
        """
        if use_defaults:
            self._rule_set = RuleSet.build(custom_patterns, defaults)
        else:
            self._rule_set = RuleSet.from_patterns_only(custom_patterns or ())
        self._custom_patterns_loaded = False

    @classmethod
    def load_from_workspace(
        cls,
        root_dir: Path | str,
        *,
        filename: str = IGNORE_FILENAME,
        extra_patterns: Iterable[str] | None = None,
        defaults: DefaultPatternProvider | None = None,
        use_defaults: bool = True,
    ) -> IgnoreFilter:
        """Build a filter from the pattern file in a workspace root.

        A missing file is not an error: the filter falls back to the
        defaults (plus ``extra_patterns``).

        Args:
            root_dir: Workspace root directory.
            filename: Pattern file name inside ``root_dir``.
            extra_patterns: Patterns applied before the file's patterns.
            defaults: Default table (standard table for ``filename`` if None).
            use_defaults: Set to False to skip the default table.

        Raises:
            PatternFileError: If the pattern file exists but cannot be read.
        """
        pattern_path = Path(root_dir) / filename
        lines = load_pattern_file(pattern_path)
        return cls._from_lines(
            lines,
            source=pattern_path,
            extra_patterns=extra_patterns,
            defaults=defaults or DefaultPatternProvider(ignore_filename=filename),
            use_defaults=use_defaults,
        )

    @classmethod
    async def load_from_workspace_async(
        cls,
        root_dir: Path | str,
        *,
        filename: str = IGNORE_FILENAME,
        extra_patterns: Iterable[str] | None = None,
        defaults: DefaultPatternProvider | None = None,
        use_defaults: bool = True,
    ) -> IgnoreFilter:
        """Async variant of :meth:`load_from_workspace`.

        The file is read in a worker thread so the event loop is not blocked.
        """
        pattern_path = Path(root_dir) / filename
        lines = await asyncio.to_thread(load_pattern_file, pattern_path)
        return cls._from_lines(
            lines,
            source=pattern_path,
            extra_patterns=extra_patterns,
            defaults=defaults or DefaultPatternProvider(ignore_filename=filename),
            use_defaults=use_defaults,
        )

    @classmethod
    def from_config(cls, root_dir: Path | str, config: FilterConfig) -> IgnoreFilter:
        """Build a filter for a workspace from a FilterConfig."""
        return cls.load_from_workspace(
            root_dir,
            filename=config.ignore_filename,
            extra_patterns=config.extra_patterns,
            use_defaults=config.use_defaults,
        )

    @classmethod
    def from_content(
        cls,
        content: str,
        *,
        defaults: DefaultPatternProvider | None = None,
    ) -> IgnoreFilter:
        """Build a filter from pattern file content.

        The content is parsed exactly as a workspace pattern file would be.
        """
        return cls(split_lines(content), defaults=defaults)

    @classmethod
    def _from_lines(
        cls,
        lines: list[str] | None,
        *,
        source: Path,
        extra_patterns: Iterable[str] | None,
        defaults: DefaultPatternProvider,
        use_defaults: bool,
    ) -> IgnoreFilter:
        patterns = list(extra_patterns or ())
        if lines is None:
            logger.debug("No %s file found, using defaults only", source.name)
            return cls(patterns, defaults=defaults, use_defaults=use_defaults)

        instance = cls(patterns + lines, defaults=defaults, use_defaults=use_defaults)
        instance._custom_patterns_loaded = True
        logger.info(
            "Loaded %s: %d custom patterns active",
            source.name,
            len(instance._rule_set.custom_rules),
        )
        return instance

    @property
    def rule_set(self) -> RuleSet:
        """Compiled rules used by this filter."""
        return self._rule_set

    @property
    def custom_patterns_loaded(self) -> bool:
        """True if a workspace pattern file was found and parsed."""
        return self._custom_patterns_loaded

    def is_ignored(self, path: str) -> bool:
        """Check if a path should be skipped.

        Args:
            path: Path relative to the workspace root, with ``/`` or ``\\``
                separators.

        Returns:
            True if the path must not be transferred.
        """
        return is_ignored(path, self._rule_set)

    def explain(self, path: str) -> Rule | None:
        """Return the rule deciding a path, or None if no rule matches."""
        return evaluate(path, self._rule_set)

    def filter(self, paths: Iterable[str]) -> list[str]:
        """Remove ignored paths, keeping the input order."""
        return [path for path in paths if not self.is_ignored(path)]

    def get_info(self) -> FilterInfo:
        """Get information about loaded patterns."""
        return FilterInfo(
            default_patterns_count=self._rule_set.default_count,
            custom_patterns_loaded=self._custom_patterns_loaded,
        )

    def get_patterns(self) -> PatternSummary:
        """Get the effective ignore and negate patterns."""
        return self._rule_set.summary()
