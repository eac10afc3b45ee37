"""Core module - Pattern compilation, rule sets and matching."""

from syncignore.core.compiler import compile_pattern, compile_patterns, glob_to_regex
from syncignore.core.config import FilterConfig
from syncignore.core.defaults import (
    DEFAULT_PATTERN_GROUPS,
    IGNORE_FILENAME,
    DefaultPatternProvider,
)
from syncignore.core.matcher import evaluate, is_ignored, normalize_path, split_segments
from syncignore.core.ruleset import RuleSet
from syncignore.core.types import (
    FilterInfo,
    PatternFileError,
    PatternSummary,
    Rule,
    SyncIgnoreError,
)

__all__ = [
    # Compiler
    "compile_pattern",
    "compile_patterns",
    "glob_to_regex",
    # Config
    "FilterConfig",
    # Defaults
    "DEFAULT_PATTERN_GROUPS",
    "IGNORE_FILENAME",
    "DefaultPatternProvider",
    # Matcher
    "evaluate",
    "is_ignored",
    "normalize_path",
    "split_segments",
    # Rule sets
    "RuleSet",
    # Types
    "FilterInfo",
    "PatternFileError",
    "PatternSummary",
    "Rule",
    "SyncIgnoreError",
]
