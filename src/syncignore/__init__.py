"""syncignore - Ignore-pattern filtering for workspace sync.

Typical use::

    from syncignore import IgnoreFilter

    ignore = IgnoreFilter.load_from_workspace(workspace_dir)
    to_upload = ignore.filter(candidate_paths)
"""

from syncignore.client import IgnoreFilter, load_pattern_file, scan_workspace
from syncignore.core import (
    DEFAULT_PATTERN_GROUPS,
    IGNORE_FILENAME,
    DefaultPatternProvider,
    FilterConfig,
    FilterInfo,
    PatternFileError,
    PatternSummary,
    Rule,
    RuleSet,
    SyncIgnoreError,
    compile_pattern,
    evaluate,
    is_ignored,
    normalize_path,
)

__all__ = [
    # Facade
    "IgnoreFilter",
    "load_pattern_file",
    "scan_workspace",
    # Core
    "DEFAULT_PATTERN_GROUPS",
    "IGNORE_FILENAME",
    "DefaultPatternProvider",
    "FilterConfig",
    "RuleSet",
    "compile_pattern",
    "evaluate",
    "is_ignored",
    "normalize_path",
    # Types
    "FilterInfo",
    "PatternFileError",
    "PatternSummary",
    "Rule",
    "SyncIgnoreError",
]
