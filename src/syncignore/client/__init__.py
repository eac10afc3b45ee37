"""Client module - Ignore filter facade and workspace scanning.

Components:
- **IgnoreFilter**: Owns one RuleSet and answers is_ignored / filter
- **scan_workspace**: Lists syncable files in a workspace directory
"""

from syncignore.client.filter import IgnoreFilter, load_pattern_file
from syncignore.client.scanner import scan_workspace

__all__ = [
    "IgnoreFilter",
    "load_pattern_file",
    "scan_workspace",
]
