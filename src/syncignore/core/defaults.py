"""Built-in ignore patterns.

These rules apply to every workspace, even without a ``.syncignore`` file.
They are grouped so entries are easy to review and extend.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from syncignore.core.compiler import compile_pattern

# Name of the per-workspace pattern file
IGNORE_FILENAME = ".syncignore"

DEFAULT_PATTERN_GROUPS: Mapping[str, tuple[str, ...]] = {
    # VCS and operating system metadata
    "system": (".git/", ".DS_Store", "Thumbs.db", "*.swp", "*.swo", "*~"),
    # Dependencies and build artifacts
    "build": (
        "node_modules/",
        "__pycache__/",
        "*.pyc",
        ".gradle/",
        "build/",
        "dist/",
        "target/",
    ),
    # IDE settings
    "ide": (".idea/", ".vscode/", "*.iml"),
    # Environment files, keeping the shareable example
    "secrets": (".env*", "!.env.example"),
    # Log files
    "logs": ("*.log", "logs/"),
    # Temporary files
    "temp": ("*.tmp", "*.temp", ".cache/"),
}


@dataclass(frozen=True)
class DefaultPatternProvider:
    """Supplies the default rule table for a RuleSet.

    Attributes:
        ignore_filename: Pattern file name, appended so it never syncs.
        groups: Pattern table keyed by group name.
    """

    ignore_filename: str = IGNORE_FILENAME
    groups: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: DEFAULT_PATTERN_GROUPS
    )

    def patterns(self) -> list[str]:
        """Default patterns in table order, ending with the pattern file."""
        result = [pattern for group in self.groups.values() for pattern in group]
        if self.ignore_filename:
            result.append(self.ignore_filename)
        return result

    def validate(self) -> None:
        """Check that every default entry compiles to a rule.

        Raises:
            ValueError: If an entry is blank, a comment, or empty once its
                markers are stripped.
        """
        for ordinal, pattern in enumerate(self.patterns()):
            if compile_pattern(pattern, ordinal) is None:
                raise ValueError(f"Default pattern {pattern!r} does not compile to a rule")
