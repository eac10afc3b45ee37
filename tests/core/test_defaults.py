"""Tests for the built-in pattern table."""

from __future__ import annotations

import pytest

from syncignore.core.defaults import (
    DEFAULT_PATTERN_GROUPS,
    IGNORE_FILENAME,
    DefaultPatternProvider,
)


class TestDefaultPatternProvider:
    """Tests for DefaultPatternProvider."""

    def test_ends_with_ignore_file(self) -> None:
        """The pattern file itself is always excluded."""
        patterns = DefaultPatternProvider().patterns()
        assert patterns[-1] == IGNORE_FILENAME == ".syncignore"

    def test_custom_ignore_filename(self) -> None:
        """A custom pattern file name replaces the self entry."""
        patterns = DefaultPatternProvider(ignore_filename=".cloudignore").patterns()
        assert patterns[-1] == ".cloudignore"
        assert ".syncignore" not in patterns

    def test_no_self_entry(self) -> None:
        """An empty file name adds no self entry."""
        provider = DefaultPatternProvider(ignore_filename="")
        assert len(provider.patterns()) == sum(len(g) for g in DEFAULT_PATTERN_GROUPS.values())

    def test_table_contents(self) -> None:
        """The table covers each category."""
        patterns = DefaultPatternProvider().patterns()
        expected = [
            ".git/",
            ".DS_Store",
            "node_modules/",
            "__pycache__/",
            ".idea/",
            ".env*",
            "!.env.example",
            "*.log",
            ".cache/",
        ]
        for pattern in expected:
            assert pattern in patterns

    def test_count(self) -> None:
        """Groups plus the self entry."""
        assert len(DefaultPatternProvider().patterns()) == 24

    def test_validate_defaults(self) -> None:
        """Every default entry compiles."""
        DefaultPatternProvider().validate()

    def test_validate_rejects_comment(self) -> None:
        """An entry that compiles to nothing is rejected."""
        provider = DefaultPatternProvider(groups={"bad": ("# not a pattern",)})
        with pytest.raises(ValueError, match="not a pattern"):
            provider.validate()

    def test_injected_groups(self) -> None:
        """A custom table replaces the built-in groups."""
        provider = DefaultPatternProvider(groups={"media": ("*.mp4",)})
        assert provider.patterns() == ["*.mp4", ".syncignore"]
