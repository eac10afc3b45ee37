"""Tests for filter configuration."""

from __future__ import annotations

import pytest

from syncignore.core.config import FilterConfig


class TestFilterConfig:
    """Tests for FilterConfig class."""

    def test_init_defaults(self) -> None:
        """Should default to .syncignore with the built-in patterns."""
        config = FilterConfig()
        assert config.ignore_filename == ".syncignore"
        assert config.use_defaults is True
        assert config.extra_patterns == []

    def test_filename_stripped(self) -> None:
        """Should strip whitespace around the file name."""
        config = FilterConfig(ignore_filename="  .cloudignore  ")
        assert config.ignore_filename == ".cloudignore"

    @pytest.mark.parametrize("name", ["", "   ", "dir/.syncignore", "dir\\.syncignore"])
    def test_invalid_filename(self, name: str) -> None:
        """Should reject empty names and names with separators."""
        with pytest.raises(ValueError):
            FilterConfig(ignore_filename=name)


class TestFilterConfigFromEnv:
    """Tests for FilterConfig.from_env."""

    def test_empty_environment(self) -> None:
        """Should fall back to defaults."""
        assert FilterConfig.from_env({}) == FilterConfig()

    def test_all_variables(self) -> None:
        """Should read every variable."""
        config = FilterConfig.from_env(
            {
                "SYNCIGNORE_FILENAME": ".cloudignore",
                "SYNCIGNORE_NO_DEFAULTS": "1",
                "SYNCIGNORE_PATTERNS": "*.pdf, data/ ,",
            }
        )
        assert config.ignore_filename == ".cloudignore"
        assert config.use_defaults is False
        assert config.extra_patterns == ["*.pdf", "data/"]

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("true", False), ("YES", False), ("0", True), ("no", True), ("", True)],
    )
    def test_no_defaults_values(self, value: str, expected: bool) -> None:
        """Only truthy values disable the defaults."""
        config = FilterConfig.from_env({"SYNCIGNORE_NO_DEFAULTS": value})
        assert config.use_defaults is expected

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should use os.environ when no mapping is given."""
        monkeypatch.setenv("SYNCIGNORE_PATTERNS", "*.bak")
        monkeypatch.delenv("SYNCIGNORE_FILENAME", raising=False)
        monkeypatch.delenv("SYNCIGNORE_NO_DEFAULTS", raising=False)
        assert FilterConfig.from_env().extra_patterns == ["*.bak"]
