"""Tests for workspace scanning."""

import os
from pathlib import Path

import pytest

from syncignore.client.filter import IgnoreFilter
from syncignore.client.scanner import scan_workspace


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create a small workspace tree."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "index.ts").write_text("export {}")
    (tmp_path / "README.md").write_text("# Readme")
    (tmp_path / "node_modules" / "pkg").mkdir(parents=True)
    (tmp_path / "node_modules" / "pkg" / "index.js").write_text("module.exports = {}")
    (tmp_path / ".DS_Store").write_bytes(b"\x00")
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "HEAD").write_text("ref: refs/heads/main")
    return tmp_path


class TestScanWorkspace:
    """Tests for scan_workspace."""

    def test_lists_synced_files(self, workspace: Path) -> None:
        """Should list only files that pass the filter."""
        ignore = IgnoreFilter.load_from_workspace(workspace)
        assert scan_workspace(workspace, ignore) == ["README.md", "src/index.ts"]

    def test_skips_pattern_file(self, workspace: Path) -> None:
        """The pattern file itself is never listed."""
        (workspace / ".syncignore").write_text("*.md\n")
        ignore = IgnoreFilter.load_from_workspace(workspace)
        assert scan_workspace(workspace, ignore) == ["src/index.ts"]

    def test_negation_below_ignored_directory(self, tmp_path: Path) -> None:
        """Should find re-included files inside ignored directories."""
        (tmp_path / "build").mkdir()
        (tmp_path / "build" / "keep.txt").write_text("keep")
        (tmp_path / "build" / "out.bin").write_bytes(b"\x01")
        ignore = IgnoreFilter(["!keep.txt"])
        assert scan_workspace(tmp_path, ignore) == ["build/keep.txt"]

    def test_missing_root(self, tmp_path: Path) -> None:
        """Should return an empty list for a missing root."""
        assert scan_workspace(tmp_path / "missing", IgnoreFilter()) == []

    def test_accepts_string_root(self, workspace: Path) -> None:
        """Should accept the root as a string."""
        assert scan_workspace(str(workspace), IgnoreFilter()) == ["README.md", "src/index.ts"]

    @pytest.mark.skipif(os.name == "nt", reason="Symlinks need privileges on Windows")
    def test_skips_symlinks(self, workspace: Path, tmp_path_factory: pytest.TempPathFactory) -> None:
        """Should not follow or list symlinks."""
        outside = tmp_path_factory.mktemp("outside")
        (outside / "secret.txt").write_text("secret")
        (workspace / "linked").symlink_to(outside, target_is_directory=True)
        (workspace / "alias.md").symlink_to(workspace / "README.md")

        assert scan_workspace(workspace, IgnoreFilter()) == ["README.md", "src/index.ts"]
