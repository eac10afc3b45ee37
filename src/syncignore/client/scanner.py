"""Workspace scanning for sync candidates.

Lists the files of a workspace that an IgnoreFilter lets through, the way
the sync engine does before pushing local changes.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from syncignore.client.filter import IgnoreFilter

logger = logging.getLogger(__name__)


def scan_workspace(base_path: Path | str, ignore: IgnoreFilter) -> list[str]:
    """List syncable files under a workspace root.

    Directories are walked in full because a negation rule can re-include
    a file below an ignored directory. Symlinks are never followed and
    symlinked files are skipped.

    Args:
        base_path: Workspace root directory.
        ignore: Filter deciding which files are skipped.

    Returns:
        Sorted relative paths with ``/`` separators. Empty if the root
        does not exist.
    """
    base = Path(base_path)
    if not base.is_dir():
        logger.debug("Workspace %s does not exist, nothing to scan", base)
        return []

    found: list[str] = []
    skipped = 0
    for root_str, dirs, files in os.walk(base):
        root = Path(root_str)
        # Do not descend into symlinked directories
        dirs[:] = [d for d in dirs if not (root / d).is_symlink()]

        for filename in files:
            file_path = root / filename
            if file_path.is_symlink():
                continue

            # Normalize path separators
            relative_path = str(file_path.relative_to(base)).replace("\\", "/")
            if ignore.is_ignored(relative_path):
                logger.debug("Skipping ignored file: %s", relative_path)
                skipped += 1
                continue
            found.append(relative_path)

    logger.debug("Scanned %s: %d files to sync, %d ignored", base, len(found), skipped)
    return sorted(found)
