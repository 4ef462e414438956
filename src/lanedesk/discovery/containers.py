"""Locate Xcode workspace and project containers under a project root.

Containers are directory bundles identified by extension: ``.xcworkspace``
for workspaces and ``.xcodeproj`` for projects. The walk is breadth-first
with entries sorted by name at every level, so the shallowest match wins
and the result is stable for a given tree.

Walk Rules:
    - At most ``MAX_SEARCH_DEPTH`` levels below the root are visited.
    - Symbolic links are neither matched nor descended into.
    - Container bundles are searched like any other directory, so a
      project without a separate workspace reports the
      ``project.xcworkspace`` embedded in its ``.xcodeproj``.
    - Unreadable entries and directories are skipped.
"""

from __future__ import annotations

import logging
from collections import deque
from pathlib import Path

logger = logging.getLogger(__name__)

WORKSPACE_EXTENSION = "xcworkspace"
PROJECT_EXTENSION = "xcodeproj"
MAX_SEARCH_DEPTH = 4


def _is_real_dir(path: Path) -> bool:
    """Return True for a directory that is not a symlink."""
    try:
        return not path.is_symlink() and path.is_dir()
    except OSError:
        return False


def _sorted_children(directory: Path) -> list[Path]:
    try:
        return sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError:
        logger.debug("Skipping unreadable directory: %s", directory)
        return []


def find_container(
    root: Path | str,
    extension: str,
    max_depth: int = MAX_SEARCH_DEPTH,
) -> str | None:
    """Find the first directory under ``root`` with the given extension.

    Args:
        root: Project root directory.
        extension: Container extension, with or without the leading dot
            (e.g. ``"xcworkspace"``).
        max_depth: Deepest level to visit; direct children of ``root``
            are level 1.

    Returns:
        The match's path relative to ``root``, or None if nothing matched
        within ``max_depth``.
    """
    root = Path(root)
    suffix = "." + extension.lstrip(".")
    queue: deque[tuple[Path, int]] = deque([(root, 0)])

    while queue:
        directory, depth = queue.popleft()
        if depth >= max_depth:
            continue
        for child in _sorted_children(directory):
            if not _is_real_dir(child):
                continue
            if child.suffix == suffix:
                return str(child.relative_to(root))
            queue.append((child, depth + 1))
    return None


def find_workspace(root: Path | str) -> str | None:
    """Find the first ``.xcworkspace`` under ``root``."""
    return find_container(root, WORKSPACE_EXTENSION)


def find_project(root: Path | str) -> str | None:
    """Find the first ``.xcodeproj`` under ``root``."""
    return find_container(root, PROJECT_EXTENSION)
