"""Read and write ``.fastlane-desktop/profile.json`` under a project root."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from lanedesk.exceptions import ProfileError, ProjectNotFoundError
from lanedesk.profile.models import ProjectConfig

logger = logging.getLogger(__name__)

PROFILE_DIR = ".fastlane-desktop"
PROFILE_FILE = "profile.json"


def profile_path(project_path: Path | str) -> Path:
    """Return where the profile of ``project_path`` is stored."""
    return Path(project_path) / PROFILE_DIR / PROFILE_FILE


def save_profile(config: ProjectConfig) -> Path:
    """Write ``config`` to its project's profile file.

    Creates the profile directory if needed.

    Returns:
        Path of the written file.

    Raises:
        ProjectNotFoundError: ``config.project_path`` does not exist.
        ProfileError: The file could not be written.
    """
    root = Path(config.project_path)
    if not config.project_path or not root.exists():
        raise ProjectNotFoundError(config.project_path)

    path = profile_path(root)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(config.to_dict(), indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ProfileError(f"Write profile failed: {exc}") from exc
    logger.debug("Saved profile to %s", path)
    return path


def load_profile(project_path: Path | str) -> ProjectConfig:
    """Load the profile stored under ``project_path``.

    Raises:
        ProfileError: The file is missing, unreadable, or malformed.
    """
    path = profile_path(project_path)
    if not path.is_file():
        raise ProfileError(f"Profile not found: {path}")
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ProfileError(f"Read profile failed: {exc}") from exc
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ProfileError(f"Parse profile failed: {exc}") from exc
    return ProjectConfig.from_dict(data)


def load_or_default(project_path: Path | str) -> ProjectConfig:
    """Load the stored profile, or a default one bound to ``project_path``."""
    if profile_path(project_path).is_file():
        return load_profile(project_path)
    return ProjectConfig(project_path=str(project_path))
