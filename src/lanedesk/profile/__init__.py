"""Persisted per-project release configuration.

Public API::

    from lanedesk.profile import ProjectConfig, load_profile, save_profile

    config = load_profile(project_root)
    save_profile(set_field(config, "teamId", "ABCDE12345"))
"""

from __future__ import annotations

from lanedesk.profile.models import SIGNING_STYLES, ProjectConfig, set_field
from lanedesk.profile.operations import apply_identity, apply_scan
from lanedesk.profile.store import (
    PROFILE_DIR,
    PROFILE_FILE,
    load_or_default,
    load_profile,
    profile_path,
    save_profile,
)

__all__ = [
    "PROFILE_DIR",
    "PROFILE_FILE",
    "ProjectConfig",
    "SIGNING_STYLES",
    "apply_identity",
    "apply_scan",
    "load_or_default",
    "load_profile",
    "profile_path",
    "save_profile",
    "set_field",
]
