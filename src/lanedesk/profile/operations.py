"""Merge discovery results into a ProjectConfig.

Discovery produces optional values; the profile stores plain strings, so an
absent value becomes ``""``.
"""

from __future__ import annotations

from dataclasses import replace

from lanedesk.discovery.models import IdentityResult, ScanResult
from lanedesk.profile.models import ProjectConfig


def apply_scan(config: ProjectConfig, result: ScanResult) -> ProjectConfig:
    """Copy containers, schemes and identity from a scan into ``config``."""
    return replace(
        config,
        workspace=result.workspace or "",
        xcodeproj=result.xcodeproj or "",
        scheme_dev=result.selection.development or "",
        scheme_dis=result.selection.distribution or "",
        bundle_id_dev=result.bundle_id_dev or "",
        bundle_id_dis=result.bundle_id_dis or "",
        team_id=result.team_id or "",
    )


def _describe_change(name: str, old: str, new: str) -> str:
    return f"{name}: {old or '-'} -> {new or '-'}"


def apply_identity(
    config: ProjectConfig, identity: IdentityResult,
) -> tuple[ProjectConfig, list[str]]:
    """Apply a re-resolved identity and report what changed.

    Bundle ids are always replaced, so an unresolvable bundle id clears the
    stored one. The team id is only replaced when the identity carries one.

    Returns:
        The updated config and one ``field: old -> new`` line per changed
        field.
    """
    bundle_dev = identity.bundle_id_dev or ""
    bundle_dis = identity.bundle_id_dis or ""
    team_id = identity.team_id or config.team_id

    diff: list[str] = []
    if bundle_dev != config.bundle_id_dev:
        diff.append(_describe_change("bundleIdDev", config.bundle_id_dev, bundle_dev))
    if bundle_dis != config.bundle_id_dis:
        diff.append(_describe_change("bundleIdDis", config.bundle_id_dis, bundle_dis))
    if team_id != config.team_id:
        diff.append(_describe_change("teamId", config.team_id, team_id))

    updated = replace(
        config,
        bundle_id_dev=bundle_dev,
        bundle_id_dis=bundle_dis,
        team_id=team_id,
    )
    return updated, diff
