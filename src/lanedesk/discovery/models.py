"""Data models for the discovery module.

Contains the value objects produced by one discovery pass: the scheme
selection, the resolved signing identity, and the aggregate scan result.
All of them are frozen; a pass builds them once and hands them to the
caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SchemeSelection:
    """The development and distribution schemes chosen for a project.

    Attributes:
        development: Scheme used for development/ad-hoc builds.
        distribution: Scheme used for App Store/TestFlight builds. May be
            the same scheme as ``development`` in single-scheme projects.
    """

    development: str | None = None
    distribution: str | None = None

    @property
    def is_collapsed(self) -> bool:
        """True when both roles point at the same scheme."""
        return self.development is not None and self.development == self.distribution


@dataclass(frozen=True)
class IdentityResult:
    """Bundle identifiers and signing team resolved from build settings.

    Attributes:
        bundle_id_dev: ``PRODUCT_BUNDLE_IDENTIFIER`` of the development scheme.
        bundle_id_dis: ``PRODUCT_BUNDLE_IDENTIFIER`` of the distribution scheme.
        team_id: Effective ``DEVELOPMENT_TEAM``: the distribution scheme's
            team if set, otherwise the development scheme's.
    """

    bundle_id_dev: str | None = None
    bundle_id_dis: str | None = None
    team_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "bundleIdDev": self.bundle_id_dev,
            "bundleIdDis": self.bundle_id_dis,
            "teamId": self.team_id,
        }


@dataclass(frozen=True)
class ScanResult:
    """Complete result of scanning one project root.

    Attributes:
        project_name: Display name taken from the root's final path component.
        workspace: First ``.xcworkspace`` found, relative to the root.
        xcodeproj: First ``.xcodeproj`` found, relative to the root.
        schemes: Scheme names in ``xcodebuild -list`` order.
        selection: Heuristic development/distribution choice.
        identity: Bundle ids and team id for the selected schemes.
    """

    project_name: str
    workspace: str | None = None
    xcodeproj: str | None = None
    schemes: tuple[str, ...] = ()
    selection: SchemeSelection = field(default_factory=SchemeSelection)
    identity: IdentityResult = field(default_factory=IdentityResult)

    @property
    def bundle_id_dev(self) -> str | None:
        return self.identity.bundle_id_dev

    @property
    def bundle_id_dis(self) -> str | None:
        return self.identity.bundle_id_dis

    @property
    def team_id(self) -> str | None:
        return self.identity.team_id

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the camelCase keys used by the profile file."""
        return {
            "projectName": self.project_name,
            "workspace": self.workspace,
            "xcodeproj": self.xcodeproj,
            "schemes": list(self.schemes),
            "schemeDev": self.selection.development,
            "schemeDis": self.selection.distribution,
            **self.identity.to_dict(),
        }
