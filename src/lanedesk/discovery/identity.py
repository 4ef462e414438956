"""Per-scheme build setting lookup and signing identity resolution.

``IdentityResolver.resolve`` is the single place where bundle identifiers
and the signing team are derived. Both the full scan and the standalone
identity command delegate to it.

Each lookup is one ``xcodebuild -showBuildSettings`` call. Lookups are
independent: a failure for one scheme or key leaves the others untouched.
They run one after the other on the calling thread.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lanedesk.discovery.models import IdentityResult
from lanedesk.discovery.xcodebuild import XcodeBuild, extract_build_setting

logger = logging.getLogger(__name__)

BUNDLE_ID_KEY = "PRODUCT_BUNDLE_IDENTIFIER"
TEAM_ID_KEY = "DEVELOPMENT_TEAM"


class IdentityResolver:
    """Resolves bundle identifiers and the signing team for two schemes.

    Usage::

        resolver = IdentityResolver()
        identity = resolver.resolve(root, "MyApp.xcworkspace", None,
                                    "MyApp-Dev", "MyApp")
        print(identity.bundle_id_dis, identity.team_id)
    """

    def __init__(self, xcodebuild: XcodeBuild | None = None) -> None:
        self.xcodebuild = xcodebuild if xcodebuild is not None else XcodeBuild()

    def resolve_setting(
        self,
        root: Path | str,
        workspace: str | None,
        xcodeproj: str | None,
        scheme: str,
        key: str,
    ) -> str | None:
        """Look up one build setting for one scheme.

        Returns:
            The trimmed value, or None if no container is available, the
            tool failed, or the key is missing or empty.
        """
        text = self.xcodebuild.show_build_settings(root, workspace, xcodeproj, scheme)
        if text is None:
            return None
        value = extract_build_setting(text, key)
        if value is None:
            logger.debug("%s not set for scheme %r", key, scheme)
        return value

    def _lookup(
        self,
        root: Path | str,
        workspace: str | None,
        xcodeproj: str | None,
        scheme: str | None,
        key: str,
    ) -> str | None:
        if not scheme:
            return None
        return self.resolve_setting(root, workspace, xcodeproj, scheme, key)

    def resolve(
        self,
        root: Path | str,
        workspace: str | None,
        xcodeproj: str | None,
        scheme_dev: str | None,
        scheme_dis: str | None,
    ) -> IdentityResult:
        """Resolve bundle ids for both schemes and the effective team id.

        Args:
            root: Project root; used as the tool's working directory.
            workspace: Workspace path relative to ``root``, if any.
            xcodeproj: Project path relative to ``root``, if any.
            scheme_dev: Development scheme, if selected.
            scheme_dis: Distribution scheme, if selected.

        Returns:
            An ``IdentityResult``. The team id is the distribution scheme's
            team when set, otherwise the development scheme's.
        """
        bundle_id_dev = self._lookup(root, workspace, xcodeproj, scheme_dev, BUNDLE_ID_KEY)
        bundle_id_dis = self._lookup(root, workspace, xcodeproj, scheme_dis, BUNDLE_ID_KEY)
        team_id_dev = self._lookup(root, workspace, xcodeproj, scheme_dev, TEAM_ID_KEY)
        team_id_dis = self._lookup(root, workspace, xcodeproj, scheme_dis, TEAM_ID_KEY)

        return IdentityResult(
            bundle_id_dev=bundle_id_dev,
            bundle_id_dis=bundle_id_dis,
            team_id=team_id_dis if team_id_dis is not None else team_id_dev,
        )
