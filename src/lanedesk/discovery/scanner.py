"""Project scanner: one discovery pass over an Xcode project root.

Discovery Algorithm:
    1. Check that the project root exists (the only hard failure).
    2. Find the first ``.xcworkspace`` and the first ``.xcodeproj``.
    3. List schemes with ``xcodebuild -list`` (workspace preferred).
    4. Pick development/distribution schemes by name.
    5. Resolve bundle ids and the signing team via ``IdentityResolver``.
    6. Derive the display name from the root's final path component.

Every step after the precondition degrades instead of failing, so a
project with a broken or missing toolchain still yields a usable, sparse
result. Nothing is cached; each call is a fresh pass.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lanedesk.discovery.containers import find_project, find_workspace
from lanedesk.discovery.identity import IdentityResolver
from lanedesk.discovery.models import IdentityResult, ScanResult
from lanedesk.discovery.schemes import select_dev_and_dis
from lanedesk.discovery.xcodebuild import XcodeBuild
from lanedesk.exceptions import ProjectNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_PROJECT_NAME = "iOSProject"


def project_display_name(root: Path | str) -> str:
    """Return the root's final path component, or a placeholder."""
    return Path(root).name or DEFAULT_PROJECT_NAME


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


class ProjectScanner:
    """Discovers the build topology and signing identity of a project.

    Usage::

        scanner = ProjectScanner()
        result = scanner.scan(Path("~/src/MyApp").expanduser())
        print(result.workspace, result.schemes, result.team_id)

    Args:
        xcodebuild: Tool wrapper shared by scheme listing and identity
            resolution. Defaults to ``xcodebuild`` on ``PATH``.
    """

    def __init__(self, xcodebuild: XcodeBuild | None = None) -> None:
        self.xcodebuild = xcodebuild if xcodebuild is not None else XcodeBuild()
        self.identity_resolver = IdentityResolver(self.xcodebuild)

    @staticmethod
    def _require_root(root: Path | str) -> Path:
        path = Path(root)
        if not path.exists():
            raise ProjectNotFoundError(root)
        return path

    def scan(self, root: Path | str) -> ScanResult:
        """Run a full discovery pass.

        Args:
            root: Project root directory.

        Returns:
            A new ``ScanResult``.

        Raises:
            ProjectNotFoundError: ``root`` does not exist.
        """
        path = self._require_root(root)

        workspace = find_workspace(path)
        xcodeproj = find_project(path)
        logger.debug("Containers under %s: workspace=%s xcodeproj=%s", path, workspace, xcodeproj)

        schemes = self.xcodebuild.list_schemes(path, workspace, xcodeproj)
        selection = select_dev_and_dis(schemes)
        identity = self.identity_resolver.resolve(
            path, workspace, xcodeproj,
            selection.development, selection.distribution,
        )

        return ScanResult(
            project_name=project_display_name(path),
            workspace=workspace,
            xcodeproj=xcodeproj,
            schemes=tuple(schemes),
            selection=selection,
            identity=identity,
        )

    def resolve_identity(
        self,
        root: Path | str,
        workspace: str | None = None,
        xcodeproj: str | None = None,
        scheme_dev: str | None = None,
        scheme_dis: str | None = None,
    ) -> IdentityResult:
        """Re-resolve identity for explicitly chosen schemes.

        Containers that are missing or blank are rediscovered; given ones
        are used as-is. Blank schemes are skipped.

        Raises:
            ProjectNotFoundError: ``root`` does not exist.
        """
        path = self._require_root(root)

        resolved_workspace = _blank_to_none(workspace) or find_workspace(path)
        resolved_xcodeproj = _blank_to_none(xcodeproj) or find_project(path)

        return self.identity_resolver.resolve(
            path,
            resolved_workspace,
            resolved_xcodeproj,
            _blank_to_none(scheme_dev),
            _blank_to_none(scheme_dis),
        )
