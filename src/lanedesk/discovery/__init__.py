"""Xcode project discovery and identity resolution.

Finds the workspace/project containers under a project root, lists schemes
through ``xcodebuild``, picks development and distribution schemes, and
reads their bundle identifiers and signing team.

Public API::

    from lanedesk.discovery import ProjectScanner

    scanner = ProjectScanner()
    result = scanner.scan(project_root)
    print(result.selection.development, result.bundle_id_dev)
"""

from __future__ import annotations

from lanedesk.discovery.containers import find_container
from lanedesk.discovery.identity import IdentityResolver
from lanedesk.discovery.models import IdentityResult, ScanResult, SchemeSelection
from lanedesk.discovery.scanner import ProjectScanner
from lanedesk.discovery.schemes import select_dev_and_dis
from lanedesk.discovery.xcodebuild import XcodeBuild, extract_build_setting, parse_schemes

__all__ = [
    "IdentityResolver",
    "IdentityResult",
    "ProjectScanner",
    "ScanResult",
    "SchemeSelection",
    "XcodeBuild",
    "extract_build_setting",
    "find_container",
    "parse_schemes",
    "select_dev_and_dis",
]
