"""Scheme selection heuristics.

``select_dev_and_dis`` picks the development and distribution schemes from
the names alone. The remaining helpers curate long scheme lists, which in
CocoaPods projects include one scheme per pod.

Selection Rules:
    - Development: first scheme containing ``dev``, ``debug`` or
      ``staging`` (case-insensitive), else the first scheme.
    - Distribution: first scheme containing ``prod``, ``release`` or
      ``appstore``, else the first scheme different from the development
      pick, else the first scheme.

A single-scheme project therefore gets the same scheme for both roles.
"""

from __future__ import annotations

from typing import Sequence

from lanedesk.discovery.models import SchemeSelection

DEV_KEYWORDS: tuple[str, ...] = ("dev", "debug", "staging")
DIS_KEYWORDS: tuple[str, ...] = ("prod", "release", "appstore")

# Library schemes that commonly leak into app workspaces via CocoaPods.
THIRD_PARTY_KEYWORDS: tuple[str, ...] = (
    "kingfisher",
    "snapkit",
    "swiftyjson",
    "adjust",
    "grdb",
    "mbprogresshud",
    "mjrefresh",
    "thinking",
    "jxpaging",
    "jxsegmented",
    "jxphoto",
)


def _matches(scheme: str, keywords: tuple[str, ...]) -> bool:
    lower = scheme.lower()
    return any(k in lower for k in keywords)


def _first_matching(schemes: Sequence[str], keywords: tuple[str, ...]) -> str | None:
    for scheme in schemes:
        if _matches(scheme, keywords):
            return scheme
    return None


def is_dev_scheme(scheme: str) -> bool:
    return _matches(scheme, DEV_KEYWORDS)


def is_dis_scheme(scheme: str) -> bool:
    return _matches(scheme, DIS_KEYWORDS)


def select_dev_and_dis(schemes: Sequence[str]) -> SchemeSelection:
    """Pick the development and distribution schemes.

    Args:
        schemes: Scheme names in tool order.

    Returns:
        The selection. Both fields are None only for an empty list.
    """
    if not schemes:
        return SchemeSelection()

    dev = _first_matching(schemes, DEV_KEYWORDS) or schemes[0]
    dis = _first_matching(schemes, DIS_KEYWORDS)
    if dis is None:
        dis = next((s for s in schemes if s != dev), schemes[0])
    return SchemeSelection(development=dev, distribution=dis)


def is_third_party_scheme(scheme: str) -> bool:
    """Return True for schemes that build a dependency rather than the app."""
    name = scheme.lower()
    if name.startswith("pods-"):
        return True
    if "privacy" in name:
        return True
    return _matches(name, THIRD_PARTY_KEYWORDS)


def filter_app_schemes(schemes: Sequence[str]) -> list[str]:
    """Drop third-party schemes, keeping the full list if nothing remains."""
    filtered = [s for s in schemes if not is_third_party_scheme(s)]
    return filtered if filtered else list(schemes)


def suggest_main_scheme(schemes: Sequence[str], project_name: str | None) -> str | None:
    """Guess the app's main scheme from the project name.

    Prefers an exact (case-insensitive) name match, then the first scheme
    containing the project name, then the first scheme.
    """
    if not schemes:
        return None
    project = (project_name or "").lower()
    if project:
        for scheme in schemes:
            if scheme.lower() == project:
                return scheme
        for scheme in schemes:
            if project in scheme.lower():
                return scheme
    return schemes[0]


def lock_main_scheme(schemes: Sequence[str], main: str) -> SchemeSelection:
    """Make ``main`` the distribution scheme.

    The development scheme becomes the first other scheme that looks like a
    development build, or ``main`` itself when there is none.
    """
    dev = next((s for s in schemes if s != main and is_dev_scheme(s)), main)
    return SchemeSelection(development=dev, distribution=main)
