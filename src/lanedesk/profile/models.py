"""ProjectConfig: the persisted per-project release configuration.

A profile captures everything the fastlane environment file needs: the
containers and schemes found by discovery, the signing identity, match
repository settings, API keys, and feature toggles. In JSON it uses
camelCase keys (``projectPath``, ``schemeDev``, ...).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields, replace
from typing import Any

from lanedesk.exceptions import ProfileError

SIGNING_STYLES: tuple[str, ...] = ("automatic", "manual")

_TRUE_WORDS = frozenset({"true", "yes", "on", "1"})
_FALSE_WORDS = frozenset({"false", "no", "off", "0"})


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _snake(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


@dataclass(frozen=True)
class ProjectConfig:
    """Release configuration for one Xcode project.

    Attributes:
        project_path: Absolute path of the project root.
        workspace: Workspace path relative to the root ("" if none).
        xcodeproj: Project path relative to the root ("" if none).
        scheme_dev: Development scheme.
        scheme_dis: Distribution scheme.
        bundle_id_dev: Bundle identifier of the development scheme.
        bundle_id_dis: Bundle identifier of the distribution scheme.
        team_id: Apple developer team id.
        signing_style: "automatic" or "manual".
        match_git_url: Git repository holding match signing assets.
        match_git_branch: Branch of the match repository.
        pgyer_api_key: API key for pgyer beta distribution.
        app_store_connect_api_key_path: Path to the App Store Connect key JSON.
        enable_quality_gate: Run the quality gate before builds.
        enable_tests: Run tests in lanes that support it.
        enable_swiftlint: Run SwiftLint in lanes that support it.
        enable_snapshot: Capture screenshots with snapshot.
        metadata_path: App Store metadata directory, relative to the root.
    """

    project_path: str = ""
    workspace: str = ""
    xcodeproj: str = ""
    scheme_dev: str = ""
    scheme_dis: str = ""
    bundle_id_dev: str = ""
    bundle_id_dis: str = ""
    team_id: str = ""
    signing_style: str = "automatic"
    match_git_url: str = ""
    match_git_branch: str = "main"
    pgyer_api_key: str = ""
    app_store_connect_api_key_path: str = ""
    enable_quality_gate: bool = True
    enable_tests: bool = True
    enable_swiftlint: bool = False
    enable_snapshot: bool = False
    metadata_path: str = "fastlane/metadata"

    def __post_init__(self) -> None:
        if self.signing_style not in SIGNING_STYLES:
            raise ProfileError(
                f"Invalid signingStyle {self.signing_style!r}; "
                f"expected one of {', '.join(SIGNING_STYLES)}"
            )

    # -- Serialization ------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a camelCase dict in field order."""
        return {_camel(f.name): getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProjectConfig:
        """Build a config from a camelCase dict.

        Missing keys take their defaults and unknown keys are ignored.

        Raises:
            ProfileError: A value has the wrong type or the signing style
                is unknown.
        """
        if not isinstance(data, dict):
            raise ProfileError("Profile must be a JSON object")
        values: dict[str, Any] = {}
        for f in fields(cls):
            key = _camel(f.name)
            if key not in data:
                continue
            value = data[key]
            expected = bool if f.default is True or f.default is False else str
            if not isinstance(value, expected):
                raise ProfileError(
                    f"Profile field {key!r} must be {expected.__name__}, "
                    f"got {type(value).__name__}"
                )
            values[f.name] = value
        return cls(**values)


def set_field(config: ProjectConfig, name: str, value: str) -> ProjectConfig:
    """Return a copy of ``config`` with one field set from a string.

    Args:
        config: The config to update.
        name: Field name in snake_case or camelCase.
        value: New value. Boolean fields accept true/false, yes/no,
            on/off and 1/0.

    Raises:
        ProfileError: Unknown field, unparseable boolean, or an attempt to
            change ``project_path``, which is fixed by where the profile
            is stored.
    """
    field_name = _snake(name)
    by_name = {f.name: f for f in fields(ProjectConfig)}
    if field_name not in by_name:
        raise ProfileError(f"Unknown profile field: {name}")
    if field_name == "project_path":
        raise ProfileError("projectPath is set from the project directory and cannot be changed")

    if isinstance(by_name[field_name].default, bool):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            coerced: Any = True
        elif word in _FALSE_WORDS:
            coerced = False
        else:
            raise ProfileError(f"Field {name} expects a boolean, got {value!r}")
    else:
        coerced = value
    return replace(config, **{field_name: coerced})
