"""Tests for ProjectScanner: full scans and standalone identity resolution.

Uses temporary directories for the container layout and a ``FakeRunner``
in place of ``xcodebuild``.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from lanedesk.discovery.models import IdentityResult, SchemeSelection
from lanedesk.discovery.scanner import DEFAULT_PROJECT_NAME, ProjectScanner, project_display_name
from lanedesk.discovery.xcodebuild import XcodeBuild
from lanedesk.exceptions import LaneDeskError, ProjectNotFoundError
from lanedesk.process import ProcessOutput

from tests.helpers import PROJECT_LIST_OUTPUT, WORKSPACE_LIST_OUTPUT


def _scanner(runner) -> ProjectScanner:
    return ProjectScanner(XcodeBuild(runner=runner))


# ---------------------------------------------------------------------------
# ProjectScanner.scan()
# ---------------------------------------------------------------------------


class TestScan:
    """Full discovery passes."""

    def test_missing_root_raises(self, fake_runner, tmp_path: Path) -> None:
        with pytest.raises(ProjectNotFoundError, match="Project path not found"):
            _scanner(fake_runner).scan(tmp_path / "missing")
        assert fake_runner.calls == []

    def test_missing_root_is_lanedesk_error(self, fake_runner, tmp_path: Path) -> None:
        with pytest.raises(LaneDeskError):
            _scanner(fake_runner).scan(tmp_path / "missing")

    def test_empty_project_with_failing_tool(self, fake_runner, make_tree) -> None:
        """No containers and a broken tool still yield a sparse result."""
        fake_runner.spawn_error = "No such file or directory"
        root = make_tree()
        result = _scanner(fake_runner).scan(root)
        assert result.project_name == "project"
        assert result.workspace is None
        assert result.xcodeproj is None
        assert result.schemes == ()
        assert result.selection == SchemeSelection()
        assert result.identity == IdentityResult()

    def test_failing_tool_with_containers(self, fake_runner, make_tree) -> None:
        fake_runner.spawn_error = "No such file or directory"
        root = make_tree("MyApp.xcworkspace", "MyApp.xcodeproj")
        result = _scanner(fake_runner).scan(root)
        assert result.workspace == "MyApp.xcworkspace"
        assert result.xcodeproj == "MyApp.xcodeproj"
        assert result.schemes == ()
        assert result.team_id is None

    def test_full_workspace_scan(self, fake_runner, make_tree) -> None:
        fake_runner.list_output = ProcessOutput(0, WORKSPACE_LIST_OUTPUT, "")
        fake_runner.set_settings("MyApp-Dev", "com.example.myapp.dev", "DEVTEAM001")
        fake_runner.set_settings("MyApp", "com.example.myapp", "DISTEAM001")
        root = make_tree("MyApp.xcworkspace", "MyApp.xcodeproj")

        result = _scanner(fake_runner).scan(root)

        assert result.schemes == ("MyApp", "MyApp-Dev", "Pods-MyApp")
        assert result.selection == SchemeSelection("MyApp-Dev", "MyApp")
        assert result.bundle_id_dev == "com.example.myapp.dev"
        assert result.bundle_id_dis == "com.example.myapp"
        assert result.team_id == "DISTEAM001"

    def test_workspace_preferred_for_listing(self, fake_runner, make_tree) -> None:
        root = make_tree("MyApp.xcworkspace", "MyApp.xcodeproj")
        _scanner(fake_runner).scan(root)
        assert fake_runner.calls[0] == ["xcodebuild", "-list", "-workspace", "MyApp.xcworkspace"]

    def test_project_only(self, fake_runner, make_tree) -> None:
        fake_runner.list_output = ProcessOutput(0, PROJECT_LIST_OUTPUT, "")
        root = make_tree("MyApp.xcodeproj")
        result = _scanner(fake_runner).scan(root)
        assert fake_runner.calls[0] == ["xcodebuild", "-list", "-project", "MyApp.xcodeproj"]
        assert result.selection == SchemeSelection("MyApp Staging", "MyApp")

    def test_embedded_project_workspace(self, fake_runner, make_tree) -> None:
        fake_runner.list_output = ProcessOutput(0, PROJECT_LIST_OUTPUT, "")
        root = make_tree("MyApp.xcodeproj/project.xcworkspace")
        result = _scanner(fake_runner).scan(root)
        workspace = os.path.join("MyApp.xcodeproj", "project.xcworkspace")
        assert result.workspace == workspace
        assert result.xcodeproj == "MyApp.xcodeproj"
        assert fake_runner.calls[0] == ["xcodebuild", "-list", "-workspace", workspace]

    def test_tool_runs_in_project_root(self, fake_runner, make_tree) -> None:
        root = make_tree("MyApp.xcodeproj")
        _scanner(fake_runner).scan(root)
        assert fake_runner.cwds and all(Path(c) == root for c in fake_runner.cwds)

    def test_each_call_attempted_once(self, fake_runner, make_tree) -> None:
        """One list call plus four settings calls; no retries."""
        fake_runner.list_output = ProcessOutput(0, "Schemes:\n    Dev\n    Prod\n", "")
        root = make_tree("A.xcodeproj")
        _scanner(fake_runner).scan(root)
        assert len(fake_runner.calls) == 5

    def test_no_schemes_no_settings_calls(self, fake_runner, make_tree) -> None:
        root = make_tree("A.xcodeproj")
        _scanner(fake_runner).scan(root)
        assert fake_runner.settings_calls() == []

    def test_result_is_fresh_per_call(self, fake_runner, make_tree) -> None:
        root = make_tree("A.xcodeproj")
        scanner = _scanner(fake_runner)
        first = scanner.scan(root)
        fake_runner.list_output = ProcessOutput(0, "Schemes:\n    New\n", "")
        second = scanner.scan(root)
        assert first.schemes == ()
        assert second.schemes == ("New",)

    def test_to_dict_uses_camel_case(self, fake_runner, make_tree) -> None:
        root = make_tree()
        data = _scanner(fake_runner).scan(root).to_dict()
        assert data["projectName"] == "project"
        assert data["schemes"] == []
        assert data["teamId"] is None
        assert {"bundleIdDev", "bundleIdDis", "schemeDev", "schemeDis"} <= set(data)


class TestDisplayName:
    def test_final_component(self) -> None:
        assert project_display_name("/Users/me/src/MyApp") == "MyApp"

    def test_placeholder_for_root(self) -> None:
        assert project_display_name("/") == DEFAULT_PROJECT_NAME


# ---------------------------------------------------------------------------
# ProjectScanner.resolve_identity()
# ---------------------------------------------------------------------------


class TestResolveIdentity:
    """Identity re-resolution for explicitly chosen schemes."""

    def test_missing_root_raises(self, fake_runner, tmp_path: Path) -> None:
        with pytest.raises(ProjectNotFoundError):
            _scanner(fake_runner).resolve_identity(tmp_path / "missing", scheme_dev="A")

    def test_given_containers_used_as_is(self, fake_runner, make_tree) -> None:
        root = make_tree("Found.xcworkspace")
        fake_runner.set_settings("Dev", "com.example.dev")
        identity = _scanner(fake_runner).resolve_identity(
            root, workspace="Given.xcworkspace", scheme_dev="Dev", scheme_dis="Dev",
        )
        assert identity.bundle_id_dev == "com.example.dev"
        assert fake_runner.calls[0][2:4] == ["-workspace", "Given.xcworkspace"]

    def test_blank_containers_rediscovered(self, fake_runner, make_tree) -> None:
        root = make_tree("ios/Found.xcworkspace")
        _scanner(fake_runner).resolve_identity(
            root, workspace="  ", xcodeproj="", scheme_dev="Dev", scheme_dis="Prod",
        )
        assert fake_runner.calls[0][3].endswith("Found.xcworkspace")

    def test_blank_schemes_skipped(self, fake_runner, make_tree) -> None:
        root = make_tree("A.xcodeproj")
        fake_runner.set_settings("Prod", "com.example.prod", "TEAM000001")
        identity = _scanner(fake_runner).resolve_identity(root, scheme_dev="", scheme_dis="Prod")
        assert identity == IdentityResult(None, "com.example.prod", "TEAM000001")
        assert len(fake_runner.settings_calls()) == 2

    def test_no_containers_anywhere(self, fake_runner, make_tree) -> None:
        root = make_tree()
        identity = _scanner(fake_runner).resolve_identity(root, scheme_dev="Dev", scheme_dis="Prod")
        assert identity == IdentityResult()
        assert fake_runner.calls == []
