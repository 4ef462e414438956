"""Toolchain health checks for iOS release automation.

Each check runs one version or path command and reports ``pass`` or
``warn``. A missing tool is a warning, never an error, because not every
project needs every tool (CocoaPods, for instance).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from lanedesk.exceptions import ToolInvocationError
from lanedesk.process import Runner, run_process

logger = logging.getLogger(__name__)

PASS = "pass"
WARN = "warn"

# (name, argv, suggestion shown when the check warns)
_COMMAND_CHECKS: tuple[tuple[str, list[str], str | None], ...] = (
    ("Xcode CLI", ["xcode-select", "-p"], None),
    ("Xcode Build", ["xcodebuild", "-version"], None),
    ("Ruby", ["ruby", "-v"], "Install Ruby and ensure it is in PATH."),
    ("Bundler", ["bundle", "-v"],
     "Run `gem install bundler` or ensure Bundler is available."),
    ("Fastlane", ["fastlane", "--version"], "Run `bundle install` or install fastlane."),
    ("CocoaPods", ["pod", "--version"],
     "Install CocoaPods if your project depends on Pods."),
)

_GEMFILE_SUGGESTION = "Create Gemfile to manage fastlane gems consistently."


@dataclass(frozen=True)
class DoctorCheck:
    """Result of one health check."""

    name: str
    status: str
    detail: str
    suggestion: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status,
            "detail": self.detail,
            "suggestion": self.suggestion,
        }


@dataclass
class DoctorReport:
    """All checks from one ``doctor_check`` run, in execution order."""

    checks: list[DoctorCheck] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(c.status == PASS for c in self.checks)

    def to_dict(self) -> dict[str, Any]:
        return {"checks": [c.to_dict() for c in self.checks]}


def check_command(
    name: str,
    argv: list[str],
    suggestion: str | None = None,
    runner: Runner = run_process,
) -> DoctorCheck:
    """Run ``argv`` and turn its outcome into a ``DoctorCheck``."""
    try:
        output = runner(argv, cwd=None, timeout=None)
    except ToolInvocationError as exc:
        logger.debug("Doctor check %s could not run: %s", name, exc)
        return DoctorCheck(name, WARN, f"failed to execute: {exc.reason}", suggestion)

    stdout = output.stdout.strip()
    stderr = output.stderr.strip()
    if output.ok:
        return DoctorCheck(name, PASS, stdout or "ok")
    return DoctorCheck(name, WARN, stderr or stdout or "command failed", suggestion)


def check_gemfile(root: Path) -> DoctorCheck:
    if (root / "Gemfile").is_file():
        return DoctorCheck("Gemfile", PASS, "ok")
    return DoctorCheck("Gemfile", WARN, f"no Gemfile in {root}", _GEMFILE_SUGGESTION)


def doctor_check(
    project_path: Path | str | None = None,
    runner: Runner = run_process,
) -> DoctorReport:
    """Check the local toolchain and the project's Gemfile.

    Args:
        project_path: Project root for the Gemfile check. Blank or None
            uses the current directory.
        runner: Process runner, replaceable in tests.
    """
    if project_path is None or not str(project_path).strip():
        root = Path.cwd()
    else:
        root = Path(project_path)

    report = DoctorReport()
    for name, argv, suggestion in _COMMAND_CHECKS:
        report.checks.append(check_command(name, argv, suggestion, runner=runner))
    report.checks.append(check_gemfile(root))
    return report
