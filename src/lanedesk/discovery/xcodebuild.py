"""``xcodebuild`` invocation and text parsing.

Two introspection modes are used:

- ``xcodebuild -list -workspace|-project <path>`` lists the schemes.
- ``xcodebuild -showBuildSettings -workspace|-project <path> -scheme <name>``
  dumps resolved build settings as ``KEY = value`` lines.

Neither mode is consumed through a structured format; only text output and
exit status are used. The two parsers, ``parse_schemes`` and
``extract_build_setting``, are pure functions so a change in the tool's
output layout touches nothing else.

Example ``-list`` output::

    Information about workspace "MyApp":
        Schemes:
            MyApp
            MyApp-Dev
"""

from __future__ import annotations

import logging
from pathlib import Path

from lanedesk.exceptions import ToolInvocationError
from lanedesk.process import ProcessOutput, Runner, run_process

logger = logging.getLogger(__name__)

XCODEBUILD = "xcodebuild"
_SCHEMES_MARKER = "schemes:"


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------


def parse_schemes(text: str) -> list[str]:
    """Extract scheme names from ``xcodebuild -list`` output.

    Collection starts after a line reading ``Schemes:`` (any case, any
    surrounding whitespace). Indented non-blank lines are collected in
    order. Collection stops at the first blank line once at least one
    scheme has been seen, or at the first non-indented line.

    Args:
        text: Combined stdout/stderr of the list command.

    Returns:
        Scheme names in order of appearance. Duplicates are kept.
    """
    schemes: list[str] = []
    in_schemes = False

    for line in text.splitlines():
        stripped = line.strip()
        if stripped.lower() == _SCHEMES_MARKER:
            in_schemes = True
            continue
        if not in_schemes:
            continue
        if not stripped:
            if schemes:
                break
            continue
        if not line[:1].isspace():
            break
        schemes.append(stripped)

    return schemes


def extract_build_setting(text: str, key: str) -> str | None:
    """Return the value of ``key`` from ``-showBuildSettings`` output.

    A line matches when, after trimming, it starts with ``"<key> = "``.
    The first match with a non-empty value wins.
    """
    prefix = f"{key} = "
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped.startswith(prefix):
            continue
        value = stripped[len(prefix):].strip()
        if value:
            return value
    return None


# ---------------------------------------------------------------------------
# Invocation
# ---------------------------------------------------------------------------


def container_args(workspace: str | None, xcodeproj: str | None) -> list[str] | None:
    """Build the container arguments, preferring the workspace.

    Returns None when neither container is available.
    """
    if workspace:
        return ["-workspace", workspace]
    if xcodeproj:
        return ["-project", xcodeproj]
    return None


class XcodeBuild:
    """Runs ``xcodebuild`` introspection commands for one project root.

    Every call is a single blocking invocation with ``cwd`` set to the
    project root, so container paths stay relative. Failures never escape:
    a spawn error, timeout, or non-zero exit yields an empty or absent
    value and a debug log line.

    Args:
        binary: Program to run. Defaults to ``xcodebuild`` on ``PATH``.
        timeout: Per-invocation timeout in seconds. None waits forever.
        runner: Process runner, replaceable in tests.
    """

    def __init__(
        self,
        binary: str = XCODEBUILD,
        timeout: float | None = None,
        runner: Runner = run_process,
    ) -> None:
        self.binary = binary
        self.timeout = timeout
        self._runner = runner

    def list_command(self, workspace: str | None, xcodeproj: str | None) -> list[str] | None:
        target = container_args(workspace, xcodeproj)
        if target is None:
            return None
        return [self.binary, "-list", *target]

    def settings_command(
        self, workspace: str | None, xcodeproj: str | None, scheme: str,
    ) -> list[str] | None:
        target = container_args(workspace, xcodeproj)
        if target is None:
            return None
        return [self.binary, "-showBuildSettings", *target, "-scheme", scheme]

    def _run(self, argv: list[str], root: Path | str) -> ProcessOutput | None:
        try:
            return self._runner(argv, cwd=root, timeout=self.timeout)
        except ToolInvocationError as exc:
            logger.debug("xcodebuild invocation failed: %s", exc)
            return None

    def list_schemes(
        self, root: Path | str, workspace: str | None, xcodeproj: str | None,
    ) -> list[str]:
        """List the schemes of the workspace (or project) under ``root``.

        The exit status is ignored: ``xcodebuild -list`` can print a usable
        scheme section while still reporting warnings on stderr.

        Returns:
            Scheme names in tool order, or an empty list if nothing could
            be listed.
        """
        argv = self.list_command(workspace, xcodeproj)
        if argv is None:
            return []
        output = self._run(argv, root)
        if output is None:
            return []
        schemes = parse_schemes(output.combined)
        if not schemes:
            logger.debug("No schemes found in output of %s", argv)
        return schemes

    def show_build_settings(
        self,
        root: Path | str,
        workspace: str | None,
        xcodeproj: str | None,
        scheme: str,
    ) -> str | None:
        """Return the stdout of ``-showBuildSettings``, or None on failure."""
        argv = self.settings_command(workspace, xcodeproj, scheme)
        if argv is None:
            return None
        output = self._run(argv, root)
        if output is None:
            return None
        if not output.ok:
            logger.debug(
                "xcodebuild -showBuildSettings for %r exited with %d",
                scheme, output.returncode,
            )
            return None
        return output.stdout
