"""Shared fixtures for CLI tests.

CLI tests run the real process layer against a stand-in ``xcodebuild``: a
small shell script that prints canned ``-list`` and ``-showBuildSettings``
output and appends every invocation to ``calls.log`` beside itself.
"""

from __future__ import annotations

import stat
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.helpers import BUNDLE_ID_DEV, BUNDLE_ID_DIS, TEAM_ID, WORKSPACE_LIST_OUTPUT

_FAKE_XCODEBUILD = f"""#!/bin/sh
echo "$(pwd -P)|$*" >> "$(dirname "$0")/calls.log"
mode=""
scheme=""
while [ $# -gt 0 ]; do
  case "$1" in
    -list) mode=list ;;
    -showBuildSettings) mode=settings ;;
    -scheme) shift; scheme="$1" ;;
  esac
  shift
done
if [ "$mode" = list ]; then
  cat <<'EOF'
{WORKSPACE_LIST_OUTPUT}EOF
  exit 0
fi
case "$scheme" in
  MyApp) bundle={BUNDLE_ID_DIS} ;;
  MyApp-Dev) bundle={BUNDLE_ID_DEV} ;;
  *) echo "xcodebuild: error: Scheme $scheme not found" >&2; exit 65 ;;
esac
echo "Build settings for action build and target MyApp:"
echo "    DEVELOPMENT_TEAM = {TEAM_ID}"
echo "    PRODUCT_BUNDLE_IDENTIFIER = $bundle"
echo "    PRODUCT_NAME = MyApp"
"""


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def fake_xcodebuild(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Install the stand-in xcodebuild and point LANEDESK_XCODEBUILD at it."""
    if sys.platform == "win32":
        pytest.skip("fake xcodebuild is a POSIX shell script")
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = bin_dir / "xcodebuild"
    script.write_text(_FAKE_XCODEBUILD)
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    monkeypatch.setenv("LANEDESK_XCODEBUILD", str(script))
    monkeypatch.delenv("LANEDESK_TIMEOUT", raising=False)
    return script


@pytest.fixture
def xcode_calls(fake_xcodebuild: Path):
    """Return a reader for the stand-in's invocation log as (cwd, args) pairs."""
    log = fake_xcodebuild.parent / "calls.log"

    def _read() -> list[tuple[str, str]]:
        if not log.exists():
            return []
        return [tuple(line.split("|", 1)) for line in log.read_text().splitlines()]

    return _read


@pytest.fixture
def ios_project(tmp_path: Path) -> Path:
    """Create ``MyApp/`` with a workspace and a project container."""
    root = tmp_path / "MyApp"
    (root / "MyApp.xcworkspace").mkdir(parents=True)
    (root / "MyApp.xcodeproj").mkdir()
    return root.resolve()
