"""Run fastlane lanes in a project directory.

Lanes run as ``bundle exec fastlane ios <lane>`` with the project root as
working directory, so the project's Gemfile pins the fastlane version.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from lanedesk.exceptions import LaneError, ProjectNotFoundError, ToolInvocationError
from lanedesk.process import Runner, run_process

logger = logging.getLogger(__name__)

# Lanes defined by the Fastfile template that lanedesk targets.
KNOWN_LANES: tuple[str, ...] = (
    "validate_config",
    "dev",
    "dis",
    "staging",
    "prod",
    "release_testflight",
    "release_appstore",
    "snapshot_capture",
    "metadata_sync",
    "ci_setup",
    "ci_build_dev",
    "ci_build_dis",
)

_LANE_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True)
class LaneRunResult:
    """Outcome of one lane run.

    Attributes:
        status: "success" or "failed".
        exit_code: Process exit status, or -1 if the process reported none.
        output: Standard output and standard error, newline separated.
        lane: The lane that was run.
    """

    status: str
    exit_code: int
    output: str
    lane: str

    @property
    def succeeded(self) -> bool:
        return self.status == "success"


def lane_argv(lane: str) -> list[str]:
    """Build the argv for running ``lane``.

    Raises:
        LaneError: ``lane`` is not a valid lane identifier.
    """
    if not _LANE_NAME_RE.match(lane):
        raise LaneError(f"Invalid lane name: {lane!r}")
    return ["bundle", "exec", "fastlane", "ios", lane]


def run_lane(
    project_path: Path | str,
    lane: str,
    runner: Runner = run_process,
) -> LaneRunResult:
    """Run ``lane`` in ``project_path`` and wait for it to finish.

    A lane that exits non-zero is reported as ``failed``, not raised.

    Raises:
        ProjectNotFoundError: ``project_path`` does not exist.
        LaneError: Invalid lane name, or the process could not be spawned.
    """
    argv = lane_argv(lane)
    root = Path(project_path)
    if not root.exists():
        raise ProjectNotFoundError(project_path)

    logger.debug("Running lane %s in %s", lane, root)
    try:
        output = runner(argv, cwd=root, timeout=None)
    except ToolInvocationError as exc:
        raise LaneError(f"Failed to run lane: {exc.reason}") from exc

    exit_code = output.returncode if output.returncode >= 0 else -1
    return LaneRunResult(
        status="success" if output.ok else "failed",
        exit_code=exit_code,
        output=output.combined,
        lane=lane,
    )
