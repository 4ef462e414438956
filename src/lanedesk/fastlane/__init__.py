"""fastlane integration: environment file generation and lane runs."""

from __future__ import annotations

from lanedesk.fastlane.envfile import generate_fastlane_files, render_env
from lanedesk.fastlane.lanes import KNOWN_LANES, LaneRunResult, run_lane

__all__ = [
    "KNOWN_LANES",
    "LaneRunResult",
    "generate_fastlane_files",
    "render_env",
    "run_lane",
]
