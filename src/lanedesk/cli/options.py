"""Click options shared by commands that run ``xcodebuild``."""

from __future__ import annotations

from typing import Any, Callable

import click

from lanedesk.discovery.xcodebuild import XCODEBUILD, XcodeBuild


def xcodebuild_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add ``--xcodebuild`` and ``--timeout`` (with env fallbacks)."""
    func = click.option(
        "--timeout",
        type=click.FloatRange(min=0, min_open=True),
        default=None,
        envvar="LANEDESK_TIMEOUT",
        show_envvar=True,
        help="Seconds to wait for each xcodebuild call (default: no limit).",
    )(func)
    func = click.option(
        "--xcodebuild", "xcodebuild_bin",
        default=XCODEBUILD,
        envvar="LANEDESK_XCODEBUILD",
        show_envvar=True,
        show_default=True,
        help="xcodebuild executable to run.",
    )(func)
    return func


def make_xcodebuild(xcodebuild_bin: str, timeout: float | None) -> XcodeBuild:
    return XcodeBuild(binary=xcodebuild_bin, timeout=timeout)
