"""``lanedesk generate`` / ``lanes`` / ``lane`` — fastlane integration.

``generate <path>`` writes ``fastlane/.env.fastlane`` from the stored
profile. ``lanes`` lists the lanes of the supported Fastfile. ``lane <path>
<lane>`` runs one lane through Bundler and prints its captured output
when the lane finishes.

Exit Codes:
    generate: 0 on success, 2 if the profile is missing or unwritable.
    lane: the lane's own exit code (1 if it reported none), 2 if it could
        not be started.
"""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path

import click

from lanedesk.cli.output import console, print_error, status_style
from lanedesk.exceptions import LaneDeskError
from lanedesk.fastlane import KNOWN_LANES, generate_fastlane_files, run_lane
from lanedesk.profile import load_profile

_PATH_TYPE = click.Path(exists=True, file_okay=False, resolve_path=True, path_type=Path)


@click.command("generate")
@click.argument("path", type=_PATH_TYPE)
def generate_command(path: Path) -> None:
    """Generate fastlane env files for PATH from its profile."""
    try:
        config = replace(load_profile(path), project_path=str(path))
        written = generate_fastlane_files(config)
    except LaneDeskError as exc:
        print_error(str(exc))
        sys.exit(2)

    click.echo("Generated files:")
    for file_path in written:
        click.echo(f"- {file_path}")


@click.command("lanes")
def lanes_command() -> None:
    """List the lanes lanedesk knows about."""
    for lane in KNOWN_LANES:
        click.echo(lane)


@click.command("lane")
@click.argument("path", type=_PATH_TYPE)
@click.argument("lane")
def lane_command(path: Path, lane: str) -> None:
    """Run LANE with `bundle exec fastlane ios LANE` in PATH."""
    if lane not in KNOWN_LANES:
        click.echo(f"Note: {lane!r} is not a built-in lane; running it anyway.", err=True)
    try:
        result = run_lane(path, lane)
    except LaneDeskError as exc:
        print_error(str(exc))
        sys.exit(2)

    click.echo(result.output.rstrip("\n"))
    console.print(
        f"Lane [bold]{result.lane}[/bold]: "
        f"[{status_style(result.status)}]{result.status}[/] (exit {result.exit_code})"
    )
    if result.succeeded:
        return
    sys.exit(result.exit_code if result.exit_code > 0 else 1)
