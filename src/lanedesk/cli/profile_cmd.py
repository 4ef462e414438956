"""``lanedesk profile`` — Inspect and edit the stored project profile.

Subcommands:
    show — Print the profile at ``<path>/.fastlane-desktop/profile.json``.
    set  — Set one field (creating the profile if needed).

Exit Codes:
    0 — Success.
    2 — Profile missing, malformed, or an invalid field/value.
"""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path

import click

from lanedesk.cli.output import print_error, print_json, print_profile
from lanedesk.exceptions import LaneDeskError
from lanedesk.profile import load_or_default, load_profile, save_profile, set_field

_PATH_ARG = click.argument(
    "path",
    type=click.Path(exists=True, file_okay=False, resolve_path=True, path_type=Path),
)


@click.group("profile")
def profile_group() -> None:
    """Inspect and edit the project profile."""


@profile_group.command("show")
@_PATH_ARG
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
def profile_show(path: Path, output_format: str) -> None:
    """Show the profile stored for PATH."""
    try:
        config = load_profile(path)
    except LaneDeskError as exc:
        print_error(str(exc))
        sys.exit(2)

    if output_format == "json":
        print_json(config.to_dict())
    else:
        print_profile(config)


@profile_group.command("set")
@_PATH_ARG
@click.argument("field")
@click.argument("value")
def profile_set(path: Path, field: str, value: str) -> None:
    """Set FIELD to VALUE in the profile for PATH.

    FIELD may be snake_case (team_id) or camelCase (teamId).
    """
    try:
        config = replace(load_or_default(path), project_path=str(path))
        saved = save_profile(set_field(config, field, value))
    except LaneDeskError as exc:
        print_error(str(exc))
        sys.exit(2)
    click.echo(f"Profile saved: {saved}")
