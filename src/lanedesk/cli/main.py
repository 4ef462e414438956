"""lanedesk CLI — Xcode project discovery and fastlane release automation.

Entry point for the ``lanedesk`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    scan      — Discover containers, schemes, bundle ids and team id.
    identity  — Re-resolve bundle ids and team id for chosen schemes.
    profile   — Show or edit the stored project profile.
    generate  — Write fastlane/.env.fastlane from the profile.
    lanes     — List the built-in fastlane lanes.
    lane      — Run one fastlane lane.
    doctor    — Check the local release toolchain.

Usage::

    lanedesk scan ./MyApp --save
    lanedesk identity ./MyApp --scheme-dev MyApp-Dev --scheme-dis MyApp --apply
    lanedesk profile set ./MyApp matchGitUrl git@github.com:org/certs.git
    lanedesk generate ./MyApp
    lanedesk lane ./MyApp release_testflight
    lanedesk doctor ./MyApp
"""

from __future__ import annotations

import logging

import click

from lanedesk import __version__
from lanedesk.cli.doctor_cmd import doctor_command
from lanedesk.cli.fastlane_cmd import generate_command, lane_command, lanes_command
from lanedesk.cli.identity_cmd import identity_command
from lanedesk.cli.profile_cmd import profile_group
from lanedesk.cli.scan import scan_command


@click.group()
@click.version_option(version=__version__, prog_name="lanedesk")
@click.option(
    "-v", "--verbose",
    is_flag=True,
    default=False,
    help="Log every external command and why lookups came back empty.",
)
def cli(verbose: bool) -> None:
    """lanedesk: Xcode project discovery and fastlane release automation.

    Scan an iOS project, keep its release settings in a profile, generate
    the fastlane environment file, and run lanes.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register all subcommands
cli.add_command(scan_command)
cli.add_command(identity_command)
cli.add_command(profile_group)
cli.add_command(generate_command)
cli.add_command(lanes_command)
cli.add_command(lane_command)
cli.add_command(doctor_command)
