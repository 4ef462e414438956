"""``lanedesk doctor [path]`` — Check the iOS release toolchain.

Exit Codes:
    0 — Always (informational command; warnings do not fail it).
"""

from __future__ import annotations

from pathlib import Path

import click

from lanedesk.cli.output import print_doctor_report, print_json
from lanedesk.doctor import doctor_check


@click.command("doctor")
@click.argument(
    "path",
    type=click.Path(exists=True, file_okay=False, resolve_path=True, path_type=Path),
    required=False,
    default=None,
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
def doctor_command(path: Path | None, output_format: str) -> None:
    """Check Xcode, Ruby, Bundler, fastlane, CocoaPods and the Gemfile."""
    report = doctor_check(path)
    if output_format == "json":
        print_json(report.to_dict())
    else:
        print_doctor_report(report)
