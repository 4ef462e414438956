"""``lanedesk identity <path>`` — Re-resolve bundle ids and team id.

Resolves identity for explicitly chosen schemes without running a full
scan. Schemes and containers not given on the command line come from the
stored profile; containers still missing are rediscovered.

Exit Codes:
    0 — Identity resolved (fields may be empty).
    2 — Missing schemes, bad project path, or profile failure.
"""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path

import click

from lanedesk.cli.options import make_xcodebuild, xcodebuild_options
from lanedesk.cli.output import print_error, print_identity, print_json
from lanedesk.discovery import ProjectScanner
from lanedesk.exceptions import LaneDeskError
from lanedesk.profile import apply_identity, load_or_default, save_profile


@click.command("identity")
@click.argument(
    "path",
    type=click.Path(exists=True, file_okay=False, resolve_path=True, path_type=Path),
)
@click.option("--scheme-dev", default=None, help="Development scheme.")
@click.option("--scheme-dis", default=None, help="Distribution scheme.")
@click.option("--workspace", default=None, help="Workspace path relative to PATH.")
@click.option("--xcodeproj", default=None, help="Project path relative to PATH.")
@xcodebuild_options
@click.option(
    "--apply",
    is_flag=True,
    default=False,
    help="Write the resolved identity into the stored profile.",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
def identity_command(
    path: Path,
    scheme_dev: str | None,
    scheme_dis: str | None,
    workspace: str | None,
    xcodeproj: str | None,
    xcodebuild_bin: str,
    timeout: float | None,
    apply: bool,
    output_format: str,
) -> None:
    """Resolve bundle identifiers and signing team for chosen schemes."""
    try:
        config = replace(load_or_default(path), project_path=str(path))
        scheme_dev = scheme_dev or config.scheme_dev
        scheme_dis = scheme_dis or config.scheme_dis
        if not scheme_dev.strip() or not scheme_dis.strip():
            print_error("Select both --scheme-dev and --scheme-dis first.")
            sys.exit(2)

        scanner = ProjectScanner(make_xcodebuild(xcodebuild_bin, timeout))
        identity = scanner.resolve_identity(
            path,
            workspace=workspace or config.workspace,
            xcodeproj=xcodeproj or config.xcodeproj,
            scheme_dev=scheme_dev,
            scheme_dis=scheme_dis,
        )

        diff: list[str] | None = None
        if apply:
            updated, diff = apply_identity(
                replace(config, scheme_dev=scheme_dev, scheme_dis=scheme_dis), identity,
            )
            save_profile(updated)
    except LaneDeskError as exc:
        print_error(str(exc))
        sys.exit(2)

    if output_format == "json":
        data = identity.to_dict()
        data["changes"] = diff
        print_json(data)
    else:
        print_identity(identity, diff)
