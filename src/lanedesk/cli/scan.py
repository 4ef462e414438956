"""``lanedesk scan <path>`` — Discover an Xcode project's build topology.

Finds the workspace and project containers, lists schemes through
``xcodebuild``, picks development and distribution schemes, and resolves
their bundle identifiers and signing team. With ``--save`` the result is
merged into the project's profile.

Exit Codes:
    0 — Scan completed (possibly with sparse results).
    2 — The project path could not be scanned or the profile not saved.
"""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path

import click

from lanedesk.cli.options import make_xcodebuild, xcodebuild_options
from lanedesk.cli.output import print_error, print_json, print_scan_result
from lanedesk.discovery import ProjectScanner, ScanResult
from lanedesk.discovery.schemes import filter_app_schemes, lock_main_scheme, suggest_main_scheme
from lanedesk.exceptions import LaneDeskError
from lanedesk.profile import apply_scan, load_or_default, save_profile


def _lock_main(
    scanner: ProjectScanner,
    root: Path,
    result: ScanResult,
    available: list[str],
    main: str,
) -> ScanResult:
    """Re-select schemes around ``main`` and re-resolve their identity."""
    selection = lock_main_scheme(available, main)
    identity = scanner.resolve_identity(
        root,
        workspace=result.workspace,
        xcodeproj=result.xcodeproj,
        scheme_dev=selection.development,
        scheme_dis=selection.distribution,
    )
    return replace(result, selection=selection, identity=identity)


def _save(root: Path, result: ScanResult) -> Path:
    config = replace(load_or_default(root), project_path=str(root))
    return save_profile(apply_scan(config, result))


@click.command("scan")
@click.argument(
    "path",
    type=click.Path(exists=True, file_okay=False, resolve_path=True, path_type=Path),
)
@xcodebuild_options
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
@click.option(
    "--hide-third-party/--show-third-party",
    default=True,
    help="Hide CocoaPods and library schemes from the listing (default: hide).",
)
@click.option(
    "--lock-main",
    is_flag=True,
    default=False,
    help="Use the suggested main scheme for distribution builds.",
)
@click.option(
    "--save",
    is_flag=True,
    default=False,
    help="Merge the result into .fastlane-desktop/profile.json.",
)
def scan_command(
    path: Path,
    xcodebuild_bin: str,
    timeout: float | None,
    output_format: str,
    hide_third_party: bool,
    lock_main: bool,
    save: bool,
) -> None:
    """Scan the Xcode project at PATH.

    Schemes whose names contain dev/debug/staging are preferred for
    development builds; prod/release/appstore for distribution builds.
    """
    scanner = ProjectScanner(make_xcodebuild(xcodebuild_bin, timeout))
    try:
        result = scanner.scan(path)
        available = (
            filter_app_schemes(result.schemes) if hide_third_party else list(result.schemes)
        )
        main = suggest_main_scheme(available, result.project_name)
        if lock_main and main is not None:
            result = _lock_main(scanner, path, result, available, main)
        saved = _save(path, result) if save else None
    except LaneDeskError as exc:
        print_error(str(exc))
        sys.exit(2)

    if output_format == "json":
        data = result.to_dict()
        data["suggestedMainScheme"] = main
        data["profile"] = str(saved) if saved else None
        print_json(data)
        return

    print_scan_result(result, hide_third_party=hide_third_party, main_scheme=main)
    if saved is not None:
        click.echo(f"Profile saved: {saved}")
