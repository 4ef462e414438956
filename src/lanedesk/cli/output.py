"""Rich output formatting helpers for the lanedesk CLI.

Status Color Mapping:
    pass / success = green, warn / failed = yellow / red, absent = dim
"""

from __future__ import annotations

import json
from typing import Any, Sequence

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from lanedesk.discovery.models import IdentityResult, ScanResult
from lanedesk.discovery.schemes import is_third_party_scheme
from lanedesk.doctor import PASS, DoctorReport
from lanedesk.profile.models import ProjectConfig

console = Console()

_STATUS_STYLES: dict[str, str] = {
    "pass": "bold green",
    "warn": "yellow",
    "success": "bold green",
    "failed": "bold red",
}


def _value(value: str | None) -> Text:
    """Render an optional value, dimming absent ones."""
    if value:
        return Text(value)
    return Text("-", style="dim")


def status_style(status: str) -> str:
    """Return the Rich style string for a check or lane status."""
    return _STATUS_STYLES.get(status, "white")


def print_error(message: str) -> None:
    click.secho(f"Error: {message}", fg="red", err=True)


def print_json(data: Any) -> None:
    """Print data as indented JSON to stdout."""
    click.echo(json.dumps(data, indent=2, default=str))


def print_scan_result(
    result: ScanResult,
    hide_third_party: bool = True,
    main_scheme: str | None = None,
) -> None:
    """Print the scan summary panel and scheme table.

    Args:
        result: The scan to display.
        hide_third_party: Omit library schemes from the table.
        main_scheme: Suggested main scheme, marked in the table.
    """
    header = Text.assemble(
        ("Project: ", "bold"), (result.project_name, ""),
    )
    console.print(Panel(header, title="Scan Result"))

    info = Table(show_header=False, box=None)
    info.add_column("Field", style="bold")
    info.add_column("Value")
    info.add_row("Workspace", _value(result.workspace))
    info.add_row("Project", _value(result.xcodeproj))
    info.add_row("Scheme (dev)", _value(result.selection.development))
    info.add_row("Scheme (dis)", _value(result.selection.distribution))
    info.add_row("Bundle ID (dev)", _value(result.bundle_id_dev))
    info.add_row("Bundle ID (dis)", _value(result.bundle_id_dis))
    info.add_row("Team ID", _value(result.team_id))
    console.print(info)

    if not result.schemes:
        console.print("[dim]No schemes found.[/dim]")
        return

    table = Table(title="Schemes", show_header=True, header_style="bold")
    table.add_column("Scheme", style="bold")
    table.add_column("Role")
    hidden = 0
    for scheme in result.schemes:
        third_party = is_third_party_scheme(scheme)
        if third_party and hide_third_party:
            hidden += 1
            continue
        roles: list[str] = []
        if scheme == result.selection.development:
            roles.append("dev")
        if scheme == result.selection.distribution:
            roles.append("dis")
        if scheme == main_scheme:
            roles.append("main")
        if third_party:
            roles.append("third-party")
        table.add_row(scheme, ", ".join(roles) or "-")
    console.print(table)

    parts = [f"[bold]{len(result.schemes)}[/bold] schemes"]
    if hidden:
        parts.append(f"[dim]{hidden} third-party hidden[/dim]")
    if result.selection.is_collapsed:
        parts.append("[yellow]dev and dis use the same scheme[/yellow]")
    console.print(" | ".join(parts))


def print_identity(identity: IdentityResult, diff: Sequence[str] | None = None) -> None:
    """Print a resolved identity and, optionally, the profile changes."""
    table = Table(title="Identity", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Bundle ID (dev)", _value(identity.bundle_id_dev))
    table.add_row("Bundle ID (dis)", _value(identity.bundle_id_dis))
    table.add_row("Team ID", _value(identity.team_id))
    console.print(table)

    if diff is None:
        return
    if diff:
        console.print("[bold]Profile changes:[/bold]")
        for line in diff:
            console.print(f"  [cyan]{line}[/cyan]")
    else:
        console.print("[dim]Profile unchanged.[/dim]")


def print_profile(config: ProjectConfig) -> None:
    """Print every profile field as a two-column table."""
    table = Table(title="Profile", show_header=True, header_style="bold")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    for key, value in config.to_dict().items():
        if isinstance(value, bool):
            table.add_row(key, Text(str(value).lower(), style="green" if value else "dim"))
        else:
            table.add_row(key, _value(value))
    console.print(table)


def print_doctor_report(report: DoctorReport) -> None:
    """Print the doctor checks with their suggestions."""
    table = Table(title="lanedesk doctor", show_header=True, header_style="bold")
    table.add_column("Check", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Detail")
    for check in report.checks:
        table.add_row(
            check.name,
            Text(check.status.upper(), style=status_style(check.status)),
            check.detail.splitlines()[0] if check.detail else "",
        )
    console.print(table)

    for check in report.checks:
        if check.status != PASS and check.suggestion:
            console.print(f"  [yellow]{check.name}:[/yellow] {check.suggestion}")
