"""Table formatter for CLI output."""

import json

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from apiprobe.models import FindingStatus, ProbeInfo, ScanReport, Severity

STATUS_STYLES = {
    FindingStatus.PASSED: "[green]✓ passed[/green]",
    FindingStatus.FAILED: "[red]✗ failed[/red]",
    FindingStatus.WARNING: "[yellow]! warning[/yellow]",
}

SEVERITY_STYLES = {
    Severity.CRITICAL: "bold red",
    Severity.HIGH: "red",
    Severity.MEDIUM: "dark_orange",
    Severity.LOW: "yellow",
}

# Raw responses longer than this are cut in table output
RAW_RESPONSE_LIMIT = 2000


def format_scan_report(console: Console, report: ScanReport, show_raw: bool = False) -> None:
    """Format and display a scan report as tables."""
    console.print()

    lines = [
        "[bold green]Scan Complete[/bold green]",
        f"URL: [cyan]{report.endpoint.url}[/cyan]",
        f"Method: [cyan]{report.endpoint.method.value}[/cyan]",
        f"Completed: {report.timestamp.isoformat(timespec='seconds')}",
    ]
    if report.status_code is not None:
        lines.append(f"Status code: {report.status_code}")
    if report.response_time_ms is not None:
        lines.append(f"Response time: {report.response_time_ms}ms")

    console.print(Panel("\n".join(lines), title="Results"))

    _format_findings(console, report)
    _format_summary(console, report)

    if show_raw:
        _format_raw_response(console, report)


def _format_findings(console: Console, report: ScanReport) -> None:
    """Format the findings table."""
    table = Table(title="Security Tests", show_header=True)
    table.add_column("Test", style="cyan")
    table.add_column("Status")
    table.add_column("Severity")
    table.add_column("Description")
    table.add_column("Details")

    for finding in report.findings:
        if finding.severity:
            style = SEVERITY_STYLES[finding.severity]
            severity = f"[{style}]{finding.severity.value.upper()}[/{style}]"
        else:
            severity = "-"
        table.add_row(
            finding.name,
            STATUS_STYLES[finding.status],
            severity,
            finding.description,
            finding.details or "",
        )

    console.print(table)


def _format_summary(console: Console, report: ScanReport) -> None:
    """Format pass/fail/warning tallies."""
    console.print(
        f"\n[green]{report.passed_count} Passed[/green]  "
        f"[red]{report.failed_count} Failed[/red]  "
        f"[yellow]{report.warning_count} Warnings[/yellow]"
    )


def _format_raw_response(console: Console, report: ScanReport) -> None:
    """Format the baseline response body."""
    if report.raw_response is None:
        console.print("[dim]No response data available[/dim]")
        return

    text = json.dumps(report.raw_response, indent=2, ensure_ascii=False)
    if len(text) > RAW_RESPONSE_LIMIT:
        text = text[:RAW_RESPONSE_LIMIT] + "\n..."
    console.print(Panel(Syntax(text, "json", word_wrap=True), title="Raw Response"))


def format_probe_list(console: Console, probes: list[ProbeInfo]) -> None:
    """Format the registered probes."""
    table = Table(title="Available Probes", show_header=True)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("Description")

    for probe in probes:
        table.add_row(probe.id, probe.name, probe.description)

    console.print(table)
