"""JSON formatter for CLI output."""

import json
from pathlib import Path

from rich.console import Console

from apiprobe.models import ScanReport


def format_json(console: Console, report: ScanReport) -> None:
    """Format and display a scan report as JSON."""
    console.print_json(report.model_dump_json(indent=2))


def export_json(report: ScanReport, path: str | Path) -> None:
    """Export a scan report to a JSON file."""
    with open(path, "w") as f:
        json.dump(report.to_json_dict(), f, indent=2, default=str)
