"""CLI output formatters."""

from apiprobe.cli.formatters.table import format_probe_list, format_scan_report
from apiprobe.cli.formatters.json_fmt import export_json, format_json

__all__ = ["format_probe_list", "format_scan_report", "export_json", "format_json"]
