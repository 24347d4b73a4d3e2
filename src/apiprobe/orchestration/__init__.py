"""Scan orchestration."""

from apiprobe.orchestration.coordinator import ScanCoordinator, run_scan

__all__ = ["ScanCoordinator", "run_scan"]
