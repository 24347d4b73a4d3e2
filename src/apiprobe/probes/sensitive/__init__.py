"""Sensitive data exposure probe."""

from apiprobe.probes.sensitive.probe import SENSITIVE_PATTERNS, SensitiveDataProbe, scan_text

__all__ = ["SENSITIVE_PATTERNS", "SensitiveDataProbe", "scan_text"]
