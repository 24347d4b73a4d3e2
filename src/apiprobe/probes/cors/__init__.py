"""CORS misconfiguration probe."""

from apiprobe.probes.cors.probe import MALICIOUS_ORIGIN, CORSProbe

__all__ = ["MALICIOUS_ORIGIN", "CORSProbe"]
