"""Missing security headers probe."""

from apiprobe.probes.headers.probe import SECURITY_HEADERS, SecurityHeadersProbe

__all__ = ["SECURITY_HEADERS", "SecurityHeadersProbe"]
