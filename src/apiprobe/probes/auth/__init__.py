"""Authentication bypass probe."""

from apiprobe.probes.auth.probe import AUTH_HEADERS, AuthenticationProbe

__all__ = ["AUTH_HEADERS", "AuthenticationProbe"]
