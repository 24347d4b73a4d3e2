"""apiprobe - heuristic security checks for a single HTTP API endpoint."""

from apiprobe.version import __version__

__all__ = ["__version__"]
