"""Infrastructure layer."""

from apiprobe.infrastructure.http import HTTPClient, ProbeResponse

__all__ = ["HTTPClient", "ProbeResponse"]
