"""Security probes.

Importing this package registers the built-in probes. The import order below
is the registry order, and therefore the order of findings in a report.
"""

from apiprobe.probes.base import BaseProbe
from apiprobe.probes.registry import ProbeRegistry, resolve_probes, unknown_probe_ids

from apiprobe.probes.auth import AuthenticationProbe
from apiprobe.probes.sensitive import SensitiveDataProbe
from apiprobe.probes.cors import CORSProbe
from apiprobe.probes.headers import SecurityHeadersProbe
from apiprobe.probes.ratelimit import RateLimitProbe

__all__ = [
    "BaseProbe",
    "ProbeRegistry",
    "resolve_probes",
    "unknown_probe_ids",
    "AuthenticationProbe",
    "SensitiveDataProbe",
    "CORSProbe",
    "SecurityHeadersProbe",
    "RateLimitProbe",
]
