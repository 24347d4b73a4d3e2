"""Rate limiting probe."""

from apiprobe.probes.ratelimit.probe import RATE_LIMIT_HEADERS, RateLimitProbe

__all__ = ["RATE_LIMIT_HEADERS", "RateLimitProbe"]
