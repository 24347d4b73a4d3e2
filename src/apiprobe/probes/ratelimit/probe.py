"""Rate limiting probe."""

import asyncio
import time

from apiprobe.infrastructure.http import ProbeResponse
from apiprobe.models import EndpointSpec, Finding, FindingStatus, ProbeOptions, Severity
from apiprobe.probes.base import BaseProbe
from apiprobe.probes.registry import ProbeRegistry

RATE_LIMIT_STATUSES = {429, 503}

RATE_LIMIT_HEADERS = [
    "x-rate-limit-limit",
    "x-rate-limit-remaining",
    "x-rate-limit-reset",
    "retry-after",
    "ratelimit-limit",
    "ratelimit-remaining",
    "ratelimit-reset",
]


@ProbeRegistry.register
class RateLimitProbe(BaseProbe):
    """Fires a small concurrent burst and looks for throttling evidence.

    Five requests is a weak signal by nature: a "warning" here means no
    evidence was seen, not that the API is unthrottled.
    """

    error_severity = Severity.LOW

    BURST_SIZE = 5
    FAST_BURST_MS = 1000

    @property
    def id(self) -> str:
        return "rate-limit"

    @property
    def name(self) -> str:
        return "Rate Limiting"

    @property
    def description(self) -> str:
        return "Checks if the API implements rate limiting"

    @property
    def error_label(self) -> str:
        return "rate limit"

    async def check(
        self,
        endpoint: EndpointSpec,
        options: ProbeOptions | None = None,
    ) -> Finding:
        responses, total_ms = await self._burst(endpoint, options)

        self.logger.debug(
            "rate_limit_burst",
            url=endpoint.url,
            statuses=[r.status_code for r in responses],
            total_ms=int(total_ms),
        )

        if any(r.status_code in RATE_LIMIT_STATUSES for r in responses):
            return self.finding(
                FindingStatus.PASSED,
                "API implements rate limiting (received 429/503)",
                details="Rate limiting is properly enforced",
            )

        if any(_has_rate_limit_header(r) for r in responses):
            return self.finding(
                FindingStatus.PASSED,
                "API includes rate limit headers",
                details="Rate limiting appears to be implemented",
            )

        if total_ms < self.FAST_BURST_MS and all(r.status_code < 400 for r in responses):
            return self.finding(
                FindingStatus.WARNING,
                "No rate limiting detected",
                details="API processed multiple requests quickly without rate limiting",
                severity=Severity.MEDIUM,
            )

        return self.finding(
            FindingStatus.WARNING,
            "Rate limiting status unclear",
            details="Could not definitively determine if rate limiting is implemented",
            severity=Severity.LOW,
        )

    async def _burst(
        self,
        endpoint: EndpointSpec,
        options: ProbeOptions | None = None,
    ) -> tuple[list[ProbeResponse], float]:
        """Send BURST_SIZE identical requests concurrently.

        Returns the responses and the wall-clock time of the burst in ms,
        measured after the client is set up.
        """
        async with self.client(options) as client:
            start = time.perf_counter()
            tasks = [
                client.send(
                    endpoint.method.value,
                    endpoint.url,
                    headers=endpoint.headers,
                    json_body=endpoint.safe_json_body(),
                )
                for _ in range(self.BURST_SIZE)
            ]
            responses = await asyncio.gather(*tasks)
            total_ms = (time.perf_counter() - start) * 1000
        return list(responses), total_ms


def _has_rate_limit_header(response: ProbeResponse) -> bool:
    return any(response.headers.get(name) for name in RATE_LIMIT_HEADERS)
