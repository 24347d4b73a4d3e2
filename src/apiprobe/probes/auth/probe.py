"""Authentication bypass probe."""

from apiprobe.models import EndpointSpec, Finding, FindingStatus, ProbeOptions, Severity
from apiprobe.probes.base import BaseProbe
from apiprobe.probes.registry import ProbeRegistry

# Credential headers removed before the request (matched case-insensitively)
AUTH_HEADERS = {"Authorization", "x-api-key", "api-key"}


@ProbeRegistry.register
class AuthenticationProbe(BaseProbe):
    """Replays the request without credentials."""

    error_severity = Severity.MEDIUM

    @property
    def id(self) -> str:
        return "auth-check"

    @property
    def name(self) -> str:
        return "Authentication Check"

    @property
    def description(self) -> str:
        return "Checks if the API requires proper authentication"

    @property
    def error_label(self) -> str:
        return "authentication"

    async def check(
        self,
        endpoint: EndpointSpec,
        options: ProbeOptions | None = None,
    ) -> Finding:
        stripped = endpoint.without_headers(AUTH_HEADERS)
        response = await self.fetch(stripped, options)
        status = response.status_code

        if 200 <= status < 300:
            return self.finding(
                FindingStatus.FAILED,
                "API endpoint accessible without authentication",
                details=f"Received status code {status} without authentication headers",
                severity=Severity.HIGH,
            )

        if status in (401, 403):
            return self.finding(
                FindingStatus.PASSED,
                "API properly requires authentication",
                details=f"Received appropriate status code {status} when authentication was removed",
            )

        return self.finding(
            FindingStatus.WARNING,
            "Unexpected response when testing authentication",
            details=f"Received status code {status} which is neither a success nor an auth error",
            severity=Severity.MEDIUM,
        )
