"""Missing security headers probe."""

from apiprobe.models import EndpointSpec, Finding, FindingStatus, ProbeOptions, Severity
from apiprobe.probes.base import BaseProbe
from apiprobe.probes.registry import ProbeRegistry

# Declaration order is the order missing headers are reported in
SECURITY_HEADERS = [
    "Strict-Transport-Security",
    "Content-Security-Policy",
    "X-Content-Type-Options",
    "X-Frame-Options",
    "X-XSS-Protection",
]

# More than this many missing headers is a failure rather than a warning
MAX_MISSING_FOR_WARNING = 2


@ProbeRegistry.register
class SecurityHeadersProbe(BaseProbe):
    """Checks the response for recommended security headers."""

    error_severity = Severity.LOW

    @property
    def id(self) -> str:
        return "security-headers"

    @property
    def name(self) -> str:
        return "Security Headers"

    @property
    def description(self) -> str:
        return "Checks for important security headers"

    @property
    def error_label(self) -> str:
        return "security headers"

    async def check(
        self,
        endpoint: EndpointSpec,
        options: ProbeOptions | None = None,
    ) -> Finding:
        response = await self.fetch(endpoint, options)

        missing = [name for name in SECURITY_HEADERS if not response.headers.get(name)]

        if not missing:
            return self.finding(
                FindingStatus.PASSED,
                "All recommended security headers are present",
            )

        details = f"Missing headers: {', '.join(missing)}"

        if len(missing) <= MAX_MISSING_FOR_WARNING:
            return self.finding(
                FindingStatus.WARNING,
                "Some recommended security headers are missing",
                details=details,
                severity=Severity.MEDIUM,
            )

        return self.finding(
            FindingStatus.FAILED,
            "Multiple important security headers are missing",
            details=details,
            severity=Severity.HIGH,
        )
