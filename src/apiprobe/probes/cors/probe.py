"""CORS misconfiguration probe."""

from apiprobe.models import EndpointSpec, Finding, FindingStatus, ProbeOptions, Severity
from apiprobe.probes.base import BaseProbe
from apiprobe.probes.registry import ProbeRegistry

MALICIOUS_ORIGIN = "https://malicious-site.example.com"

CORS_HEADERS = [
    "Access-Control-Allow-Origin",
    "Access-Control-Allow-Methods",
    "Access-Control-Allow-Headers",
    "Access-Control-Allow-Credentials",
]


@ProbeRegistry.register
class CORSProbe(BaseProbe):
    """Sends a preflight from an untrusted origin and inspects the grant."""

    error_severity = Severity.LOW

    @property
    def id(self) -> str:
        return "cors-check"

    @property
    def name(self) -> str:
        return "CORS Configuration"

    @property
    def description(self) -> str:
        return "Checks for CORS misconfiguration"

    @property
    def error_label(self) -> str:
        return "CORS"

    async def check(
        self,
        endpoint: EndpointSpec,
        options: ProbeOptions | None = None,
    ) -> Finding:
        headers = endpoint.header_map()
        headers["Origin"] = MALICIOUS_ORIGIN
        headers["Access-Control-Request-Method"] = endpoint.method.value

        response = await self.fetch(
            endpoint,
            options,
            method="OPTIONS",
            headers=headers,
            include_body=False,
        )

        cors = {name: response.headers.get(name) for name in CORS_HEADERS}
        allow_origin = cors["Access-Control-Allow-Origin"]
        has_wildcard = allow_origin == "*"
        allows_credentials = cors["Access-Control-Allow-Credentials"] == "true"

        self.logger.debug(
            "cors_preflight",
            url=endpoint.url,
            allow_origin=allow_origin,
            allow_methods=cors["Access-Control-Allow-Methods"],
            allow_headers=cors["Access-Control-Allow-Headers"],
            allow_credentials=cors["Access-Control-Allow-Credentials"],
        )

        # First match wins
        if has_wildcard and allows_credentials:
            return self.finding(
                FindingStatus.FAILED,
                "Insecure CORS configuration detected",
                details="API allows wildcard origin (*) with credentials, which is a security risk",
                severity=Severity.HIGH,
            )

        if has_wildcard:
            return self.finding(
                FindingStatus.WARNING,
                "Permissive CORS configuration",
                details="API allows requests from any origin (*)",
                severity=Severity.MEDIUM,
            )

        if allow_origin and MALICIOUS_ORIGIN in allow_origin:
            return self.finding(
                FindingStatus.FAILED,
                "CORS validation issue",
                details="API accepts requests from untrusted origins",
                severity=Severity.HIGH,
            )

        if not allow_origin:
            return self.finding(
                FindingStatus.PASSED,
                "No CORS headers found or CORS is properly restricted",
            )

        return self.finding(
            FindingStatus.PASSED,
            "CORS appears to be properly configured",
            details=f"Origin: {allow_origin}",
        )
