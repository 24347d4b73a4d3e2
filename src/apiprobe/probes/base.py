"""Base probe class."""

from abc import abstractmethod

import httpx

from apiprobe.core.interfaces import IProbe
from apiprobe.core.logging import get_logger
from apiprobe.infrastructure.http import HTTPClient, ProbeResponse
from apiprobe.models import (
    EndpointSpec,
    Finding,
    FindingStatus,
    ProbeInfo,
    ProbeOptions,
    Severity,
)


class BaseProbe(IProbe):
    """Base class for all probe implementations.

    Subclasses implement ``check`` for the success path only. ``run`` turns
    any exception raised there into a warning finding whose severity is
    ``error_severity``.
    """

    error_severity: Severity = Severity.MEDIUM

    def __init__(self) -> None:
        self.logger = get_logger(self.id)

    @property
    @abstractmethod
    def error_label(self) -> str:
        """Short label used in the error finding description."""
        ...

    @abstractmethod
    async def check(
        self,
        endpoint: EndpointSpec,
        options: ProbeOptions | None = None,
    ) -> Finding:
        """Probe the endpoint and classify the outcome."""
        ...

    async def run(
        self,
        endpoint: EndpointSpec,
        options: ProbeOptions | None = None,
    ) -> Finding:
        try:
            return await self.check(endpoint, options)
        except Exception as e:
            error = str(e) or type(e).__name__
            self.logger.warning("probe_error", probe=self.id, error=error)
            return self.finding(
                FindingStatus.WARNING,
                f"Error occurred during {self.error_label} test",
                details=error,
                severity=self.error_severity,
            )

    def info(self) -> ProbeInfo:
        return ProbeInfo(id=self.id, name=self.name, description=self.description)

    def finding(
        self,
        status: FindingStatus,
        description: str,
        details: str | None = None,
        severity: Severity | None = None,
    ) -> Finding:
        """Build a finding named after this probe."""
        return Finding(
            name=self.name,
            status=status,
            description=description,
            details=details,
            severity=severity,
        )

    def client(self, options: ProbeOptions | None = None) -> HTTPClient:
        if options is None:
            return HTTPClient()
        return HTTPClient(timeout=options.timeout, retries=options.retries)

    async def fetch(
        self,
        endpoint: EndpointSpec,
        options: ProbeOptions | None = None,
        method: str | None = None,
        headers: dict[str, str] | httpx.Headers | None = None,
        include_body: bool = True,
    ) -> ProbeResponse:
        """Send the endpoint's request, optionally overriding method/headers."""
        async with self.client(options) as client:
            return await client.send(
                method or endpoint.method.value,
                endpoint.url,
                headers=endpoint.headers if headers is None else headers,
                json_body=endpoint.safe_json_body() if include_body else None,
            )
