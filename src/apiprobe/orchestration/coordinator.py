"""Scan coordinator for running probes against one endpoint."""

import asyncio
import time
from collections.abc import Iterable, Sequence
from datetime import datetime, timezone
from typing import Any

from apiprobe.core.logging import get_logger
from apiprobe.core.serialization import sanitize
from apiprobe.infrastructure.http import HTTPClient
from apiprobe.models import (
    EndpointSpec,
    Finding,
    FindingStatus,
    ProbeOptions,
    ScanReport,
    Severity,
)
from apiprobe.probes import BaseProbe, ProbeRegistry, resolve_probes, unknown_probe_ids


class ScanCoordinator:
    """Coordinates the baseline request and the selected probes."""

    def __init__(
        self,
        probes: Sequence[BaseProbe] | None = None,
        timeout: float | None = None,
        retries: int | None = None,
    ) -> None:
        self.logger = get_logger("coordinator")
        self._probes = list(probes) if probes is not None else ProbeRegistry.all()
        self.options = ProbeOptions(timeout=timeout, retries=retries)

    async def run_scan(
        self,
        endpoint: EndpointSpec,
        probe_ids: Iterable[str] | None = None,
    ) -> ScanReport:
        """Run the selected probes (all when empty) and build the report.

        Ids that match no probe are logged and skipped.

        Raises:
            RequestBuildError: The endpoint body is not valid JSON.
        """
        json_body = endpoint.json_body()

        selected = list(probe_ids or ())
        probes = resolve_probes(self._probes, selected)
        unknown = unknown_probe_ids(self._probes, selected)
        if unknown:
            self.logger.warning(
                "unknown_probe_ids",
                unknown=unknown,
                available=[probe.id for probe in self._probes],
            )

        self.logger.info(
            "scan_started",
            url=endpoint.url,
            method=endpoint.method.value,
            probes=[probe.id for probe in probes],
        )

        start = time.perf_counter()

        status_code, raw_response = await self._run_baseline(endpoint, json_body)

        # gather keeps argument order, so findings follow registry order
        findings = await asyncio.gather(
            *(self._run_probe(probe, endpoint) for probe in probes)
        )

        response_time_ms = int((time.perf_counter() - start) * 1000)

        report = ScanReport(
            endpoint=endpoint,
            timestamp=datetime.now(timezone.utc),
            findings=list(findings),
            raw_response=sanitize(raw_response),
            response_time_ms=response_time_ms,
            status_code=status_code,
        )

        self.logger.info(
            "scan_completed",
            url=endpoint.url,
            duration_ms=response_time_ms,
            passed=report.passed_count,
            failed=report.failed_count,
            warnings=report.warning_count,
        )

        return report

    async def _run_baseline(
        self,
        endpoint: EndpointSpec,
        json_body: Any,
    ) -> tuple[int | None, Any]:
        """Send the unmodified request once for status and raw data."""
        async with HTTPClient(
            timeout=self.options.timeout,
            retries=self.options.retries,
        ) as client:
            response = await client.send(
                endpoint.method.value,
                endpoint.url,
                headers=endpoint.headers,
                json_body=json_body,
            )

        if response.is_synthetic:
            self.logger.warning("baseline_failed", url=endpoint.url, error=response.error)
            return None, {"error": response.error}

        return response.status_code, sanitize(response.data)

    async def _run_probe(self, probe: BaseProbe, endpoint: EndpointSpec) -> Finding:
        """Run one probe; an exception becomes a warning finding."""
        try:
            return await probe.run(endpoint, self.options)
        except Exception as e:
            error = str(e) or type(e).__name__
            self.logger.error("probe_failed", probe=probe.id, error=error)
            return Finding(
                name=probe.name,
                status=FindingStatus.WARNING,
                description="Test execution failed",
                details=error,
                severity=Severity.MEDIUM,
            )


async def run_scan(
    endpoint: EndpointSpec,
    probe_ids: Iterable[str] | None = None,
) -> ScanReport:
    """Run a scan with the registered probes."""
    return await ScanCoordinator().run_scan(endpoint, probe_ids)
