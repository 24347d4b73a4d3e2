"""Finding and scan report models."""

from datetime import datetime, timezone
from typing import Any

from pydantic import ConfigDict, Field

from apiprobe.models.base import BaseSchema, FindingStatus, Severity
from apiprobe.models.endpoint import EndpointSpec


class Finding(BaseSchema):
    """Classified outcome of one probe run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    status: FindingStatus
    description: str
    details: str | None = None
    # Only set where a risk is asserted
    severity: Severity | None = None


class ProbeInfo(BaseSchema):
    """Enumeration view of a registered probe."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str
    name: str
    description: str


class ScanReport(BaseSchema):
    """Aggregate result of running a set of probes against one endpoint."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    endpoint: EndpointSpec
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Registry order, not completion order
    findings: list[Finding] = Field(default_factory=list)

    # Baseline request
    raw_response: Any = None
    response_time_ms: int | None = None
    status_code: int | None = None

    def _count(self, status: FindingStatus) -> int:
        return sum(1 for finding in self.findings if finding.status == status)

    @property
    def passed_count(self) -> int:
        return self._count(FindingStatus.PASSED)

    @property
    def failed_count(self) -> int:
        return self._count(FindingStatus.FAILED)

    @property
    def warning_count(self) -> int:
        return self._count(FindingStatus.WARNING)

    def to_json_dict(self) -> dict[str, Any]:
        """Export report as a JSON-compatible dictionary."""
        return self.model_dump(mode="json")

    def to_json(self) -> str:
        """Export report as JSON string."""
        return self.model_dump_json(indent=2)
