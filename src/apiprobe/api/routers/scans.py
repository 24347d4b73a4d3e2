"""Scan API endpoints."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from apiprobe.core.exceptions import ValidationError
from apiprobe.models import EndpointSpec, ProbeOptions, ScanReport
from apiprobe.orchestration.coordinator import ScanCoordinator

router = APIRouter()


class CreateScanRequest(BaseModel):
    """Request to scan an endpoint."""

    endpoint: EndpointSpec
    probes: list[str] = Field(
        default_factory=list,
        description="Probe ids to run; empty runs every probe, unknown ids are skipped",
        examples=[["auth-check", "cors-check"]],
    )
    options: ProbeOptions = Field(default_factory=ProbeOptions)


@router.post("/scans", response_model=ScanReport)
async def create_scan(request: CreateScanRequest) -> ScanReport:
    """
    Scan an endpoint and return the report.

    The scan runs inline; its duration is bounded by the HTTP timeout of the
    slowest probe plus the baseline request.
    """
    coordinator = ScanCoordinator(
        timeout=request.options.timeout,
        retries=request.options.retries,
    )
    try:
        return await coordinator.run_scan(request.endpoint, request.probes)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message) from None
