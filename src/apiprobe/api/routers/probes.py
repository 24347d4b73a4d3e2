"""Probe enumeration endpoints."""

from fastapi import APIRouter, HTTPException

from apiprobe.models import ProbeInfo
from apiprobe.probes import ProbeRegistry

router = APIRouter()


@router.get("/probes", response_model=list[ProbeInfo])
async def list_probes() -> list[ProbeInfo]:
    """List the available probes in report order."""
    return ProbeRegistry.list_info()


@router.get("/probes/{probe_id}", response_model=ProbeInfo)
async def get_probe(probe_id: str) -> ProbeInfo:
    """Get one probe by id."""
    probe = ProbeRegistry.get(probe_id)
    if not probe:
        raise HTTPException(status_code=404, detail="Probe not found")
    return probe.info()
