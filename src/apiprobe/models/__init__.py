"""Pydantic data models for apiprobe."""

from apiprobe.models.base import BaseSchema, FindingStatus, HttpMethod, Severity
from apiprobe.models.endpoint import EndpointSpec, ProbeOptions
from apiprobe.models.report import Finding, ProbeInfo, ScanReport

__all__ = [
    # Base
    "BaseSchema",
    "FindingStatus",
    "HttpMethod",
    "Severity",
    # Endpoint
    "EndpointSpec",
    "ProbeOptions",
    # Report
    "Finding",
    "ProbeInfo",
    "ScanReport",
]
