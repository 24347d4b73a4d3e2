"""Sensitive data exposure probe."""

import json
import re

from apiprobe.core.serialization import sanitize
from apiprobe.models import EndpointSpec, Finding, FindingStatus, ProbeOptions, Severity
from apiprobe.probes.base import BaseProbe
from apiprobe.probes.registry import ProbeRegistry


def _key_value(name: str) -> re.Pattern[str]:
    # name"?: "?value, as it appears in serialized JSON or form-like text
    return re.compile(name + r"[\"']?\s*?:\s*?[\"']?[^\"',\s]+", re.IGNORECASE)


# Checked in order; each pattern reports at most once
SENSITIVE_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    ("email", re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")),
    ("possible credit card", re.compile(r"\b(?:\d[ -]*?){13,16}\b")),
    ("password", _key_value("password")),
    ("secret", _key_value("secret")),
    ("token", _key_value("token")),
    ("key", _key_value("key")),
    ("SSN", re.compile(r"\b(?:[0-9]{3}-?[0-9]{2}-?[0-9]{4})\b")),
]


def scan_text(text: str) -> list[str]:
    """Return the data types whose pattern matches ``text``, in table order."""
    return [data_type for data_type, pattern in SENSITIVE_PATTERNS if pattern.search(text)]


@ProbeRegistry.register
class SensitiveDataProbe(BaseProbe):
    """Looks for sensitive-looking values in the response body."""

    error_severity = Severity.MEDIUM

    @property
    def id(self) -> str:
        return "sensitive-data"

    @property
    def name(self) -> str:
        return "Sensitive Data Exposure"

    @property
    def description(self) -> str:
        return "Checks if the API exposes sensitive data in responses"

    @property
    def error_label(self) -> str:
        return "sensitive data"

    async def check(
        self,
        endpoint: EndpointSpec,
        options: ProbeOptions | None = None,
    ) -> Finding:
        response = await self.fetch(endpoint, options)

        text = json.dumps(sanitize(response.data), separators=(",", ":"), ensure_ascii=False)
        findings = [f"Found possible {data_type} data in response" for data_type in scan_text(text)]

        if findings:
            return self.finding(
                FindingStatus.FAILED,
                "API may be exposing sensitive data",
                details="\n".join(findings),
                severity=Severity.HIGH,
            )

        return self.finding(
            FindingStatus.PASSED,
            "No obvious sensitive data found in response",
        )
