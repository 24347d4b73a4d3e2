"""Base models and enums."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )


class HttpMethod(str, Enum):
    """HTTP methods an endpoint can be described with."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


class FindingStatus(str, Enum):
    """Outcome of a single probe."""

    PASSED = "passed"
    FAILED = "failed"
    WARNING = "warning"


class Severity(str, Enum):
    """Finding severity levels."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
