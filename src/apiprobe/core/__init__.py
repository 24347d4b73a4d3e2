"""Core module - configuration, logging, serialization, and interfaces."""

from apiprobe.core.config import Settings, get_settings, validate_settings
from apiprobe.core.exceptions import (
    ApiProbeError,
    ConfigurationError,
    RequestBuildError,
    ValidationError,
)
from apiprobe.core.serialization import is_serializable, sanitize

__all__ = [
    "Settings",
    "get_settings",
    "validate_settings",
    "ApiProbeError",
    "ConfigurationError",
    "RequestBuildError",
    "ValidationError",
    "is_serializable",
    "sanitize",
]
