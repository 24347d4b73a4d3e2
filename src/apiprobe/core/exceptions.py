"""Custom exceptions for apiprobe."""


class ApiProbeError(Exception):
    """Base exception for all apiprobe errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(ApiProbeError):
    """Raised when caller input cannot be used to start a scan."""

    pass


class RequestBuildError(ValidationError):
    """Raised when the request for an endpoint cannot be constructed."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict | None = None,
    ) -> None:
        super().__init__(message, details)
        self.field = field


class ConfigurationError(ApiProbeError):
    """Raised when configuration is invalid."""

    pass
