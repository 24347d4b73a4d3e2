"""Abstract interfaces for probe modules."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apiprobe.models import EndpointSpec, Finding, ProbeInfo, ProbeOptions


class IProbe(ABC):
    """Base interface for all security probes."""

    @property
    @abstractmethod
    def id(self) -> str:
        """Stable probe identifier used for selection."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable probe name, also used as the finding name."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description."""
        ...

    @abstractmethod
    async def run(
        self,
        endpoint: "EndpointSpec",
        options: "ProbeOptions | None" = None,
    ) -> "Finding":
        """Probe the endpoint and return exactly one finding."""
        ...

    @abstractmethod
    def info(self) -> "ProbeInfo":
        """Enumeration view of this probe."""
        ...
