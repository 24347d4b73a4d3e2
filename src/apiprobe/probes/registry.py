"""Probe registry."""

from collections.abc import Iterable

from apiprobe.models import ProbeInfo
from apiprobe.probes.base import BaseProbe


class ProbeRegistry:
    """Ordered registry of probe instances.

    Probes register at import time; ``apiprobe.probes`` imports them in a fixed
    order, which is the order findings appear in a report.
    """

    _probes: dict[str, BaseProbe] = {}

    @classmethod
    def register(cls, probe_class: type[BaseProbe]) -> type[BaseProbe]:
        """Register a probe class."""
        instance = probe_class()
        if instance.id in cls._probes:
            raise ValueError(f"Probe already registered: {instance.id}")
        cls._probes[instance.id] = instance
        return probe_class

    @classmethod
    def get(cls, probe_id: str) -> BaseProbe | None:
        """Get a probe by id."""
        return cls._probes.get(probe_id)

    @classmethod
    def list_all(cls) -> list[str]:
        """List all registered probe ids."""
        return list(cls._probes.keys())

    @classmethod
    def all(cls) -> list[BaseProbe]:
        """All registered probes in registration order."""
        return list(cls._probes.values())

    @classmethod
    def list_info(cls) -> list[ProbeInfo]:
        """Enumeration view of all probes, for UIs."""
        return [probe.info() for probe in cls._probes.values()]

    @classmethod
    def resolve(cls, probe_ids: Iterable[str] | None = None) -> list[BaseProbe]:
        """Select probes by id, keeping registry order.

        An empty selection means every probe. Unregistered ids are ignored.
        """
        return resolve_probes(cls.all(), probe_ids)


def resolve_probes(
    probes: list[BaseProbe],
    probe_ids: Iterable[str] | None = None,
) -> list[BaseProbe]:
    """Filter ``probes`` by id, preserving their order.

    An empty selection means every probe; ids matching no probe select nothing.
    """
    selected = set(probe_ids or ())
    if not selected:
        return list(probes)
    return [probe for probe in probes if probe.id in selected]


def unknown_probe_ids(
    probes: list[BaseProbe],
    probe_ids: Iterable[str] | None = None,
) -> list[str]:
    """Ids in ``probe_ids`` that match none of ``probes``, sorted."""
    known = {probe.id for probe in probes}
    return sorted(set(probe_ids or ()) - known)
