from __future__ import annotations

from abc import ABC, abstractmethod

from sunway.models.snapshot import SystemSnapshot


class SystemInfoProvider(ABC):
    """Abstract source of host telemetry.

    Subclasses implement ``snapshot()``, which reads the host fresh on every
    call. Nothing is cached between calls, so one provider instance can be
    shared by concurrent requests.
    """

    @abstractmethod
    def snapshot(self) -> SystemSnapshot:
        """Read the host and return a new snapshot."""
        ...


class RandomIdGenerator(ABC):
    """Abstract source of per-request identifiers."""

    @abstractmethod
    def new_id(self) -> str:
        """Return a new canonical UUID string."""
        ...
