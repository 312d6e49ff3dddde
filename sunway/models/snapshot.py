from __future__ import annotations

from pydantic import BaseModel, Field

_BYTES_PER_GB = 1024**3
_SECONDS_PER_HOUR = 3600


class SystemSnapshot(BaseModel):
    """Point-in-time read of host telemetry, taken once per request."""

    hostname: str
    platform: str
    architecture: str
    cpu_count: int = Field(ge=1)
    total_memory: int = Field(ge=0)  # bytes
    free_memory: int = Field(ge=0)  # bytes
    uptime: float = Field(ge=0)  # seconds
    runtime_version: str

    @property
    def total_memory_gb(self) -> float:
        return round(self.total_memory / _BYTES_PER_GB, 2)

    @property
    def free_memory_gb(self) -> float:
        return round(self.free_memory / _BYTES_PER_GB, 2)

    @property
    def uptime_hours(self) -> float:
        return round(self.uptime / _SECONDS_PER_HOUR, 2)
