from .base import RandomIdGenerator, SystemInfoProvider
from .id_generator import UuidGenerator
from .system_collector import PsutilSystemInfoProvider

__all__ = [
    "PsutilSystemInfoProvider",
    "RandomIdGenerator",
    "SystemInfoProvider",
    "UuidGenerator",
]
