from .context import RequestContext, UUID_PATTERN
from .snapshot import SystemSnapshot

__all__ = [
    "RequestContext",
    "SystemSnapshot",
    "UUID_PATTERN",
]
