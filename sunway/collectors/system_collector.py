from __future__ import annotations

import logging
import platform
import socket
import sys
import time

import psutil

from sunway.collectors.base import SystemInfoProvider
from sunway.models.snapshot import SystemSnapshot

logger = logging.getLogger(__name__)


class PsutilSystemInfoProvider(SystemInfoProvider):
    """Reads hostname, platform, CPU, memory and uptime from the local host.

    OS query failures are not caught: whatever psutil or the platform module
    raises propagates to the caller.
    """

    def snapshot(self) -> SystemSnapshot:
        mem = psutil.virtual_memory()
        uptime = max(time.time() - psutil.boot_time(), 0.0)

        snap = SystemSnapshot(
            hostname=socket.gethostname(),
            platform=sys.platform,
            architecture=platform.machine(),
            cpu_count=psutil.cpu_count(logical=True) or 1,
            total_memory=mem.total,
            free_memory=mem.free,
            uptime=uptime,
            runtime_version=f"Python {platform.python_version()}",
        )
        logger.debug(
            "Snapshot taken: host=%s cpus=%d free=%.2fGB",
            snap.hostname,
            snap.cpu_count,
            snap.free_memory_gb,
        )
        return snap
