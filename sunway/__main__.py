"""Run the Sunway info server.

Usage:
    python -m sunway
    SUNWAY_PORT=8080 python -m sunway
"""

from __future__ import annotations

import uvicorn

from sunway.config import settings
from sunway.logs import configure_logging


def main() -> None:
    configure_logging(settings.log_level)
    uvicorn.run(
        "sunway.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        http="h11",  # HTTP/1.1 only
        access_log=False,  # sunway.access writes the per-request line
    )


if __name__ == "__main__":
    main()
