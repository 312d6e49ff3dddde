from __future__ import annotations

import logging
import platform
from contextlib import asynccontextmanager

from fastapi import FastAPI

from sunway.api.routes import CATCH_ALL_PATH, InfoPageEndpoint
from sunway.collectors import (
    PsutilSystemInfoProvider,
    RandomIdGenerator,
    SystemInfoProvider,
    UuidGenerator,
)
from sunway.config import Settings, settings as default_settings
from sunway.logs import configure_logging

logger = logging.getLogger(__name__)

BANNER_SEPARATOR = "=" * 50


def banner_lines(settings: Settings) -> list[str]:
    return [
        BANNER_SEPARATOR,
        f"{settings.app_name} running at http://localhost:{settings.port}/",
        f"Runtime: Python {platform.python_version()}",
        BANNER_SEPARATOR,
    ]


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ── startup ───────────────────────────────────────
    configure_logging(app.state.settings.log_level)
    for line in banner_lines(app.state.settings):
        logger.info(line)

    yield

    # ── shutdown ──────────────────────────────────────
    logger.info("%s shut down", app.state.settings.app_name)


def create_app(
    settings: Settings | None = None,
    system_info: SystemInfoProvider | None = None,
    id_generator: RandomIdGenerator | None = None,
) -> FastAPI:
    settings = settings or default_settings

    # Docs and schema routes would shadow the catch-all page.
    app = FastAPI(
        title=settings.app_name,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Store on app.state for route access
    app.state.settings = settings
    app.state.system_info = system_info or PsutilSystemInfoProvider()
    app.state.id_generator = id_generator or UuidGenerator()

    app.add_route(CATCH_ALL_PATH, InfoPageEndpoint(), include_in_schema=False)
    return app


app = create_app()
