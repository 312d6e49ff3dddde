from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import Request
from fastapi.responses import HTMLResponse
from starlette.types import Receive, Scope, Send

from sunway.models.context import RequestContext
from sunway.render import render_page

access_logger = logging.getLogger("sunway.access")

CATCH_ALL_PATH = "/{full_path:path}"


# ── catch-all page ────────────────────────────────────


async def info_page(request: Request) -> HTMLResponse:
    """Render the info page for any method and any path."""
    access_logger.info(
        "[%s] %s %s",
        datetime.now(timezone.utc).isoformat(),
        request.method,
        request.url.path,
    )

    state = request.app.state
    # Telemetry errors propagate; there is no fallback page.
    snapshot = state.system_info.snapshot()
    context = RequestContext.create(state.id_generator)
    settings = state.settings

    body = render_page(snapshot, context, title=settings.app_name, port=settings.port)
    return HTMLResponse(content=body, status_code=200)


class InfoPageEndpoint:
    """ASGI wrapper around ``info_page``.

    Starlette limits plain-function routes to GET/HEAD when no methods are
    given; an ASGI instance is matched for every method.
    """

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive, send)
        response = await info_page(request)
        await response(scope, receive, send)
