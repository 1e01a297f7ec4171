"""FastAPI host exposing the dispatch core on a single POST route.

The route reads the raw body itself so malformed JSON still reaches the
envelope validator (and gets a JSON-RPC error) instead of a framework 422.
Every answer is HTTP 200; protocol failures live in the ``error`` member.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response, StreamingResponse

from restify.config import ServerSettings
from restify.protocol.dispatcher import MethodDispatcher
from restify.protocol.envelope import EnvelopeHandler
from restify.protocol.transport import JSON_MEDIA_TYPE, negotiate, render
from restify.utils.telemetry import ATTR_TRANSPORT, get_tracer

if TYPE_CHECKING:
    from restify.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


def create_app(registry: ToolRegistry, settings: ServerSettings | None = None) -> FastAPI:
    """Build the application around an already-frozen *registry*."""
    settings = settings or ServerSettings()
    dispatcher = MethodDispatcher(
        registry,
        server_name=settings.server_name,
        server_version=settings.server_version,
        protocol_version=settings.protocol_version,
    )
    handler = EnvelopeHandler(dispatcher)

    router = APIRouter(tags=["mcp"])

    @router.post(settings.path)
    async def mcp_endpoint(request: Request) -> Response:
        body = await request.body()
        accept = request.headers.get("accept", JSON_MEDIA_TYPE)
        mode = negotiate(accept)
        logger.debug("Received MCP request: %d bytes, accept=%s", len(body), accept)

        # Tool bodies may block; keep them off the event loop.
        response = await run_in_threadpool(handler.handle, body)
        with _tracer.start_as_current_span("mcp.render") as span:
            span.set_attribute(ATTR_TRANSPORT, mode.value)
            rendered = render(response, mode)

        if rendered.chunked:
            return StreamingResponse(
                rendered.chunks(),
                status_code=200,
                media_type=rendered.media_type,
                headers=rendered.headers,
            )
        return Response(content=rendered.body, status_code=200, media_type=rendered.media_type)

    app = FastAPI(title="mcp-restify", version=settings.server_version)
    app.include_router(router)
    app.state.settings = settings
    app.state.registry = registry
    app.state.envelope_handler = handler
    return app
