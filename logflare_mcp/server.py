"""Main FastAPI server for the Logflare MCP bridge (SSE transport)."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from starlette.types import Send, Scope, Receive
from fastapi.responses import Response, ORJSONResponse
from fastapi.middleware.cors import CORSMiddleware

from logflare_mcp.state.runtime import RuntimeDeps
from logflare_mcp.runtime.logging import configure_logging
from logflare_mcp.runtime.settings_loader import load_settings
from logflare_mcp.runtime.dependencies import build_runtime_deps
from logflare_mcp.handlers.sse import handle_sse_connection, handle_session_message
from logflare_mcp.config.sse import SSE_MESSAGE_PATH, SSE_ENDPOINT_PATH, SSE_ERROR_METHOD_NOT_ALLOWED

logger = logging.getLogger(__name__)

configure_logging()


@asynccontextmanager
async def _lifespan(app: FastAPI):
    runtime_deps = await build_runtime_deps()
    app.state.runtime_deps = runtime_deps
    logger.info("runtime: ready")
    try:
        yield
    finally:
        deps = getattr(app.state, "runtime_deps", None)
        if deps is not None:
            await deps.shutdown()


def _runtime_deps(app: FastAPI) -> RuntimeDeps:
    runtime_deps = getattr(app.state, "runtime_deps", None)
    if runtime_deps is None:
        raise RuntimeError("Runtime dependencies are not initialized")
    return runtime_deps


class SseEndpoint:
    """Raw ASGI endpoint: the SSE response is written by the transport, not returned."""

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await handle_sse_connection(scope, receive, send, _runtime_deps(scope["app"]))


app = FastAPI(default_response_class=ORJSONResponse, lifespan=_lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(load_settings().server.cors_allow_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_route(SSE_ENDPOINT_PATH, SseEndpoint(), methods=["GET"], include_in_schema=False)


@app.get("/")
async def root() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@app.post(SSE_ENDPOINT_PATH)
async def sse_post_not_allowed() -> ORJSONResponse:
    return ORJSONResponse({"error": SSE_ERROR_METHOD_NOT_ALLOWED}, status_code=405)


@app.post(SSE_MESSAGE_PATH)
async def messages_endpoint(request: Request) -> Response:
    return await handle_session_message(request, _runtime_deps(request.app))


def main() -> None:
    settings = load_settings()
    logger.info("Logflare MCP server running on port %s", settings.server.port)
    uvicorn.run(app, host=settings.server.host, port=settings.server.port)


__all__ = ["app", "main"]
