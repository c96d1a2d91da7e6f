"""SSE stream establishment: one MCP session per inbound GET."""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import Callable

from starlette.requests import Request
from starlette.types import Send, Scope, Receive

from logflare_mcp.state.runtime import RuntimeDeps
from logflare_mcp.config.sse import SSE_MESSAGE_PATH, SSE_ERROR_MISSING_HEADERS

from .transport import SseSessionTransport
from .protocol import build_protocol_server
from .errors import describe_error, send_plain_error
from .auth import get_credentials, missing_credential_headers

logger = logging.getLogger(__name__)

TransportFactory = Callable[[], Any]


def _default_transport() -> SseSessionTransport:
    return SseSessionTransport(SSE_MESSAGE_PATH)


async def handle_sse_connection(
    scope: Scope,
    receive: Receive,
    send: Send,
    runtime_deps: RuntimeDeps,
    *,
    transport_factory: TransportFactory = _default_transport,
    server_factory: Callable[..., Any] = build_protocol_server,
) -> None:
    request = Request(scope, receive)
    credentials = get_credentials(request.headers)
    if credentials is None:
        missing = ", ".join(f"'{name}'" for name in missing_credential_headers(request.headers))
        message = f"{SSE_ERROR_MISSING_HEADERS}: {missing}"
        await send_plain_error(scope, receive, send, message=message, status_code=401)
        return

    server = server_factory(runtime_deps.tools, credentials)
    transport = transport_factory()
    session_id = transport.session_id
    sessions = runtime_deps.sessions

    sessions.create(session_id, server, transport, credentials)
    transport.on_close(sessions.remove)

    failure: Exception | None = None
    try:
        async with transport.connect(scope, receive, send) as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
    except Exception as exc:
        failure = exc
    finally:
        sessions.remove(session_id)

    if failure is None:
        return

    message = describe_error(failure)
    logger.error("SSE session %s failed: %s", session_id, message, exc_info=failure)
    if not transport.response_started:
        await send_plain_error(scope, receive, send, message=f"Failed to connect: {message}", status_code=500)


__all__ = ["handle_sse_connection"]
