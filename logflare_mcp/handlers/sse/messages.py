"""Routing of client-to-server MCP messages to their session."""

from __future__ import annotations

import logging

from starlette.requests import Request
from starlette.responses import Response, PlainTextResponse

from logflare_mcp.errors import MessageParseError
from logflare_mcp.state.runtime import RuntimeDeps
from logflare_mcp.config.sse import (
    SSE_MESSAGE_ACCEPTED,
    SSE_SESSION_QUERY_PARAM,
    SSE_ERROR_SESSION_NOT_FOUND,
    SSE_ERROR_MISSING_SESSION_ID,
)

from .errors import plain_error, describe_error

logger = logging.getLogger(__name__)


async def handle_session_message(request: Request, runtime_deps: RuntimeDeps) -> Response:
    session_id = (request.query_params.get(SSE_SESSION_QUERY_PARAM) or "").strip()
    if not session_id:
        return plain_error(SSE_ERROR_MISSING_SESSION_ID, 400)

    # Any inbound message counts as activity and restarts the idle window.
    session = runtime_deps.sessions.touch(session_id)
    if session is None:
        return plain_error(SSE_ERROR_SESSION_NOT_FOUND, 404)

    body = await request.body()
    try:
        await session.transport.handle_post_message(body, request=request)
    except MessageParseError as exc:
        return plain_error(str(exc), 400)
    except Exception as exc:
        message = describe_error(exc)
        logger.warning("message for session %s failed: %s", session_id, message)
        return plain_error(f"Message handling error: {message}", 500)

    return PlainTextResponse(SSE_MESSAGE_ACCEPTED, status_code=202)


__all__ = ["handle_session_message"]
