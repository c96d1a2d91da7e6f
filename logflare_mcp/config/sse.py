"""SSE transport configuration and client-facing constants."""

from __future__ import annotations

SSE_ENDPOINT_PATH = "/sse"
SSE_MESSAGE_PATH = "/messages"
SSE_SESSION_QUERY_PARAM = "sessionId"

# Credential headers (lower-case, as exposed by Starlette).
SSE_HEADER_API_KEY = "x-logflare-api-key"
SSE_HEADER_SOURCE_TOKEN = "x-logflare-source-token"

# Server-sent event names
SSE_EVENT_ENDPOINT = "endpoint"
SSE_EVENT_MESSAGE = "message"

# Client-facing messages
SSE_ERROR_MISSING_HEADERS = "Missing required headers"
SSE_ERROR_METHOD_NOT_ALLOWED = "Method not allowed. Use GET for SSE connections."
SSE_ERROR_MISSING_SESSION_ID = f"Missing {SSE_SESSION_QUERY_PARAM} parameter"
SSE_ERROR_SESSION_NOT_FOUND = "Session not found or expired"
SSE_ERROR_UNPARSEABLE_MESSAGE = "Could not parse message"
SSE_MESSAGE_ACCEPTED = "Accepted"

# Identity advertised in the MCP initialize handshake.
MCP_SERVER_NAME = "logflare-mcp"
MCP_SERVER_VERSION = "1.0.0"

__all__ = [
    "MCP_SERVER_NAME",
    "MCP_SERVER_VERSION",
    "SSE_ENDPOINT_PATH",
    "SSE_ERROR_METHOD_NOT_ALLOWED",
    "SSE_ERROR_MISSING_HEADERS",
    "SSE_ERROR_MISSING_SESSION_ID",
    "SSE_ERROR_SESSION_NOT_FOUND",
    "SSE_ERROR_UNPARSEABLE_MESSAGE",
    "SSE_EVENT_ENDPOINT",
    "SSE_EVENT_MESSAGE",
    "SSE_HEADER_API_KEY",
    "SSE_HEADER_SOURCE_TOKEN",
    "SSE_MESSAGE_ACCEPTED",
    "SSE_MESSAGE_PATH",
    "SSE_SESSION_QUERY_PARAM",
]
