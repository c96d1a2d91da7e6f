"""Logging configuration."""

from __future__ import annotations

import os

LOG_LEVEL: str = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

ENV_SHOW_HTTP_CLIENT_LOGS = "SHOW_HTTP_CLIENT_LOGS"

# Loggers that are chatty at INFO (one line per request or per JSON-RPC message).
NOISY_LOGGERS: tuple[str, ...] = (
    "httpx",
    "httpcore",
    "sse_starlette",
    "mcp.server.lowlevel.server",
)

__all__ = ["ENV_SHOW_HTTP_CLIENT_LOGS", "LOG_FORMAT", "LOG_LEVEL", "NOISY_LOGGERS"]
