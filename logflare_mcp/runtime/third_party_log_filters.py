"""Log noise filters for third-party libraries.

httpx logs every outbound request and the MCP server logs every JSON-RPC
message at INFO; hold them at WARNING unless explicitly enabled.
"""

from __future__ import annotations

import os
import logging

from logflare_mcp.config.logging import NOISY_LOGGERS, ENV_SHOW_HTTP_CLIENT_LOGS


def configure() -> None:
    if (os.getenv(ENV_SHOW_HTTP_CLIENT_LOGS) or "").strip().lower() in {"1", "true", "yes"}:
        return
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


__all__ = ["configure"]
