"""Runtime dependency construction (HTTP client, tool registry, session table)."""

from __future__ import annotations

import logging

import httpx

from logflare_mcp.state import RuntimeDeps
from logflare_mcp.state.settings import AppSettings
from logflare_mcp.tools.registry import ToolRegistry
from logflare_mcp.logflare.client import LogflareClient
from logflare_mcp.handlers.sessions import SessionStore
from logflare_mcp.handlers.sweeper import SessionSweeper

from .settings_loader import load_settings

logger = logging.getLogger(__name__)


async def build_runtime_deps(settings: AppSettings | None = None) -> RuntimeDeps:
    settings = settings or load_settings()

    http_client = httpx.AsyncClient(timeout=settings.logflare.request_timeout_s)
    client = LogflareClient(http_client, base_url=settings.logflare.api_base_url)

    sessions = SessionStore(idle_timeout_s=settings.sessions.idle_timeout_s)
    sweeper = SessionSweeper(sessions, tick_s=settings.sessions.sweep_tick_s)
    sweeper.start()

    logger.info(
        "runtime: logflare=%s idle_timeout_s=%.0f sweep_tick_s=%.1f",
        settings.logflare.api_base_url,
        settings.sessions.idle_timeout_s,
        settings.sessions.sweep_tick_s,
    )

    return RuntimeDeps(
        settings=settings,
        sessions=sessions,
        sweeper=sweeper,
        tools=ToolRegistry(client),
        _http_client=http_client,
    )


__all__ = ["RuntimeDeps", "build_runtime_deps"]
