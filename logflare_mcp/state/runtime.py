"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    import httpx

    from logflare_mcp.state.settings import AppSettings
    from logflare_mcp.tools.registry import ToolRegistry
    from logflare_mcp.handlers.sessions import SessionStore
    from logflare_mcp.handlers.sweeper import SessionSweeper


@dataclass(slots=True)
class RuntimeDeps:
    settings: AppSettings
    sessions: SessionStore
    sweeper: SessionSweeper
    tools: ToolRegistry
    _http_client: httpx.AsyncClient

    async def shutdown(self) -> None:
        try:
            await self.sweeper.stop()
        except Exception:
            logger.exception("session sweeper shutdown failed")
        try:
            await self._http_client.aclose()
        except Exception:
            logger.exception("http client shutdown failed")


__all__ = ["RuntimeDeps"]
