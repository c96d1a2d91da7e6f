"""Background task that expires idle sessions."""

from __future__ import annotations

import asyncio
import logging
import contextlib

from logflare_mcp.state.session import Session
from logflare_mcp.config.sessions import DEFAULT_SESSION_SWEEP_TICK_S

from .sessions import SessionStore

logger = logging.getLogger(__name__)


class SessionSweeper:
    def __init__(self, store: SessionStore, *, tick_s: float = DEFAULT_SESSION_SWEEP_TICK_S) -> None:
        self._store = store
        self._tick_s = float(tick_s)
        self._stop_event = asyncio.Event()
        self._task: asyncio.Task | None = None

    def start(self) -> asyncio.Task:
        if self._task is None:
            self._stop_event.clear()
            self._task = asyncio.create_task(self._sweep_loop())
        return self._task

    async def stop(self) -> None:
        self._stop_event.set()
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None

    async def sweep_once(self) -> list[Session]:
        """Remove expired sessions and end their streams."""
        expired = self._store.sweep()
        for session in expired:
            close = getattr(session.transport, "close", None)
            if close is None:
                continue
            try:
                await close()
            except Exception:
                logger.debug("closing expired session %s failed", session.session_id, exc_info=True)
        return expired

    async def _sweep_loop(self) -> None:
        while not self._stop_event.is_set():
            await asyncio.sleep(self._tick_s)
            if self._stop_event.is_set():
                break
            try:
                await self.sweep_once()
            except Exception:
                logger.exception("session sweep failed")


__all__ = ["SessionSweeper"]
