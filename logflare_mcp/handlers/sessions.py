"""In-memory table of live MCP sessions with idle expiry.

All methods are synchronous and never await, so each call is atomic with
respect to other tasks on the event loop. Expiry is by last-activity
timestamp: an entry idle for `idle_timeout_s` reads as not found immediately
and is physically dropped by the next `sweep()`.
"""

from __future__ import annotations

import time
import logging
from typing import Any
from collections.abc import Callable

from logflare_mcp.state.session import Session
from logflare_mcp.config.sessions import SESSION_IDLE_TIMEOUT_S
from logflare_mcp.state.credentials import LogflareCredentials

logger = logging.getLogger(__name__)

TimeFn = Callable[[], float]


class SessionStore:
    def __init__(
        self,
        *,
        idle_timeout_s: float = SESSION_IDLE_TIMEOUT_S,
        now_fn: TimeFn | None = None,
    ) -> None:
        self.idle_timeout_s = float(idle_timeout_s)
        self._now = now_fn or time.monotonic
        self._sessions: dict[str, Session] = {}

    def _is_expired(self, session: Session, now: float) -> bool:
        return (now - session.last_activity) >= self.idle_timeout_s

    def _live(self, session_id: str) -> Session | None:
        session = self._sessions.get(session_id)
        if session is None or self._is_expired(session, self._now()):
            return None
        return session

    def create(
        self,
        session_id: str,
        server: Any,
        transport: Any,
        credentials: LogflareCredentials,
    ) -> Session:
        if session_id in self._sessions:
            # Ids come from the transport layer and are unique by construction.
            raise RuntimeError(f"session {session_id} is already registered")
        now = self._now()
        session = Session(
            session_id=session_id,
            server=server,
            transport=transport,
            credentials=credentials,
            created_at=now,
            last_activity=now,
        )
        self._sessions[session_id] = session
        logger.info("Session %s opened. Active: %s", session_id, len(self._sessions))
        return session

    def get(self, session_id: str) -> Session | None:
        return self._live(session_id)

    def touch(self, session_id: str) -> Session | None:
        """Restart the idle window; `None` when the id is unknown or already expired."""
        session = self._live(session_id)
        if session is not None:
            session.last_activity = self._now()
        return session

    def remove(self, session_id: str) -> Session | None:
        """Drop the entry. Safe to call any number of times."""
        session = self._sessions.pop(session_id, None)
        if session is not None:
            logger.info("Session %s closed. Active: %s", session_id, len(self._sessions))
        return session

    def sweep(self) -> list[Session]:
        now = self._now()
        expired = [s for s in self._sessions.values() if self._is_expired(s, now)]
        for session in expired:
            del self._sessions[session.session_id]
            logger.info("Session %s expired", session.session_id)
        return expired

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)


__all__ = ["SessionStore"]
