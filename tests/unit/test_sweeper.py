from __future__ import annotations

import pytest

from logflare_mcp.state import LogflareCredentials
from logflare_mcp.handlers.sessions import SessionStore
from logflare_mcp.handlers.sweeper import SessionSweeper

CREDS = LogflareCredentials(api_key="k", source_token="t")


class _FakeTransport:
    def __init__(self) -> None:
        self.closed = False

    async def close(self) -> None:
        self.closed = True


@pytest.mark.asyncio
async def test_sweep_once_closes_expired_streams() -> None:
    t = 0.0

    def now() -> float:
        return t

    store = SessionStore(idle_timeout_s=60.0, now_fn=now)
    stale = _FakeTransport()
    fresh = _FakeTransport()
    store.create("stale", server=None, transport=stale, credentials=CREDS)
    t = 30.0
    store.create("fresh", server=None, transport=fresh, credentials=CREDS)
    t = 61.0

    expired = await SessionSweeper(store, tick_s=5.0).sweep_once()

    assert [s.session_id for s in expired] == ["stale"]
    assert stale.closed is True
    assert fresh.closed is False
    assert len(store) == 1


@pytest.mark.asyncio
async def test_sweeper_start_and_stop() -> None:
    sweeper = SessionSweeper(SessionStore(), tick_s=0.01)
    task = sweeper.start()
    assert sweeper.start() is task

    await sweeper.stop()
    assert task.done()
