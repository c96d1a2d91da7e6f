from __future__ import annotations

from types import SimpleNamespace
from contextlib import asynccontextmanager

import pytest

from logflare_mcp.handlers.sessions import SessionStore
from logflare_mcp.handlers.sse import handle_sse_connection

HEADERS = [(b"x-logflare-api-key", b"key-a"), (b"x-logflare-source-token", b"src-a")]


def _scope(headers=HEADERS) -> dict:
    return {
        "type": "http",
        "method": "GET",
        "path": "/sse",
        "root_path": "",
        "query_string": b"",
        "headers": list(headers),
    }


class _Asgi:
    def __init__(self) -> None:
        self.messages: list[dict] = []

    async def receive(self) -> dict:
        return {"type": "http.disconnect"}

    async def send(self, message: dict) -> None:
        self.messages.append(message)

    @property
    def status(self) -> int | None:
        starts = [m for m in self.messages if m["type"] == "http.response.start"]
        return starts[0]["status"] if starts else None

    @property
    def body(self) -> bytes:
        return b"".join(m.get("body", b"") for m in self.messages if m["type"] == "http.response.body")


class _FakeTransport:
    def __init__(self, *, start_response: bool = False) -> None:
        self.session_id = "sess-1"
        self.response_started = False
        self.start_response = start_response
        self.close_callbacks = []

    def on_close(self, callback) -> None:
        self.close_callbacks.append(callback)

    @asynccontextmanager
    async def connect(self, scope, receive, send):
        if self.start_response:
            self.response_started = True
        yield "read", "write"


class _FakeServer:
    def __init__(self, store: SessionStore, error: Exception | None = None) -> None:
        self.store = store
        self.error = error
        self.credentials = None
        self.registered_during_run = False

    def create_initialization_options(self) -> None:
        return None

    async def run(self, read_stream, write_stream, options) -> None:
        self.registered_during_run = "sess-1" in self.store
        if self.error is not None:
            raise self.error


def _deps(store: SessionStore) -> SimpleNamespace:
    return SimpleNamespace(tools="registry", sessions=store)


@pytest.mark.asyncio
async def test_session_lives_for_the_stream_and_is_removed_after() -> None:
    store = SessionStore()
    server = _FakeServer(store)
    seen_credentials = []

    def server_factory(registry, credentials):
        seen_credentials.append((registry, credentials))
        return server

    transport = _FakeTransport()
    asgi = _Asgi()
    await handle_sse_connection(
        _scope(),
        asgi.receive,
        asgi.send,
        _deps(store),
        transport_factory=lambda: transport,
        server_factory=server_factory,
    )

    assert server.registered_during_run is True
    assert len(store) == 0
    assert asgi.messages == []
    registry, credentials = seen_credentials[0]
    assert registry == "registry"
    assert (credentials.api_key, credentials.source_token) == ("key-a", "src-a")
    assert transport.close_callbacks == [store.remove]


@pytest.mark.asyncio
async def test_missing_headers_is_unauthorized() -> None:
    store = SessionStore()
    asgi = _Asgi()

    def server_factory(registry, credentials):
        raise AssertionError("no server for unauthenticated streams")

    await handle_sse_connection(
        _scope(headers=HEADERS[:1]),
        asgi.receive,
        asgi.send,
        _deps(store),
        server_factory=server_factory,
    )

    assert asgi.status == 401
    assert asgi.body == b"Missing required headers: 'x-logflare-source-token'"
    assert len(store) == 0


@pytest.mark.asyncio
async def test_handshake_failure_reports_and_cleans_up() -> None:
    store = SessionStore()
    server = _FakeServer(store, RuntimeError("boom"))
    asgi = _Asgi()

    await handle_sse_connection(
        _scope(),
        asgi.receive,
        asgi.send,
        _deps(store),
        transport_factory=_FakeTransport,
        server_factory=lambda registry, credentials: server,
    )

    assert server.registered_during_run is True
    assert len(store) == 0
    assert asgi.status == 500
    assert asgi.body == b"Failed to connect: boom"


@pytest.mark.asyncio
async def test_failure_after_stream_started_sends_nothing_more() -> None:
    store = SessionStore()
    asgi = _Asgi()

    await handle_sse_connection(
        _scope(),
        asgi.receive,
        asgi.send,
        _deps(store),
        transport_factory=lambda: _FakeTransport(start_response=True),
        server_factory=lambda registry, credentials: _FakeServer(store, RuntimeError("late")),
    )

    assert len(store) == 0
    assert asgi.messages == []
