from __future__ import annotations

import anyio
import pytest
from mcp import types
from mcp.shared.message import SessionMessage

from logflare_mcp.errors import MessageParseError
from logflare_mcp.handlers.sse import SseSessionTransport


def _scope() -> dict:
    return {
        "type": "http",
        "method": "GET",
        "path": "/sse",
        "root_path": "",
        "query_string": b"",
        "headers": [],
    }


class _Client:
    def __init__(self) -> None:
        self.messages: list[dict] = []

    async def receive(self) -> dict:
        await anyio.sleep_forever()
        return {"type": "http.disconnect"}

    async def send(self, message: dict) -> None:
        self.messages.append(message)

    @property
    def body(self) -> bytes:
        return b"".join(m.get("body", b"") for m in self.messages if m["type"] == "http.response.body")

    async def wait_for(self, fragment: bytes) -> None:
        while fragment not in self.body:
            await anyio.sleep(0.01)


def test_endpoint_url_carries_session_id() -> None:
    transport = SseSessionTransport("/messages", session_id="abc")
    assert transport.endpoint_url() == "/messages?sessionId=abc"
    assert transport.endpoint_url("/mcp/") == "/mcp/messages?sessionId=abc"


def test_generated_ids_are_unique() -> None:
    assert SseSessionTransport("/messages").session_id != SseSessionTransport("/messages").session_id


@pytest.mark.asyncio
async def test_stream_round_trip() -> None:
    transport = SseSessionTransport("/messages", session_id="abc")
    closed: list[str] = []
    transport.on_close(closed.append)
    client = _Client()
    ping = b'{"jsonrpc":"2.0","id":1,"method":"ping"}'

    with anyio.fail_after(5):
        async with transport.connect(_scope(), client.receive, client.send) as (read_stream, write_stream):
            await client.wait_for(b"data: /messages?sessionId=abc")
            assert transport.response_started is True

            async with anyio.create_task_group() as tg:
                tg.start_soon(transport.handle_post_message, ping)
                received = await read_stream.receive()
            assert received.message.root.method == "ping"

            reply = types.JSONRPCMessage(types.JSONRPCResponse(jsonrpc="2.0", id=1, result={}))
            await write_stream.send(SessionMessage(reply))
            await client.wait_for(b"event: message")

    assert b"event: endpoint" in client.body
    assert b'"id":1' in client.body
    assert closed == ["abc"]


@pytest.mark.asyncio
async def test_unparseable_post_raises() -> None:
    transport = SseSessionTransport("/messages", session_id="abc")
    client = _Client()

    with anyio.fail_after(5):
        async with transport.connect(_scope(), client.receive, client.send):
            with pytest.raises(MessageParseError):
                await transport.handle_post_message(b"not json")


@pytest.mark.asyncio
async def test_close_ends_the_stream() -> None:
    transport = SseSessionTransport("/messages", session_id="abc")
    closed: list[str] = []
    transport.on_close(closed.append)
    client = _Client()

    with anyio.fail_after(5):
        async with transport.connect(_scope(), client.receive, client.send):
            await transport.close()
            await anyio.sleep_forever()

    assert closed == ["abc"]
