"""Per-connection MCP transport over server-sent events.

One instance backs exactly one stream. Server-to-client JSON-RPC messages
are pushed as ``message`` events; client-to-server messages arrive through
`handle_post_message` from the message endpoint. The first event tells the
client where to post, carrying this transport's session id.
"""

from __future__ import annotations

import uuid
import logging
from typing import Any
from urllib.parse import quote
from contextlib import asynccontextmanager
from collections.abc import Callable, AsyncIterator

import anyio
from mcp import types
from pydantic import ValidationError
from starlette.types import Send, Scope, Message, Receive
from sse_starlette.sse import EventSourceResponse
from mcp.shared.message import SessionMessage, ServerMessageMetadata
from anyio.streams.memory import MemoryObjectSendStream, MemoryObjectReceiveStream

from logflare_mcp.errors import MessageParseError
from logflare_mcp.config.sse import (
    SSE_EVENT_MESSAGE,
    SSE_EVENT_ENDPOINT,
    SSE_SESSION_QUERY_PARAM,
    SSE_ERROR_UNPARSEABLE_MESSAGE,
)

logger = logging.getLogger(__name__)

CloseCallback = Callable[[str], Any]
Streams = tuple[MemoryObjectReceiveStream[SessionMessage | Exception], MemoryObjectSendStream[SessionMessage]]


class SseSessionTransport:
    def __init__(self, message_path: str, *, session_id: str | None = None) -> None:
        self.session_id = session_id or uuid.uuid4().hex
        self.response_started = False
        self._message_path = message_path
        self._read_stream_writer: MemoryObjectSendStream[SessionMessage | Exception] | None = None
        self._cancel_scope: anyio.CancelScope | None = None
        self._close_callbacks: list[CloseCallback] = []
        self._closed = False

    def on_close(self, callback: CloseCallback) -> None:
        self._close_callbacks.append(callback)

    def endpoint_url(self, root_path: str = "") -> str:
        path = quote(root_path.rstrip("/") + self._message_path)
        return f"{path}?{SSE_SESSION_QUERY_PARAM}={self.session_id}"

    def _notify_closed(self) -> None:
        if self._closed:
            return
        self._closed = True
        for callback in self._close_callbacks:
            try:
                callback(self.session_id)
            except Exception:
                logger.exception("close callback failed for session %s", self.session_id)

    @asynccontextmanager
    async def connect(self, scope: Scope, receive: Receive, send: Send) -> AsyncIterator[Streams]:
        """Open the event stream and yield ``(read_stream, write_stream)`` for an MCP server."""
        if scope["type"] != "http":
            raise ValueError("SSE transport can only handle HTTP requests")

        read_stream_writer, read_stream = anyio.create_memory_object_stream[SessionMessage | Exception](0)
        write_stream, write_stream_reader = anyio.create_memory_object_stream[SessionMessage](0)
        sse_stream_writer, sse_stream_reader = anyio.create_memory_object_stream[dict[str, Any]](0)
        self._read_stream_writer = read_stream_writer
        endpoint = self.endpoint_url(scope.get("root_path", ""))

        async def sse_writer() -> None:
            async with sse_stream_writer, write_stream_reader:
                await sse_stream_writer.send({"event": SSE_EVENT_ENDPOINT, "data": endpoint})
                async for session_message in write_stream_reader:
                    await sse_stream_writer.send(
                        {
                            "event": SSE_EVENT_MESSAGE,
                            "data": session_message.message.model_dump_json(by_alias=True, exclude_none=True),
                        }
                    )

        async def tracking_send(message: Message) -> None:
            if message["type"] == "http.response.start":
                self.response_started = True
            await send(message)

        async def response_wrapper() -> None:
            try:
                await EventSourceResponse(content=sse_stream_reader, data_sender_callable=sse_writer)(
                    scope, receive, tracking_send
                )
            finally:
                await read_stream_writer.aclose()
                await write_stream_reader.aclose()
                logger.debug("SSE stream ended for session %s", self.session_id)
                self._notify_closed()

        try:
            async with anyio.create_task_group() as tg:
                self._cancel_scope = tg.cancel_scope
                tg.start_soon(response_wrapper)
                yield read_stream, write_stream
                # The MCP server is done with the streams; end the HTTP response too.
                tg.cancel_scope.cancel()
        finally:
            self._read_stream_writer = None
            self._cancel_scope = None
            self._notify_closed()

    async def handle_post_message(self, body: bytes, *, request: Any = None) -> None:
        """Forward one client message into the session.

        Raises:
            MessageParseError: *body* is not a JSON-RPC message.
            RuntimeError: the stream is not open.
        """
        writer = self._read_stream_writer
        if writer is None:
            raise RuntimeError(f"session {self.session_id} is not connected")

        try:
            message = types.JSONRPCMessage.model_validate_json(body)
        except ValidationError as err:
            raise MessageParseError(message=SSE_ERROR_UNPARSEABLE_MESSAGE) from err

        metadata = ServerMessageMetadata(request_context=request)
        await writer.send(SessionMessage(message, metadata=metadata))

    async def close(self) -> None:
        if self._cancel_scope is not None:
            self._cancel_scope.cancel()


__all__ = ["SseSessionTransport"]
