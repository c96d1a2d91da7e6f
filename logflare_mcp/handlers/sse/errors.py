"""Plain-text HTTP failures for the SSE endpoints."""

from __future__ import annotations

from starlette.types import Send, Scope, Receive
from starlette.responses import PlainTextResponse


def plain_error(message: str, status_code: int) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=status_code)


async def send_plain_error(scope: Scope, receive: Receive, send: Send, *, message: str, status_code: int) -> None:
    await plain_error(message, status_code)(scope, receive, send)


def describe_error(exc: BaseException) -> str:
    """Message for *exc*, looking through single-error exception groups from task groups."""
    while isinstance(exc, BaseExceptionGroup) and len(exc.exceptions) == 1:
        exc = exc.exceptions[0]
    return str(exc) or type(exc).__name__


__all__ = ["describe_error", "plain_error", "send_plain_error"]
