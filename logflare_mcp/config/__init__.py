"""Configuration module exports (env names, defaults and protocol constants only)."""

from .sessions import SESSION_IDLE_TIMEOUT_S
from .sse import SSE_ENDPOINT_PATH, SSE_MESSAGE_PATH

__all__ = [
    "SESSION_IDLE_TIMEOUT_S",
    "SSE_ENDPOINT_PATH",
    "SSE_MESSAGE_PATH",
]
