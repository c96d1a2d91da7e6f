"""Environment parsing for runtime settings."""

from __future__ import annotations

import os

from logflare_mcp.config.sessions import (
    SESSION_IDLE_TIMEOUT_S,
    ENV_SESSION_SWEEP_TICK_S,
    DEFAULT_SESSION_SWEEP_TICK_S,
)
from logflare_mcp.config.server import (
    ENV_HOST,
    ENV_PORT,
    DEFAULT_HOST,
    DEFAULT_PORT,
    ENV_CORS_ALLOW_ORIGINS,
    DEFAULT_CORS_ALLOW_ORIGINS,
)
from logflare_mcp.state.settings import (
    AppSettings,
    ServerSettings,
    SessionSettings,
    LogflareSettings,
)
from logflare_mcp.config.logflare import (
    ENV_LOGFLARE_API_BASE_URL,
    DEFAULT_LOGFLARE_API_BASE_URL,
    ENV_LOGFLARE_REQUEST_TIMEOUT_S,
    DEFAULT_LOGFLARE_REQUEST_TIMEOUT_S,
)


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _csv_env(name: str, default: str) -> tuple[str, ...]:
    items = [item.strip() for item in _str_env(name, default).split(",")]
    return tuple(item for item in items if item)


def _load_server_settings() -> ServerSettings:
    port = _int_env(ENV_PORT, DEFAULT_PORT)
    if port <= 0 or port > 65535:
        port = DEFAULT_PORT
    return ServerSettings(
        host=_str_env(ENV_HOST, DEFAULT_HOST),
        port=port,
        cors_allow_origins=_csv_env(ENV_CORS_ALLOW_ORIGINS, DEFAULT_CORS_ALLOW_ORIGINS),
    )


def _load_logflare_settings() -> LogflareSettings:
    timeout = _float_env(ENV_LOGFLARE_REQUEST_TIMEOUT_S, DEFAULT_LOGFLARE_REQUEST_TIMEOUT_S)
    if timeout <= 0:
        timeout = DEFAULT_LOGFLARE_REQUEST_TIMEOUT_S
    return LogflareSettings(
        api_base_url=_str_env(ENV_LOGFLARE_API_BASE_URL, DEFAULT_LOGFLARE_API_BASE_URL).rstrip("/"),
        request_timeout_s=timeout,
    )


def _load_session_settings() -> SessionSettings:
    tick = _float_env(ENV_SESSION_SWEEP_TICK_S, DEFAULT_SESSION_SWEEP_TICK_S)
    if tick <= 0:
        tick = DEFAULT_SESSION_SWEEP_TICK_S
    return SessionSettings(idle_timeout_s=SESSION_IDLE_TIMEOUT_S, sweep_tick_s=tick)


def load_settings() -> AppSettings:
    return AppSettings(
        server=_load_server_settings(),
        logflare=_load_logflare_settings(),
        sessions=_load_session_settings(),
    )


__all__ = ["load_settings"]
