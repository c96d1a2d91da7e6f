"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ServerSettings:
    host: str
    port: int
    cors_allow_origins: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class LogflareSettings:
    api_base_url: str
    request_timeout_s: float


@dataclass(frozen=True, slots=True)
class SessionSettings:
    idle_timeout_s: float
    sweep_tick_s: float


@dataclass(frozen=True, slots=True)
class AppSettings:
    server: ServerSettings
    logflare: LogflareSettings
    sessions: SessionSettings


__all__ = [
    "AppSettings",
    "LogflareSettings",
    "ServerSettings",
    "SessionSettings",
]
