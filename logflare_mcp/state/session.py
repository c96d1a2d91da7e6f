"""Live SSE session record (dataclass only)."""

from __future__ import annotations

from typing import Any
from dataclasses import dataclass

from .credentials import LogflareCredentials


@dataclass(slots=True)
class Session:
    session_id: str
    server: Any
    transport: Any
    credentials: LogflareCredentials
    created_at: float
    last_activity: float


__all__ = ["Session"]
