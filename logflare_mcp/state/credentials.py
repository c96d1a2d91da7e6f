"""Per-connection Logflare credentials (dataclass only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LogflareCredentials:
    """Caller credentials captured when a stream is established.

    Passed explicitly into every tool invocation; never stored outside the
    owning session.
    """

    api_key: str
    source_token: str

    def __repr__(self) -> str:
        return f"LogflareCredentials(source_token={self.source_token!r}, api_key=<redacted>)"


__all__ = ["LogflareCredentials"]
