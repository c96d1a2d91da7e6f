"""Credential extraction for SSE stream requests."""

from __future__ import annotations

from collections.abc import Mapping

from logflare_mcp.state.credentials import LogflareCredentials
from logflare_mcp.config.sse import SSE_HEADER_API_KEY, SSE_HEADER_SOURCE_TOKEN

CREDENTIAL_HEADERS: tuple[str, ...] = (SSE_HEADER_API_KEY, SSE_HEADER_SOURCE_TOKEN)


def _header(headers: Mapping[str, str], name: str) -> str:
    return (headers.get(name) or "").strip()


def missing_credential_headers(headers: Mapping[str, str]) -> list[str]:
    return [name for name in CREDENTIAL_HEADERS if not _header(headers, name)]


def get_credentials(headers: Mapping[str, str]) -> LogflareCredentials | None:
    """Return credentials when both headers are present and non-empty."""
    api_key = _header(headers, SSE_HEADER_API_KEY)
    source_token = _header(headers, SSE_HEADER_SOURCE_TOKEN)
    if not api_key or not source_token:
        return None
    return LogflareCredentials(api_key=api_key, source_token=source_token)


__all__ = ["CREDENTIAL_HEADERS", "get_credentials", "missing_credential_headers"]
