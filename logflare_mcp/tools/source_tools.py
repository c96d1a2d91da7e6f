"""Handlers for source listing and schema lookup."""

from __future__ import annotations

from typing import Any

from logflare_mcp.logflare.client import LogflareClient
from logflare_mcp.state.credentials import LogflareCredentials

from .params import NoParams


def _source_entries(payload: Any) -> list[Any]:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        return payload.get("sources") or []
    return []


def _field_or_empty(source: Any, key: str) -> Any:
    if not isinstance(source, dict):
        return ""
    return source.get(key) or ""


async def list_sources(
    client: LogflareClient,
    _params: NoParams,
    credentials: LogflareCredentials,
) -> dict[str, Any]:
    sources = _source_entries(await client.list_sources(credentials))
    return {
        "sources": [
            {
                "id": _field_or_empty(source, "id"),
                "name": _field_or_empty(source, "name"),
                "description": _field_or_empty(source, "description"),
            }
            for source in sources
        ]
    }


async def get_source_schema(
    client: LogflareClient,
    _params: NoParams,
    credentials: LogflareCredentials,
) -> dict[str, Any]:
    # Always the connection's source; there is no per-call override.
    schema = await client.get_source_schema(credentials)
    return {"source": credentials.source_token, "schema": schema}


__all__ = ["get_source_schema", "list_sources"]
