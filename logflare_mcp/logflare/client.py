"""Logflare HTTP API client.

The client holds only the shared connection pool; credentials are passed on
every call so one instance serves all sessions.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from logflare_mcp.errors import LogflareApiError
from logflare_mcp.state.credentials import LogflareCredentials
from logflare_mcp.config.logflare import (
    LOGFLARE_SQL_PARAM,
    LOGFLARE_QUERY_PATH,
    LOGFLARE_SOURCES_PATH,
    LOGFLARE_SOURCE_PARAM,
    DEFAULT_LOGFLARE_API_BASE_URL,
    LOGFLARE_SCHEMA_PATH_TEMPLATE,
)

logger = logging.getLogger(__name__)


def unwrap_result(payload: Any) -> Any:
    """Return `payload["result"]` when present and not null, else the payload itself."""
    if isinstance(payload, dict) and payload.get("result") is not None:
        return payload["result"]
    return payload


def extract_rows(payload: Any) -> list[Any]:
    """Return query rows from either `{"result": [...]}` or a bare array."""
    rows = unwrap_result(payload)
    return rows if isinstance(rows, list) else []


class LogflareClient:
    def __init__(self, http_client: httpx.AsyncClient, *, base_url: str = DEFAULT_LOGFLARE_API_BASE_URL) -> None:
        self._http = http_client
        self._base_url = base_url.rstrip("/")

    @staticmethod
    def _headers(credentials: LogflareCredentials) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {credentials.api_key}",
            "Accept": "application/json",
        }

    async def _get_json(
        self,
        path: str,
        credentials: LogflareCredentials,
        *,
        params: dict[str, str] | None = None,
    ) -> Any:
        response = await self._http.get(
            f"{self._base_url}{path}",
            params=params,
            headers=self._headers(credentials),
        )
        if response.is_error:
            logger.debug("logflare %s -> %s", path, response.status_code)
            raise LogflareApiError(status_code=response.status_code, body=response.text)
        return response.json()

    async def execute_query(self, sql: str, credentials: LogflareCredentials) -> Any:
        """Run SQL scoped to the caller's source; returns the unwrapped result."""
        payload = await self._get_json(
            LOGFLARE_QUERY_PATH,
            credentials,
            params={LOGFLARE_SQL_PARAM: sql, LOGFLARE_SOURCE_PARAM: credentials.source_token},
        )
        return unwrap_result(payload)

    async def list_sources(self, credentials: LogflareCredentials) -> Any:
        return await self._get_json(LOGFLARE_SOURCES_PATH, credentials)

    async def get_source_schema(self, credentials: LogflareCredentials) -> Any:
        path = LOGFLARE_SCHEMA_PATH_TEMPLATE.format(source_token=credentials.source_token)
        return await self._get_json(path, credentials)


__all__ = ["LogflareClient", "extract_rows", "unwrap_result"]
