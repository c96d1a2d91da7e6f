"""Handlers for tools that run caller SQL or fixed-shape sample queries."""

from __future__ import annotations

from typing import Any

from logflare_mcp.logflare.client import LogflareClient, extract_rows
from logflare_mcp.state.credentials import LogflareCredentials
from logflare_mcp.query.fields import analyze_field_structure
from logflare_mcp.config.tools import SAMPLE_LOGS_MAX_LIMIT, EXPLORE_FIELDS_MAX_LIMIT
from logflare_mcp.query.sql import build_sample_query, build_explore_query, build_formatted_query

from .params import QueryLogsParams, SampleLogsParams, ExploreFieldsParams, FormattedQueryParams


async def query_logs(
    client: LogflareClient,
    params: QueryLogsParams,
    credentials: LogflareCredentials,
) -> Any:
    return await client.execute_query(params.sql, credentials)


async def query_logs_formatted(
    client: LogflareClient,
    params: FormattedQueryParams,
    credentials: LogflareCredentials,
) -> dict[str, Any]:
    # Validation happens before any backend call.
    sql = build_formatted_query(params.sql)
    rows = extract_rows(await client.execute_query(sql, credentials))
    return {"result": rows, "count": len(rows)}


async def get_sample_logs(
    client: LogflareClient,
    params: SampleLogsParams,
    credentials: LogflareCredentials,
) -> dict[str, Any]:
    sql = build_sample_query(params.source_name, min(params.limit, SAMPLE_LOGS_MAX_LIMIT))
    rows = extract_rows(await client.execute_query(sql, credentials))
    return {"source": params.source_name, "count": len(rows), "samples": rows}


async def explore_fields(
    client: LogflareClient,
    params: ExploreFieldsParams,
    credentials: LogflareCredentials,
) -> dict[str, Any]:
    table = params.source_name or credentials.source_token
    sql = build_explore_query(table, min(params.limit, EXPLORE_FIELDS_MAX_LIMIT))
    fields = analyze_field_structure(extract_rows(await client.execute_query(sql, credentials)))
    return {
        "source": table,
        "fieldsAnalyzed": len(fields),
        "fieldStructure": {path: info.to_payload() for path, info in fields.items()},
    }


__all__ = ["explore_fields", "get_sample_logs", "query_logs", "query_logs_formatted"]
