"""Handlers for time-windowed log retrieval and statistics."""

from __future__ import annotations

from typing import Any

from logflare_mcp.state.credentials import LogflareCredentials
from logflare_mcp.logflare.client import LogflareClient, extract_rows
from logflare_mcp.query.sql import build_stats_query, build_time_window_query
from logflare_mcp.config.tools import LOGS_FROM_TIME_MAX_LIMIT, LOGS_TIME_RANGE_MAX_LIMIT
from logflare_mcp.query.time_expressions import parse_time_to_timestamp, parse_time_range_to_hours

from .params import LogStatsParams, LogsFromTimeParams, LogsTimeRangeParams


def _statistics(row: dict[str, Any]) -> dict[str, Any]:
    return {
        "totalLogs": row.get("total_logs") or 0,
        "distinctLevels": row.get("distinct_levels") or 0,
        "errorCount": row.get("error_count") or 0,
        "warningCount": row.get("warning_count") or 0,
        "errorLevelCount": row.get("error_level_count") or 0,
        "warnLevelCount": row.get("warn_level_count") or 0,
        "earliestLog": row.get("earliest_log") or None,
        "latestLog": row.get("latest_log") or None,
    }


async def get_log_stats(
    client: LogflareClient,
    params: LogStatsParams,
    credentials: LogflareCredentials,
) -> dict[str, Any]:
    table = params.source_name or credentials.source_token
    hours = parse_time_range_to_hours(params.time_range)
    rows = extract_rows(await client.execute_query(build_stats_query(table, hours), credentials))
    first = rows[0] if rows and isinstance(rows[0], dict) else {}
    return {"source": table, "timeRange": params.time_range, "statistics": _statistics(first)}


async def get_logs_from_time(
    client: LogflareClient,
    params: LogsFromTimeParams,
    credentials: LogflareCredentials,
) -> dict[str, Any]:
    table = params.source_name or credentials.source_token
    sql = build_time_window_query(
        table,
        start=parse_time_to_timestamp(params.start_time),
        end=None,
        limit=min(params.limit, LOGS_FROM_TIME_MAX_LIMIT),
        formatted=params.formatted,
    )
    rows = extract_rows(await client.execute_query(sql, credentials))
    return {"source": table, "startTime": params.start_time, "count": len(rows), "logs": rows}


async def get_logs_by_time_range(
    client: LogflareClient,
    params: LogsTimeRangeParams,
    credentials: LogflareCredentials,
) -> dict[str, Any]:
    table = params.source_name or credentials.source_token
    start = parse_time_to_timestamp(params.start_time)
    end = parse_time_to_timestamp(params.end_time)
    sql = build_time_window_query(
        table,
        start=start,
        end=end,
        limit=min(params.limit, LOGS_TIME_RANGE_MAX_LIMIT),
        formatted=params.formatted,
    )
    rows = extract_rows(await client.execute_query(sql, credentials))
    return {
        "source": table,
        "startTime": params.start_time,
        "endTime": params.end_time,
        "count": len(rows),
        "logs": rows,
    }


__all__ = ["get_log_stats", "get_logs_by_time_range", "get_logs_from_time"]
