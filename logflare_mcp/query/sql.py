"""SQL text builders for the log tools.

Source names and caller SQL are interpolated verbatim: the Logflare query API
only accepts SQL text, so nothing here escapes or validates identifiers.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from logflare_mcp.errors import QueryValidationError
from logflare_mcp.config.tools import (
    RAW_LOG_COLUMNS,
    SAMPLE_COLUMNS,
    EXPLORE_COLUMNS,
    SAMPLE_LOOKBACK_DAYS,
    FORMATTED_LOG_COLUMNS,
    HUMAN_TIMESTAMP_FORMAT,
    FORMATTED_TIMESTAMP_COLUMN,
)

_PROJECTION_RE = re.compile(r"SELECT\s+(.+?)\s+FROM", re.IGNORECASE)

_LOOKBACK_FILTER = f"timestamp >= TIMESTAMP_SUB(CURRENT_TIMESTAMP(), INTERVAL {SAMPLE_LOOKBACK_DAYS} DAY)"


def _select(columns: Sequence[str], table: str, where: str, limit: int) -> str:
    return (
        f"SELECT {', '.join(columns)} FROM `{table}` WHERE {where} "
        f"ORDER BY timestamp DESC LIMIT {int(limit)}"
    )


def extract_projection(sql: str) -> str:
    """Return the column list between SELECT and FROM.

    Raises:
        QueryValidationError: no SELECT ... FROM, or a wildcard projection.
    """
    match = _PROJECTION_RE.search(sql)
    if not match:
        raise QueryValidationError(
            message="Invalid SQL: Could not parse SELECT clause. Must use explicit columns, not SELECT *"
        )
    columns = match.group(1).strip()
    if "*" in columns:
        raise QueryValidationError(
            message=(
                "SELECT * is not allowed. Please specify columns explicitly "
                "(e.g., SELECT timestamp, event_message, level FROM ...)"
            )
        )
    return columns


def build_formatted_query(sql: str) -> str:
    columns = extract_projection(sql)
    return (
        f"SELECT {columns}, FORMAT_TIMESTAMP('{HUMAN_TIMESTAMP_FORMAT}', timestamp) "
        f"as {FORMATTED_TIMESTAMP_COLUMN} FROM ({sql})"
    )


def build_sample_query(table: str, limit: int) -> str:
    return _select(SAMPLE_COLUMNS, table, _LOOKBACK_FILTER, limit)


def build_explore_query(table: str, limit: int) -> str:
    return _select(EXPLORE_COLUMNS, table, _LOOKBACK_FILTER, limit)


def build_stats_query(table: str, hours: int) -> str:
    return (
        "SELECT "
        "COUNT(*) as total_logs, "
        "COUNT(DISTINCT CAST(level AS STRING)) as distinct_levels, "
        "MIN(timestamp) as earliest_log, "
        "MAX(timestamp) as latest_log, "
        "COUNTIF(LOWER(CAST(event_message AS STRING)) LIKE '%error%') as error_count, "
        "COUNTIF(LOWER(CAST(event_message AS STRING)) LIKE '%warn%') as warning_count, "
        "COUNTIF(LOWER(CAST(level AS STRING)) = 'error') as error_level_count, "
        "COUNTIF(LOWER(CAST(level AS STRING)) = 'warn') as warn_level_count "
        f"FROM `{table}` "
        f"WHERE timestamp >= TIMESTAMP_SUB(CURRENT_TIMESTAMP(), INTERVAL {int(hours)} HOUR)"
    )


def build_time_window_query(
    table: str,
    *,
    start: str,
    end: str | None,
    limit: int,
    formatted: bool,
) -> str:
    """Newest-first logs at or after *start* (and at or before *end* when given)."""
    where = f"timestamp >= {start}"
    if end is not None:
        where += f" AND timestamp <= {end}"
    columns = FORMATTED_LOG_COLUMNS if formatted else RAW_LOG_COLUMNS
    return _select(columns, table, where, limit)


__all__ = [
    "build_explore_query",
    "build_formatted_query",
    "build_sample_query",
    "build_stats_query",
    "build_time_window_query",
    "extract_projection",
]
