"""The fixed tool catalog exposed to every session."""

from __future__ import annotations

from logflare_mcp.state.tools import ToolSpec

from .params import (
    NoParams,
    LogStatsParams,
    QueryLogsParams,
    SampleLogsParams,
    LogsFromTimeParams,
    ExploreFieldsParams,
    LogsTimeRangeParams,
    FormattedQueryParams,
)
from .source_tools import list_sources, get_source_schema
from .time_tools import get_log_stats, get_logs_from_time, get_logs_by_time_range
from .query_tools import query_logs, explore_fields, get_sample_logs, query_logs_formatted

TOOL_SPECS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name="query_logs",
        description=(
            "Execute raw BigQuery SQL against Logflare logs. The source is scoped from the connection's "
            "source token. Reference sources by name as table names (FROM `source-name`); use "
            "list_sources to find names and get_source_schema to discover columns. Returns raw results "
            "with microsecond timestamps; use query_logs_formatted for human-readable timestamps."
        ),
        params_model=QueryLogsParams,
        handler=query_logs,
    ),
    ToolSpec(
        name="list_sources",
        description="List the Logflare sources available to this API key as {id, name, description}.",
        params_model=NoParams,
        handler=list_sources,
    ),
    ToolSpec(
        name="get_source_schema",
        description="Get the schema of the source bound to this connection.",
        params_model=NoParams,
        handler=get_source_schema,
    ),
    ToolSpec(
        name="get_sample_logs",
        description=(
            "Get the most recent log entries (last 7 days) from a source, with timestamp, event_message, "
            "level, id and metadata, to see real log structure."
        ),
        params_model=SampleLogsParams,
        handler=get_sample_logs,
    ),
    ToolSpec(
        name="query_logs_formatted",
        description=(
            "Execute BigQuery SQL and add a human-readable 'formatted_timestamp' column "
            "(YYYY-MM-DD HH:MM:SS). Columns must be listed explicitly (no SELECT *) and must include "
            "'timestamp'."
        ),
        params_model=FormattedQueryParams,
        handler=query_logs_formatted,
    ),
    ToolSpec(
        name="explore_fields",
        description=(
            "Analyze recent logs to discover fields, including nested paths such as 'metadata.userId', "
            "with their types and sample values."
        ),
        params_model=ExploreFieldsParams,
        handler=explore_fields,
    ),
    ToolSpec(
        name="get_log_stats",
        description=(
            "Aggregate statistics over a time range: total logs, distinct levels, error and warning "
            "counts, earliest and latest timestamps."
        ),
        params_model=LogStatsParams,
        handler=get_log_stats,
    ),
    ToolSpec(
        name="get_logs_from_time",
        description=(
            "Get the most recent logs from a point in time forward, e.g. to investigate an incident. "
            "Accepts ISO 8601, relative ('1 hour ago'), 'yesterday', 'now' or Unix seconds."
        ),
        params_model=LogsFromTimeParams,
        handler=get_logs_from_time,
    ),
    ToolSpec(
        name="get_logs_by_time_range",
        description=(
            "Get logs between a start and an end time, newest first. Both bounds accept the same "
            "formats as get_logs_from_time."
        ),
        params_model=LogsTimeRangeParams,
        handler=get_logs_by_time_range,
    ),
)

__all__ = ["TOOL_SPECS"]
