"""Declared argument shapes for each tool.

Field aliases are the camelCase names clients send; descriptions are published
to clients through ``tools/list``.
"""

from __future__ import annotations

from pydantic import Field, BaseModel, ConfigDict

from logflare_mcp.config.tools import (
    STATS_DEFAULT_TIME_RANGE,
    SAMPLE_LOGS_MAX_LIMIT,
    LOGS_FROM_TIME_MAX_LIMIT,
    SAMPLE_LOGS_DEFAULT_LIMIT,
    LOGS_TIME_RANGE_MAX_LIMIT,
    EXPLORE_FIELDS_MAX_LIMIT,
    EXPLORE_FIELDS_DEFAULT_LIMIT,
    LOGS_FROM_TIME_DEFAULT_LIMIT,
    LOGS_TIME_RANGE_DEFAULT_LIMIT,
)

_SOURCE_NAME_OPTIONAL = (
    "Source name. Get source names using list_sources tool first. "
    "If not provided, uses the configured source from connection."
)
_TIME_EXPRESSION_FORMS = (
    "Accepts: ISO 8601 (e.g., '2024-01-15T10:30:00Z'), relative time (e.g., '1 hour ago', "
    "'last 2 days'), 'now', 'yesterday', 'today', or Unix timestamp in seconds."
)
_FORMATTED = (
    "If true, returns human-readable timestamps in addition to microsecond timestamps. Default: false."
)


class ToolParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class NoParams(ToolParams):
    pass


class QueryLogsParams(ToolParams):
    sql: str = Field(
        min_length=1,
        description=(
            "BigQuery SQL executed against Logflare logs, scoped to the connection's source token. "
            "Reference sources by name as table names (e.g., FROM `source-name`); call list_sources "
            "first. Returns raw results with microsecond timestamps. "
            "Example: SELECT timestamp, event_message, level FROM `my-source` LIMIT 10"
        ),
    )


class FormattedQueryParams(ToolParams):
    sql: str = Field(
        min_length=1,
        description=(
            "BigQuery SQL with explicit columns (SELECT * is rejected) that includes a 'timestamp' "
            "column. Example: SELECT timestamp, event_message, level FROM `my-source` "
            "WHERE level = 'error' LIMIT 10. Returns your columns plus 'formatted_timestamp' "
            "(YYYY-MM-DD HH:MM:SS)."
        ),
    )


class SampleLogsParams(ToolParams):
    source_name: str = Field(
        alias="sourceName",
        min_length=1,
        description=(
            "Source name to get sample logs from; use the 'name' field returned by list_sources "
            "(e.g., 'app.logs')."
        ),
    )
    limit: int = Field(
        default=SAMPLE_LOGS_DEFAULT_LIMIT,
        ge=1,
        description=(
            f"Number of recent log entries to return (default: {SAMPLE_LOGS_DEFAULT_LIMIT}, "
            f"max: {SAMPLE_LOGS_MAX_LIMIT})."
        ),
    )


class ExploreFieldsParams(ToolParams):
    source_name: str | None = Field(default=None, alias="sourceName", description=_SOURCE_NAME_OPTIONAL)
    limit: int = Field(
        default=EXPLORE_FIELDS_DEFAULT_LIMIT,
        ge=1,
        description=(
            f"Number of recent logs to analyze (default: {EXPLORE_FIELDS_DEFAULT_LIMIT}, "
            f"max: {EXPLORE_FIELDS_MAX_LIMIT}). Discovers nested paths such as 'metadata.userId'."
        ),
    )


class LogStatsParams(ToolParams):
    time_range: str = Field(
        default=STATS_DEFAULT_TIME_RANGE,
        alias="timeRange",
        description="Time range for statistics. Formats: '1h', '24h', '7d', '30d'. Default: '24h'.",
    )
    source_name: str | None = Field(default=None, alias="sourceName", description=_SOURCE_NAME_OPTIONAL)


class LogsFromTimeParams(ToolParams):
    start_time: str = Field(
        alias="startTime",
        min_length=1,
        description=f"Return the most recent logs at or after this time. {_TIME_EXPRESSION_FORMS}",
    )
    source_name: str | None = Field(default=None, alias="sourceName", description=_SOURCE_NAME_OPTIONAL)
    limit: int = Field(
        default=LOGS_FROM_TIME_DEFAULT_LIMIT,
        ge=1,
        description=(
            f"Number of logs to return (default: {LOGS_FROM_TIME_DEFAULT_LIMIT}, "
            f"max: {LOGS_FROM_TIME_MAX_LIMIT}), newest first."
        ),
    )
    formatted: bool = Field(default=False, description=_FORMATTED)


class LogsTimeRangeParams(ToolParams):
    start_time: str = Field(
        alias="startTime",
        min_length=1,
        description=f"Start of the window (inclusive). {_TIME_EXPRESSION_FORMS}",
    )
    end_time: str = Field(
        alias="endTime",
        min_length=1,
        description=f"End of the window (inclusive). {_TIME_EXPRESSION_FORMS}",
    )
    source_name: str | None = Field(default=None, alias="sourceName", description=_SOURCE_NAME_OPTIONAL)
    limit: int = Field(
        default=LOGS_TIME_RANGE_DEFAULT_LIMIT,
        ge=1,
        description=(
            f"Number of logs to return (default: {LOGS_TIME_RANGE_DEFAULT_LIMIT}, "
            f"max: {LOGS_TIME_RANGE_MAX_LIMIT}), newest first."
        ),
    )
    formatted: bool = Field(default=False, description=_FORMATTED)


__all__ = [
    "ExploreFieldsParams",
    "FormattedQueryParams",
    "LogStatsParams",
    "LogsFromTimeParams",
    "LogsTimeRangeParams",
    "NoParams",
    "QueryLogsParams",
    "SampleLogsParams",
    "ToolParams",
]
