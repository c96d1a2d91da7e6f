"""Tool defaults, caps and query fragments."""

from __future__ import annotations

# Sample/explore queries look back over a fixed window.
SAMPLE_LOOKBACK_DAYS = 7

SAMPLE_LOGS_DEFAULT_LIMIT = 5
SAMPLE_LOGS_MAX_LIMIT = 100

EXPLORE_FIELDS_DEFAULT_LIMIT = 10
EXPLORE_FIELDS_MAX_LIMIT = 50
EXPLORE_MAX_SAMPLE_VALUES = 3

LOGS_FROM_TIME_DEFAULT_LIMIT = 20
LOGS_FROM_TIME_MAX_LIMIT = 20

LOGS_TIME_RANGE_DEFAULT_LIMIT = 50
LOGS_TIME_RANGE_MAX_LIMIT = 100

STATS_DEFAULT_TIME_RANGE = "24h"
STATS_DEFAULT_WINDOW_HOURS = 24

# Unix seconds at 2000-01-01T00:00:00Z; smaller numbers are not read as timestamps.
MIN_UNIX_TIMESTAMP_S = 946684800

HUMAN_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
FORMATTED_TIMESTAMP_COLUMN = "formatted_timestamp"

# Fixed projection used by the sample and explore tools.
SAMPLE_COLUMNS: tuple[str, ...] = ("timestamp", "event_message", "level", "id", "metadata")
EXPLORE_COLUMNS: tuple[str, ...] = ("timestamp", "event_message", "metadata", "level", "id")
RAW_LOG_COLUMNS: tuple[str, ...] = ("timestamp", "event_message", "metadata", "level", "id")
FORMATTED_LOG_COLUMNS: tuple[str, ...] = (
    "event_message",
    "metadata",
    "level",
    "id",
    f"FORMAT_TIMESTAMP('{HUMAN_TIMESTAMP_FORMAT}', timestamp) as {FORMATTED_TIMESTAMP_COLUMN}",
    "timestamp as timestamp_micros",
)

__all__ = [
    "EXPLORE_COLUMNS",
    "EXPLORE_FIELDS_DEFAULT_LIMIT",
    "EXPLORE_FIELDS_MAX_LIMIT",
    "EXPLORE_MAX_SAMPLE_VALUES",
    "FORMATTED_LOG_COLUMNS",
    "FORMATTED_TIMESTAMP_COLUMN",
    "HUMAN_TIMESTAMP_FORMAT",
    "LOGS_FROM_TIME_DEFAULT_LIMIT",
    "LOGS_FROM_TIME_MAX_LIMIT",
    "LOGS_TIME_RANGE_DEFAULT_LIMIT",
    "LOGS_TIME_RANGE_MAX_LIMIT",
    "MIN_UNIX_TIMESTAMP_S",
    "RAW_LOG_COLUMNS",
    "SAMPLE_COLUMNS",
    "SAMPLE_LOGS_DEFAULT_LIMIT",
    "SAMPLE_LOGS_MAX_LIMIT",
    "SAMPLE_LOOKBACK_DAYS",
    "STATS_DEFAULT_TIME_RANGE",
    "STATS_DEFAULT_WINDOW_HOURS",
]
