from __future__ import annotations

import pytest

from logflare_mcp.errors import QueryValidationError
from logflare_mcp.query.sql import (
    build_stats_query,
    build_sample_query,
    extract_projection,
    build_formatted_query,
    build_time_window_query,
)


def test_extract_projection() -> None:
    assert extract_projection("select timestamp, level\nfrom `src`") == "timestamp, level"


@pytest.mark.parametrize("sql", ["SELECT * FROM `src`", "select t.* from `src` t"])
def test_wildcard_projection_is_rejected(sql: str) -> None:
    with pytest.raises(QueryValidationError) as exc:
        extract_projection(sql)
    assert str(exc.value).startswith("SELECT * is not allowed")


def test_missing_select_from_is_rejected() -> None:
    with pytest.raises(QueryValidationError) as exc:
        extract_projection("SHOW TABLES")
    assert "Could not parse SELECT clause" in str(exc.value)


def test_formatted_query_wraps_caller_sql() -> None:
    sql = "SELECT timestamp, event_message FROM `src` LIMIT 5"
    assert build_formatted_query(sql) == (
        "SELECT timestamp, event_message, FORMAT_TIMESTAMP('%Y-%m-%d %H:%M:%S', timestamp) "
        "as formatted_timestamp FROM (SELECT timestamp, event_message FROM `src` LIMIT 5)"
    )


def test_sample_query_shape() -> None:
    assert build_sample_query("app.logs", 5) == (
        "SELECT timestamp, event_message, level, id, metadata FROM `app.logs` "
        "WHERE timestamp >= TIMESTAMP_SUB(CURRENT_TIMESTAMP(), INTERVAL 7 DAY) "
        "ORDER BY timestamp DESC LIMIT 5"
    )


def test_stats_query_window() -> None:
    sql = build_stats_query("src", 168)
    assert "COUNT(*) as total_logs" in sql
    assert "FROM `src`" in sql
    assert sql.endswith("INTERVAL 168 HOUR)")


def test_time_window_query_bounds_and_columns() -> None:
    raw = build_time_window_query("src", start="A", end="B", limit=10, formatted=False)
    assert "WHERE timestamp >= A AND timestamp <= B" in raw
    assert raw.startswith("SELECT timestamp, event_message, metadata, level, id FROM `src`")
    assert raw.endswith("ORDER BY timestamp DESC LIMIT 10")

    formatted = build_time_window_query("src", start="A", end=None, limit=3, formatted=True)
    assert "timestamp <=" not in formatted
    assert "as formatted_timestamp" in formatted
    assert "timestamp as timestamp_micros" in formatted
