"""Human time expressions to BigQuery timestamp expressions.

Accepted forms, tried in order (case-insensitive):

- ``now`` / ``current``
- ``<N> <unit>[s] ago``
- ``last <N> <unit>[s]``
- ``yesterday`` (24 hours back) and ``today`` (start of the current UTC day)
- a calendar date or date-time: ISO 8601 first, then free-form and RFC 2822
  text; naive values are read as UTC
- Unix seconds, only above 2000-01-01 so small integers are never dates

Units: second, minute, hour, day, week, month, year.
"""

from __future__ import annotations

import re
import logging
from datetime import datetime, timezone

from dateutil import parser as date_parser

from logflare_mcp.errors import TimeExpressionError
from logflare_mcp.config.tools import MIN_UNIX_TIMESTAMP_S, STATS_DEFAULT_WINDOW_HOURS

logger = logging.getLogger(__name__)

CURRENT_TIMESTAMP = "CURRENT_TIMESTAMP()"
START_OF_TODAY = "TIMESTAMP_TRUNC(CURRENT_TIMESTAMP(), DAY)"

_UNITS = ("second", "minute", "hour", "day", "week", "month", "year")
_UNIT_GROUP = "|".join(_UNITS)

_AGO_RE = re.compile(rf"(\d+)\s*({_UNIT_GROUP})s?\s*ago", re.IGNORECASE)
_LAST_RE = re.compile(rf"last\s+(\d+)\s*({_UNIT_GROUP})s?", re.IGNORECASE)
_NUMERIC_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def _interval_ago(amount: str, unit: str) -> str:
    return f"TIMESTAMP_SUB({CURRENT_TIMESTAMP}, INTERVAL {int(amount)} {unit.upper()})"


def _timestamp_literal(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    iso = moment.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return f"TIMESTAMP('{iso.replace('+00:00', 'Z')}')"


def _parse_calendar(value: str) -> datetime | None:
    # Bare numbers are handled as Unix seconds, never as compact ISO dates.
    if _NUMERIC_RE.match(value):
        return None
    candidate = value[:-1] + "+00:00" if value[-1:] in {"Z", "z"} else value
    try:
        return datetime.fromisoformat(candidate)
    except ValueError:
        pass
    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError):
        return None


def _parse_unix_seconds(value: str) -> datetime | None:
    if not _NUMERIC_RE.match(value):
        return None
    seconds = float(value)
    if seconds <= MIN_UNIX_TIMESTAMP_S:
        return None
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def parse_time_to_timestamp(value: str) -> str:
    """Return a BigQuery TIMESTAMP expression for *value*.

    Raises:
        TimeExpressionError: if *value* matches none of the accepted forms.
    """
    text = value.strip()
    lower = text.lower()

    if lower in {"now", "current"}:
        return CURRENT_TIMESTAMP

    match = _AGO_RE.search(lower) or _LAST_RE.search(lower)
    if match:
        return _interval_ago(match.group(1), match.group(2))

    if lower == "yesterday":
        return _interval_ago("1", "day")
    if lower == "today":
        return START_OF_TODAY

    moment = _parse_calendar(text) if text else None
    if moment is None and text:
        moment = _parse_unix_seconds(text)
    if moment is not None:
        return _timestamp_literal(moment)

    raise TimeExpressionError(value=value)


def _leading_int(token: str) -> int | None:
    match = _LEADING_INT_RE.match(token)
    return int(match.group(1)) if match else None


def parse_time_range_to_hours(time_range: str) -> int:
    """Parse statistics ranges such as ``1h``, ``24h``, ``7d``, ``30d`` into hours.

    Tokens without ``h`` or ``d`` mean 24 hours; so does an ``h``/``d`` token
    whose leading integer cannot be read.
    """
    if "h" in time_range:
        hours = _leading_int(time_range)
    elif "d" in time_range:
        days = _leading_int(time_range)
        hours = None if days is None else days * 24
    else:
        return STATS_DEFAULT_WINDOW_HOURS

    if hours is None:
        logger.warning("unreadable time range %r; using %dh", time_range, STATS_DEFAULT_WINDOW_HOURS)
        return STATS_DEFAULT_WINDOW_HOURS
    return hours


__all__ = [
    "CURRENT_TIMESTAMP",
    "START_OF_TODAY",
    "parse_time_range_to_hours",
    "parse_time_to_timestamp",
]
