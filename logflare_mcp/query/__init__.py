"""Pure helpers that turn tool arguments into Logflare SQL text."""

from .fields import analyze_field_structure
from .time_expressions import parse_time_to_timestamp, parse_time_range_to_hours

__all__ = ["analyze_field_structure", "parse_time_range_to_hours", "parse_time_to_timestamp"]
