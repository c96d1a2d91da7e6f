"""Infer a flattened field map from sample log records."""

from __future__ import annotations

from typing import Any
from collections.abc import Iterable

from logflare_mcp.state.fields import FieldInfo
from logflare_mcp.config.tools import EXPLORE_MAX_SAMPLE_VALUES


def json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def _walk(record: dict[str, Any], prefix: str, fields: dict[str, FieldInfo]) -> None:
    for key, value in record.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        info = fields.get(path)
        if info is None:
            # The type is taken from the first occurrence only.
            info = fields[path] = FieldInfo(type=json_type_name(value))

        if isinstance(value, dict):
            info.is_nested = True
            _walk(value, path, fields)
        elif len(info.sample_values) < EXPLORE_MAX_SAMPLE_VALUES:
            info.sample_values.append(value)


def analyze_field_structure(records: Iterable[Any]) -> dict[str, FieldInfo]:
    """Walk each record, joining nested object keys with dots.

    Non-object records are skipped. Arrays are treated as leaf values.
    """
    fields: dict[str, FieldInfo] = {}
    for record in records:
        if isinstance(record, dict):
            _walk(record, "", fields)
    return fields


__all__ = ["analyze_field_structure", "json_type_name"]
