from __future__ import annotations

from logflare_mcp.query.fields import json_type_name, analyze_field_structure


def test_nested_keys_are_flattened_with_dots() -> None:
    records = [
        {"level": "info", "metadata": {"user": {"id": "u1"}, "tags": ["a"]}},
        {"level": "error", "metadata": {"user": {"id": "u2"}}},
    ]

    fields = analyze_field_structure(records)

    assert set(fields) == {"level", "metadata", "metadata.user", "metadata.user.id", "metadata.tags"}
    assert fields["metadata"].is_nested is True
    assert fields["metadata"].sample_values == []
    assert fields["metadata.user"].type == "object"
    assert fields["metadata.user.id"].to_payload() == {
        "type": "string",
        "sampleValues": ["u1", "u2"],
        "isNested": False,
    }
    assert fields["metadata.tags"].type == "array"
    assert fields["metadata.tags"].sample_values == [["a"]]


def test_samples_are_capped_at_three() -> None:
    fields = analyze_field_structure([{"n": i} for i in range(10)])

    assert fields["n"].type == "number"
    assert fields["n"].sample_values == [0, 1, 2]


def test_type_comes_from_first_occurrence() -> None:
    fields = analyze_field_structure([{"x": None}, {"x": "later"}])

    assert fields["x"].type == "null"
    assert fields["x"].sample_values == [None, "later"]


def test_non_object_records_are_skipped() -> None:
    assert analyze_field_structure(["text", 3, None, []]) == {}


def test_json_type_names() -> None:
    assert json_type_name(True) == "boolean"
    assert json_type_name(1.5) == "number"
    assert json_type_name({}) == "object"
    assert json_type_name(None) == "null"
    assert json_type_name([1]) == "array"


def test_discovery_order_does_not_change_paths() -> None:
    first = {"a": {"b": 1}}
    second = {"a": {"b": 2, "c": 3}}

    forward = analyze_field_structure([first, second])
    backward = analyze_field_structure([second, first])

    assert set(forward) == set(backward) == {"a", "a.b", "a.c"}
    assert forward["a"].is_nested is True
    assert forward["a.b"].sample_values == [1, 2]
    assert forward["a.c"].sample_values == [3]
    assert sorted(backward["a.b"].sample_values) == [1, 2]
