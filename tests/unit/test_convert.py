"""Unit tests for the conversion orchestrator."""

import json

import pytest

from llmkit import convert_map, split_target_list
from llmkit.models import Capabilities

FIXED_KEYS = {"Format", "Original", "Beautified", "normal"}


@pytest.mark.parametrize("data", [b"", b"   \n\t", b"```\n\n```", "``"])
def test_empty_input_has_only_fixed_keys(data):
    result = convert_map(data, ["json", "yaml"])
    assert result == {
        "Format": "unknown",
        "Original": "",
        "Beautified": "",
        "normal": "",
    }


def test_json_input():
    result = convert_map(b'{"a":1,"b":"x"}')
    assert result["Format"] == "json"
    assert result["Original"] == '{"a":1,"b":"x"}'
    assert result["normal"] == '{"a":1,"b":"x"}'
    assert "\n" in result["Beautified"]


def test_default_targets_all_present():
    result = convert_map(b'{"a": 1}')
    assert set(result) == FIXED_KEYS | {
        "json",
        "yaml",
        "toml",
        "csv",
        "markdown_table",
    }
    assert result["markdown_table"] is None


def test_ndjson_input():
    result = convert_map(b'{"id": 1}\n{"id": 2}\n')
    assert result["Format"] == "ndjson"
    assert json.loads(result["normal"]) == [{"id": 1}, {"id": 2}]


def test_markdown_table_input():
    result = convert_map(b"|a|b|\n|--|--|\n|1|x|\n")
    assert result["Format"] == "markdown_table"
    assert json.loads(result["normal"]) == [{"a": "1", "b": "x"}]
    assert result["csv"] == "a,b\n1,x\n"


def test_csv_input_round_trips_to_csv(people_csv):
    result = convert_map(people_csv, ["csv"])
    assert result["Format"] == "csv"
    assert result["csv"] == people_csv


def test_yaml_input_to_toml():
    result = convert_map(b"name: demo\nitems:\n  - 1\n  - 2\n", ["toml", "csv"])
    assert result["Format"] == "yaml"
    assert 'name = "demo"' in result["toml"]
    assert result["csv"] is None


def test_fenced_input_is_unwrapped():
    result = convert_map('Sure!\n```json\n{"a": 1}\n```\nDone.', ["json"])
    assert result["Format"] == "json"
    assert result["Original"] == '{"a": 1}'


def test_only_requested_targets():
    result = convert_map(b'{"a": 1}', ["json"])
    assert set(result) == FIXED_KEYS | {"json"}


def test_target_names_are_case_insensitive_with_alias():
    result = convert_map(b'{"a": 1}', ["JSON", "MD"])
    assert set(result) == FIXED_KEYS | {"json", "markdown_table"}


def test_unknown_target_is_null():
    result = convert_map(b'{"a": 1}', ["foo"])
    assert "foo" in result
    assert result["foo"] is None


def test_empty_target_list_adds_nothing():
    result = convert_map(b'{"a": 1}', [])
    assert set(result) == FIXED_KEYS


def test_undetectable_input_is_echoed():
    result = convert_map(b"{broken", ["json"])
    assert result == {
        "Format": "unknown",
        "Original": "{broken",
        "Beautified": "{broken",
        "normal": "{broken",
    }


def test_json_normal_output_is_stable():
    first = convert_map(b'{ "b": [1, 2.5, null],  "a": {"c": "\\u00e9"} }')
    second = convert_map(first["normal"].encode("utf-8"))
    assert second["Format"] == "json"
    assert second["normal"] == first["normal"]


def test_truncation_happens_before_detection():
    result = convert_map(b'{"a":1}{"b":2}', max_bytes=7)
    assert result["Format"] == "json"
    assert result["Original"] == '{"a":1}'


def test_truncation_can_break_detection():
    result = convert_map(b'{"a": [1, 2, 3]}', ["json"], max_bytes=5)
    assert result["Format"] == "unknown"
    assert result["Original"] == '{"a":'
    assert "json" not in result


def test_truncation_inside_multibyte_character_is_lossy():
    result = convert_map("é".encode("utf-8"), max_bytes=1)
    assert result["Original"] == "\ufffd"


def test_max_bytes_larger_than_input_is_noop():
    result = convert_map(b'{"a": 1}', max_bytes=1000)
    assert result["Format"] == "json"


def test_capabilities_are_injected():
    result = convert_map(
        b"key: value", ["yaml"], capabilities=Capabilities(yaml=False)
    )
    assert result["Format"] == "unknown"
    assert "yaml" not in result


def test_split_target_list():
    assert split_target_list(" json, yaml,,csv ") == ["json", "yaml", "csv"]
    assert split_target_list("") == []


def test_deeply_nested_toml_like_input_is_unknown():
    text = "a = " + "[" * 3000 + "\nx: 1\n"
    result = convert_map(text.encode(), ["json"])
    assert result["Format"] == "unknown"
    assert result["normal"] == text
    assert "json" not in result


def test_deeply_nested_json_degrades_yaml_only():
    result = convert_map(("[" * 400 + "]" * 400).encode())
    assert result["Format"] == "json"
    assert result["yaml"] is None
    assert result["toml"] is None
    assert result["normal"] == "[" * 400 + "]" * 400


def test_scalar_yaml_target_is_plain_text():
    assert convert_map(b'"hi"', ["yaml"])["yaml"] == "hi\n"


def test_pretty_rendering_falls_back_to_compact(monkeypatch):
    def too_deep(value):
        raise RecursionError("maximum recursion depth exceeded")

    monkeypatch.setattr("llmkit.convert.to_pretty_json", too_deep)
    result = convert_map(b'{"a": [1, 2]}', [])
    assert result["Format"] == "json"
    assert result["Beautified"] == result["normal"] == '{"a":[1,2]}'
