"""NDJSON adapter: newline-delimited JSON documents to a list of values."""

import json

from ..value import Value, to_value
from .lines import split_lines


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def loads_json(text: str) -> Value:
    """Strict JSON parse (NaN and Infinity are rejected).

    Raises:
        ValueError: If the text is not a single JSON document
    """
    try:
        return to_value(json.loads(text, parse_constant=_reject_constant))
    except RecursionError as e:
        raise ValueError("JSON document is nested too deeply") from e


def ndjson_to_values(text: str) -> list[Value]:
    """Parse each line independently, skipping lines that are not JSON.

    Returns the parsed values in line order; an empty list means no line
    was valid JSON.
    """
    values = []
    for line in split_lines(text):
        try:
            values.append(loads_json(line))
        except ValueError:
            continue
    return values


__all__ = ["loads_json", "ndjson_to_values"]
