"""Pivot value model shared by every reader and writer.

Values are plain JSON-compatible Python objects: ``None``, ``bool``, ``int``,
``float``, ``str``, ``list`` and ``dict`` with string keys. Readers hand their
raw parser output to :func:`to_value` so writers never see library-specific
types (ruamel mappings, TOML datetimes, tuples).
"""

from __future__ import annotations

import json
import math
from datetime import date, datetime, time
from typing import Any, Dict, List, Mapping, Union

Value = Union[None, bool, int, float, str, List["Value"], Dict[str, "Value"]]


def _key_text(key: Any) -> str:
    """Render a mapping key the way a JSON encoder would."""
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, (bool, int, float)):
        return json.dumps(key)
    if isinstance(key, (datetime, date, time)):
        return key.isoformat()
    return str(key)


def to_value(obj: Any) -> Value:
    """Normalize parser output into the pivot value model.

    - mappings become dicts with string keys
    - lists and tuples become lists
    - date/time objects become ISO-8601 strings
    - non-finite floats become ``None``
    - anything else outside the model is rendered with ``str()``
    """
    if obj is None or isinstance(obj, (bool, str)):
        return obj
    if isinstance(obj, int):
        return int(obj)
    if isinstance(obj, float):
        return float(obj) if math.isfinite(obj) else None
    if isinstance(obj, Mapping):
        return {_key_text(k): to_value(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_value(item) for item in obj]
    if isinstance(obj, (datetime, date, time)):
        return obj.isoformat()
    return str(obj)


def is_value(obj: Any) -> bool:
    """Check whether ``obj`` already conforms to the value model."""
    if obj is None or type(obj) in (bool, int, str):
        return True
    if type(obj) is float:
        return math.isfinite(obj)
    if type(obj) is list:
        return all(is_value(item) for item in obj)
    if type(obj) is dict:
        return all(
            isinstance(k, str) and is_value(v) for k, v in obj.items()
        )
    return False


def to_pretty_json(value: Value) -> str:
    """Multi-line, two-space indented JSON rendering."""
    return json.dumps(value, indent=2, ensure_ascii=False)


def to_compact_json(value: Value) -> str:
    """Single-line JSON rendering without insignificant whitespace."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


__all__ = [
    "Value",
    "is_value",
    "to_compact_json",
    "to_pretty_json",
    "to_value",
]
