"""Source format detection.

Detection is an ordered cascade of trial parses. Each stage is a pure
function ``text -> Value`` that raises ``ValueError`` when the text is not in
its format; the first stage that succeeds decides the format.

Order:
    1. JSON            (whole document)
    2. NDJSON          (multi-line only; unparseable lines skipped)
    3. YAML            (capability ``yaml``)
    4. TOML            (capability ``toml``)
    5. CSV             (capability ``csv``; text must contain "," and "\\n")
    6. Markdown table

The order is load-bearing: plain prose is a valid YAML scalar, so YAML
catches most text before the later stages run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .adapters import (
    csv_to_records,
    loads_json,
    markdown_table_to_records,
    ndjson_to_values,
    toml_to_value,
    yaml_to_value,
)
from .adapters.lines import split_lines
from .models import Capabilities, DetectedFormat
from .value import Value

log = logging.getLogger(__name__)

Stage = Callable[[str], Value]


@dataclass(frozen=True)
class Detection:
    """Successful detection: the parsed value and its source format."""

    value: Value
    format: DetectedFormat


def _detect_ndjson(text: str) -> Value:
    if len(split_lines(text)) <= 1:
        raise ValueError("NDJSON needs more than one line")
    values = ndjson_to_values(text)
    if not values:
        raise ValueError("No line is valid JSON")
    return values


def _detect_csv(text: str) -> Value:
    if "," not in text or "\n" not in text:
        raise ValueError("No comma or newline, not CSV")
    return csv_to_records(text)


CASCADE: tuple[tuple[DetectedFormat, Stage, Optional[str]], ...] = (
    (DetectedFormat.JSON, loads_json, None),
    (DetectedFormat.NDJSON, _detect_ndjson, None),
    (DetectedFormat.YAML, yaml_to_value, "yaml"),
    (DetectedFormat.TOML, toml_to_value, "toml"),
    (DetectedFormat.CSV, _detect_csv, "csv"),
    (DetectedFormat.MARKDOWN_TABLE, markdown_table_to_records, None),
)


def detect_format(
    text: str,
    allow_permissive: bool = False,
    capabilities: Capabilities | None = None,
) -> Detection | None:
    """Identify the format of ``text`` and parse it.

    Args:
        text: Cleaned input (already truncated and fence-stripped)
        allow_permissive: Reserved for lenient parsing; does not change
            the cascade
        capabilities: Optional formats available (default: all)

    Returns:
        Detection for the first stage that parses the text, or None when
        no format is recognised
    """
    capabilities = capabilities or Capabilities()

    for fmt, stage, capability in CASCADE:
        if capability and not getattr(capabilities, capability):
            continue
        try:
            value = stage(text)
        except ValueError as e:
            log.debug("Not %s: %s", fmt.value, e)
            continue
        return Detection(value=value, format=fmt)

    log.debug("No format recognised (permissive=%s)", allow_permissive)
    return None


__all__ = ["CASCADE", "Detection", "detect_format"]
