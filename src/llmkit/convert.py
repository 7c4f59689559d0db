"""Conversion orchestrator: strip fences, detect, serialize."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from .detection import detect_format
from .fences import strip_markdown_fences
from .models import (
    DEFAULT_TARGETS,
    Capabilities,
    ConvertOptions,
    DetectedFormat,
    TargetSpec,
)
from .value import to_compact_json, to_pretty_json
from .writers import convert_value_to_formats

log = logging.getLogger(__name__)


def split_target_list(raw: str) -> List[str]:
    """Split a comma-separated target list, dropping blank entries.

    >>> split_target_list("json, yaml,,")
    ['json', 'yaml']
    """
    return [part.strip() for part in raw.split(",") if part.strip()]


def parse_targets(names: Optional[Iterable[str]]) -> List[TargetSpec]:
    """Resolve requested target names; None means every known target."""
    if names is None:
        return list(DEFAULT_TARGETS)
    return [TargetSpec.parse(name) for name in names]


def _passthrough_result(original: str) -> Dict[str, Any]:
    return {
        "Format": DetectedFormat.UNKNOWN.value,
        "Original": original,
        "Beautified": original,
        "normal": original,
    }


def _empty_result() -> Dict[str, Any]:
    return {
        "Format": DetectedFormat.UNKNOWN.value,
        "Original": "",
        "Beautified": "",
        "normal": "",
    }


def convert_map(
    data: bytes | str,
    targets: Optional[Iterable[str]] = None,
    allow_permissive: bool = False,
    max_bytes: Optional[int] = None,
    *,
    capabilities: Capabilities | None = None,
) -> Dict[str, Any]:
    """Detect the format of ``data`` and convert it to the requested targets.

    Args:
        data: Raw input; str is encoded as UTF-8
        targets: Target names (case-insensitive, ``md`` is an alias for
            ``markdown_table``); None requests every known target
        allow_permissive: Reserved flag passed through to detection
        max_bytes: Truncate the input to this many bytes before decoding
        capabilities: Optional formats available (default: all)

    Returns:
        Dict with ``Format``, ``Original``, ``Beautified`` and ``normal``
        plus one entry per requested target. Empty input yields only the
        four fixed keys. Undetectable input is echoed into the three text
        fields with no target entries.
    """
    options = ConvertOptions(
        targets=list(targets) if targets is not None else None,
        allow_permissive=allow_permissive,
        max_bytes=max_bytes,
    )
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    if options.max_bytes is not None and len(raw) > options.max_bytes:
        raw = raw[: options.max_bytes]

    original = strip_markdown_fences(raw.decode("utf-8", errors="replace"))
    if not original.strip():
        return _empty_result()

    detection = detect_format(original, options.allow_permissive, capabilities)
    if detection is None:
        return _passthrough_result(original)

    log.debug("Detected %s", detection.format.value)
    try:
        normal = to_compact_json(detection.value)
    except RecursionError:
        log.debug("Value too deeply nested to render, echoing input")
        return _passthrough_result(original)
    try:
        beautified = to_pretty_json(detection.value)
    except RecursionError:
        beautified = normal

    result: Dict[str, Any] = {
        "Format": detection.format.value,
        "Original": original,
        "Beautified": beautified,
        "normal": normal,
    }
    result.update(
        convert_value_to_formats(
            detection.value, parse_targets(options.targets), capabilities
        )
    )
    return result


__all__ = ["convert_map", "parse_targets", "split_target_list"]
