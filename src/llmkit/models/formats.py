"""Format tags for detected sources and requested targets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DetectedFormat(str, Enum):
    """Source format recognised by the detection cascade."""

    UNKNOWN = "unknown"
    JSON = "json"
    NDJSON = "ndjson"
    YAML = "yaml"
    TOML = "toml"
    CSV = "csv"
    MARKDOWN_TABLE = "markdown_table"


class TargetFormat(str, Enum):
    """Serializations a caller can request."""

    JSON = "json"
    YAML = "yaml"
    TOML = "toml"
    CSV = "csv"
    MARKDOWN_TABLE = "markdown_table"


TARGET_ALIASES = {"md": TargetFormat.MARKDOWN_TABLE}


@dataclass(frozen=True)
class TargetSpec:
    """Requested target: a known format, or an opaque passthrough name.

    Attributes:
        name: Key used in the conversion result
        format: Known target format, or None for unrecognised names
    """

    name: str
    format: Optional[TargetFormat] = None

    @property
    def is_opaque(self) -> bool:
        return self.format is None

    @classmethod
    def parse(cls, raw: str) -> "TargetSpec":
        """Resolve a requested name, case-insensitively, with aliases.

        Unrecognised names are kept exactly as requested.
        """
        key = raw.strip().lower()
        fmt = TARGET_ALIASES.get(key)
        if fmt is None:
            try:
                fmt = TargetFormat(key)
            except ValueError:
                return cls(name=raw)
        return cls(name=fmt.value, format=fmt)


DEFAULT_TARGETS = tuple(TargetSpec(name=f.value, format=f) for f in TargetFormat)


__all__ = [
    "DEFAULT_TARGETS",
    "DetectedFormat",
    "TARGET_ALIASES",
    "TargetFormat",
    "TargetSpec",
]
