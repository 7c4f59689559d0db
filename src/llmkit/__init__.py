"""llmkit: detect structured text (JSON, NDJSON, YAML, TOML, CSV, Markdown
tables) and convert it to other formats."""

from .convert import convert_map, parse_targets, split_target_list
from .detection import Detection, detect_format
from .fences import strip_markdown_fences
from .models import Capabilities, DetectedFormat, TargetFormat, TargetSpec
from .writers import convert_value_to_formats

__all__ = [
    "Capabilities",
    "Detection",
    "DetectedFormat",
    "TargetFormat",
    "TargetSpec",
    "__version__",
    "convert_map",
    "convert_value_to_formats",
    "detect_format",
    "parse_targets",
    "split_target_list",
    "strip_markdown_fences",
]

__version__ = "0.1.0"
