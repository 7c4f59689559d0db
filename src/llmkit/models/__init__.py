"""Models shared across the conversion pipeline."""

from .errors import ConversionError, SerializationError
from .formats import (
    DEFAULT_TARGETS,
    DetectedFormat,
    TargetFormat,
    TargetSpec,
)
from .options import Capabilities, ConvertOptions

__all__ = [
    "Capabilities",
    "ConversionError",
    "ConvertOptions",
    "DEFAULT_TARGETS",
    "DetectedFormat",
    "SerializationError",
    "TargetFormat",
    "TargetSpec",
]
