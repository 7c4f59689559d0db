"""Exceptions raised inside the conversion layer."""


class ConversionError(Exception):
    """Base error for llmkit conversions."""

    pass


class SerializationError(ConversionError):
    """A value cannot be represented in the requested target format."""

    pass


__all__ = ["ConversionError", "SerializationError"]
