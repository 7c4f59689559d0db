"""JSON writer."""

from ..models import SerializationError
from ..value import Value, to_pretty_json


def write_json(value: Value) -> str:
    """Pretty-print a value as indented JSON.

    Raises:
        SerializationError: If the value is nested too deeply to encode
    """
    try:
        return to_pretty_json(value)
    except RecursionError as e:
        raise SerializationError("Value is nested too deeply for JSON") from e


__all__ = ["write_json"]
