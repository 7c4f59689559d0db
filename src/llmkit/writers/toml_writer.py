"""TOML writer."""

import tomli_w

from ..models import SerializationError
from ..value import Value


def write_toml(value: Value) -> str:
    """Render a value as a TOML document.

    Raises:
        SerializationError: If the value is not a mapping, holds something
            TOML cannot express (null, mixed nesting), or is nested too deeply
    """
    if not isinstance(value, dict):
        raise SerializationError("TOML requires a top-level table")
    try:
        return tomli_w.dumps(value)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"TOML cannot represent value: {e}") from e
    except RecursionError as e:
        raise SerializationError("Value is nested too deeply for TOML") from e


__all__ = ["write_toml"]
