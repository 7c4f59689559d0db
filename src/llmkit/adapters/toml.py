"""TOML adapter: a TOML document to the value model."""

import tomllib

from ..value import Value, to_value


def toml_to_value(text: str) -> Value:
    """Parse a TOML document. Date and time values become ISO strings.

    Raises:
        ValueError: If the text is not valid TOML
    """
    try:
        return to_value(tomllib.loads(text))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"TOML parsing error: {e}") from e
    except RecursionError as e:
        raise ValueError("TOML document is nested too deeply") from e


__all__ = ["toml_to_value"]
