"""YAML writer."""

import io

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..models import SerializationError
from ..value import Value

_DOCUMENT_END = "...\n"


def write_yaml(value: Value, indent: int = 2) -> str:
    """Render a value as block-style YAML.

    Args:
        value: Pivot value
        indent: Mapping indentation (default: 2)

    Raises:
        SerializationError: If the YAML emitter rejects the value or it is
            nested too deeply

    Notes:
        - A top-level scalar is written without the "..." document end
          marker the emitter adds after it
    """
    yaml = YAML(typ="safe", pure=True)
    yaml.default_flow_style = False
    yaml.indent(mapping=indent, sequence=indent + 2, offset=indent)
    yaml.allow_unicode = True

    stream = io.StringIO()
    try:
        yaml.dump(value, stream)
    except YAMLError as e:
        raise SerializationError(f"YAML cannot represent value: {e}") from e
    except RecursionError as e:
        raise SerializationError("Value is nested too deeply for YAML") from e

    text = stream.getvalue()
    if text.endswith("\n" + _DOCUMENT_END):
        text = text[: -len(_DOCUMENT_END)]
    return text


__all__ = ["write_yaml"]
