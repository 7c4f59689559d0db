"""YAML adapter: a single YAML document to the value model."""

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..value import Value, to_value


def yaml_to_value(text: str) -> Value:
    """Parse one YAML document with the safe loader.

    Multi-document streams are rejected. Timestamps become ISO strings.

    Raises:
        ValueError: If the text is not a single valid YAML document
    """
    yaml = YAML(typ="safe", pure=True)
    try:
        return to_value(yaml.load(text))
    except YAMLError as e:
        raise ValueError(f"YAML parsing error: {e}") from e
    except RecursionError as e:
        # Self-referencing anchors cannot be represented
        raise ValueError("YAML document is recursive") from e


__all__ = ["yaml_to_value"]
