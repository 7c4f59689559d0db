"""Writers that serialize the pivot value into target formats."""

import logging
from typing import Dict, Iterable, Optional

from ..models import Capabilities, SerializationError, TargetFormat, TargetSpec
from ..value import Value
from .csv_writer import write_csv
from .json_writer import write_json
from .toml_writer import write_toml
from .yaml_writer import write_yaml

log = logging.getLogger(__name__)

WRITERS = {
    TargetFormat.JSON: write_json,
    TargetFormat.YAML: write_yaml,
    TargetFormat.TOML: write_toml,
    TargetFormat.CSV: write_csv,
}


def _is_available(fmt: TargetFormat, capabilities: Capabilities) -> bool:
    return getattr(capabilities, fmt.value, True)


def serialize(
    value: Value,
    target: TargetSpec,
    capabilities: Capabilities | None = None,
) -> Optional[str]:
    """Serialize to a single target, or None when it is unavailable.

    Opaque targets, Markdown tables, disabled capabilities and values the
    target cannot represent all yield None.
    """
    capabilities = capabilities or Capabilities()
    if target.is_opaque:
        log.debug("Target %s is not a known format", target.name)
        return None
    writer = WRITERS.get(target.format)
    if writer is None:
        return None
    if not _is_available(target.format, capabilities):
        log.debug("Target %s disabled", target.name)
        return None
    try:
        return writer(value)
    except SerializationError as e:
        log.debug("Target %s unavailable: %s", target.name, e)
        return None


def convert_value_to_formats(
    value: Value,
    targets: Iterable[TargetSpec],
    capabilities: Capabilities | None = None,
) -> Dict[str, Optional[str]]:
    """Serialize a value to every requested target.

    Returns:
        Mapping of target name to text (None when unavailable), in the
        order the targets were requested
    """
    capabilities = capabilities or Capabilities()
    return {
        target.name: serialize(value, target, capabilities) for target in targets
    }


__all__ = [
    "WRITERS",
    "convert_value_to_formats",
    "serialize",
    "write_csv",
    "write_json",
    "write_toml",
    "write_yaml",
]
