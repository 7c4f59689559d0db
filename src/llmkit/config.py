"""Capability configuration.

Resolution order:
    1. Explicit ``disable`` argument
    2. ``$LLMKIT_DISABLE`` environment variable (comma-separated)
    3. Everything enabled

The environment is read fresh on every call; callers resolve capabilities
once and pass them down rather than re-reading per conversion.
"""

import os
from typing import Iterable, Optional

from .models import Capabilities

DISABLE_ENV = "LLMKIT_DISABLE"

OPTIONAL_FORMATS = tuple(Capabilities.model_fields)


def _split(raw: str) -> list[str]:
    return [part.strip().lower() for part in raw.split(",") if part.strip()]


def load_capabilities(disable: Optional[Iterable[str]] = None) -> Capabilities:
    """Build the capability set for this process.

    Args:
        disable: Format names to switch off (overrides $LLMKIT_DISABLE)

    Returns:
        Capabilities with the named formats disabled

    Raises:
        ValueError: If a name is not an optional format
    """
    if disable is None:
        names = _split(os.environ.get(DISABLE_ENV, ""))
    else:
        names = [name.strip().lower() for name in disable if name.strip()]

    unknown = sorted(set(names) - set(OPTIONAL_FORMATS))
    if unknown:
        raise ValueError(
            f"Unknown format(s) {', '.join(unknown)}; "
            f"expected one of: {', '.join(OPTIONAL_FORMATS)}"
        )

    return Capabilities(**{name: False for name in names})


__all__ = ["DISABLE_ENV", "OPTIONAL_FORMATS", "load_capabilities"]
