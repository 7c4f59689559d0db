"""Pydantic models for conversion options and format capabilities."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Capabilities(BaseModel):
    """Optional format support, fixed at configuration time.

    A disabled format is skipped by the detection cascade and serializes
    to None as a target.
    """

    model_config = ConfigDict(frozen=True)

    yaml: bool = True
    toml: bool = True
    csv: bool = True

    def disabled(self) -> List[str]:
        """Names of the formats that are switched off."""

        return [name for name, enabled in self.model_dump().items() if not enabled]


class ConvertOptions(BaseModel):
    """Parameters accepted by the conversion boundary."""

    model_config = ConfigDict(frozen=True)

    targets: List[str] | None = None
    allow_permissive: bool = False
    max_bytes: int | None = Field(default=None, ge=0)


__all__ = ["Capabilities", "ConvertOptions"]
