"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, nestsort.toml only holds
overrides. An empty or missing file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from nestsort.domain.comparators import ALIASES, comparator_names
from nestsort.domain.types import Representation


class SortConfig(BaseModel):
    """[sort] section."""

    model_config = {"frozen": True}

    comparator: str = "greater"
    representation: Representation = Representation.ARRAY
    strict_shape: bool = False
    divisor: int = 3
    target: float = 10

    @field_validator("comparator")
    @classmethod
    def _known_comparator(cls, value: str) -> str:
        known = {*comparator_names(), *ALIASES}
        if value not in known:
            msg = f"unknown comparator '{value}'"
            raise ValueError(msg)
        return value

    @field_validator("divisor")
    @classmethod
    def _non_zero(cls, value: int) -> int:
        if value == 0:
            msg = "divisor must be non-zero"
            raise ValueError(msg)
        return value


class PrinterConfig(BaseModel):
    """[printer] section."""

    model_config = {"frozen": True}

    indent: int = Field(default=4, ge=0)
    brackets: str = Field(default="{}", min_length=2, max_length=2)


class NestsortConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    sort: SortConfig = Field(default_factory=SortConfig)
    printer: PrinterConfig = Field(default_factory=PrinterConfig)
