"""Structural categories and sequence representations.

Every type is either a Scalar (a leaf with no substructure) or a
Sequence (an ordered homogeneous container of one element type).
"""

from __future__ import annotations

from enum import StrEnum


class Category(StrEnum):
    """Structural category of a type, fixed by the type itself."""

    SCALAR = "scalar"
    SEQUENCE = "sequence"


class Representation(StrEnum):
    """Concrete container layouts a structure can be built with."""

    ARRAY = "array"
    LINKED = "linked"
    FIXED = "fixed"
