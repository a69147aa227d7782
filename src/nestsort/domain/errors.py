"""Precondition errors raised while building or sorting structures.

All of these derive from built-in ``ValueError`` / ``TypeError`` so callers
that only know the built-ins still catch them.
"""

from __future__ import annotations


class StructureError(ValueError):
    """A nested structure cannot be given a single static type."""

    def __init__(self, message: str, *, path: str = "$") -> None:
        super().__init__(message)
        self.path = path


class RaggedDepthError(StructureError):
    """Sibling branches wrap their leaves in a different number of levels."""


class RaggedLengthError(StructureError):
    """Sequences on the same level differ in length where a shape is required."""


class MixedLeafTypeError(StructureError):
    """Leaves of one structure do not share a single scalar type."""


class ComparatorTypeError(TypeError):
    """A comparator policy cannot order the structure's leaf type."""
