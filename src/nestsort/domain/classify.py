"""Scalar / Sequence classification of types.

A type is a Sequence iff it structurally exposes an element type, forward
traversal (``first`` and ``__iter__``) and a size query (``__len__``).
Everything else is a Scalar. The answer depends only on the type, so it
is computed once per type and cached; the recursive algorithms never
inspect runtime content to decide how deep they are.
"""

from __future__ import annotations

from functools import cache

from nestsort.domain.types import Category

_TRAVERSAL_ATTRS = ("first", "__iter__", "__len__")


@cache
def classify(tp: type) -> Category:
    """Return the structural category of *tp*."""
    element_type = getattr(tp, "element_type", None)
    if not isinstance(element_type, type):
        return Category.SCALAR
    if all(callable(getattr(tp, attr, None)) for attr in _TRAVERSAL_ATTRS):
        return Category.SEQUENCE
    return Category.SCALAR


def is_sequence_type(tp: type) -> bool:
    return classify(tp) is Category.SEQUENCE


def structural_depth(tp: type) -> int:
    """Number of Sequence levels wrapping the leaf type of *tp*."""
    depth = 0
    while classify(tp) is Category.SEQUENCE:
        tp = tp.element_type  # type: ignore[attr-defined]
        depth += 1
    return depth


def leaf_type(tp: type) -> type:
    """The Scalar type reached by unwrapping every Sequence level of *tp*."""
    while classify(tp) is Category.SEQUENCE:
        tp = tp.element_type  # type: ignore[attr-defined]
    return tp
