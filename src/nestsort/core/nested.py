"""Recursive sort of nested structures down to their scalar leaves.

The recursion follows ``element_type``: a level whose elements are
sequences is descended into, a level whose elements are scalars is sorted.
Sequences of sequences are never reordered as wholes, and the same
comparator is handed unchanged to every leaf sequence.
"""

from __future__ import annotations

import logging
from typing import Any

from nestsort.core.sort import SortStats, sort
from nestsort.domain.classify import classify, is_sequence_type, leaf_type, structural_depth
from nestsort.domain.comparators import DEFAULT_COMPARATOR, Comparator, ComparatorPolicy
from nestsort.domain.errors import ComparatorTypeError
from nestsort.domain.sequences import SequenceBase
from nestsort.domain.structure import build
from nestsort.domain.types import Category

logger = logging.getLogger(__name__)


def check_comparator(cmp: Comparator[Any], leaf: type) -> None:
    """Reject a policy that declares it cannot order *leaf* values.

    Plain callables carry no declaration and always pass.
    """
    if isinstance(cmp, ComparatorPolicy) and not cmp.accepts(leaf):
        accepted = ", ".join(tp.__name__ for tp in cmp.leaf_types)
        msg = f"Comparator '{cmp.name}' orders {accepted} values, not {leaf.__name__}"
        raise ComparatorTypeError(msg)


def _sort_level(value: SequenceBase[Any], cmp: Comparator[Any], stats: SortStats | None) -> None:
    if classify(type(value).element_type) is Category.SEQUENCE:
        for child in value:
            _sort_level(child, cmp, stats)
    else:
        sort(value, cmp, stats=stats)


def sort_nested(
    value: SequenceBase[Any] | list[Any],
    cmp: Comparator[Any] | None = None,
    *,
    stats: SortStats | None = None,
) -> None:
    """Sort every leaf sequence of *value* in place.

    A plain nested ``list`` is wrapped once with non-copying leaf views,
    so the caller's innermost lists are the ones reordered.

    Raises:
        TypeError: *value* is not a sequence type.
        ComparatorTypeError: *cmp* is a policy that cannot order the
            structure's leaf type. Nothing is mutated in that case.
    """
    if isinstance(value, list):
        value = build(value, copy=False)
    structure = type(value)
    if not is_sequence_type(structure):
        msg = f"Cannot sort {structure.__name__}: not a sequence type"
        raise TypeError(msg)

    compare = cmp if cmp is not None else DEFAULT_COMPARATOR
    check_comparator(compare, leaf_type(structure))
    logger.debug(
        "Nested sort of %s (depth %d)",
        structure.__name__,
        structural_depth(structure),
    )
    _sort_level(value, compare, stats)
