"""nestsort — in-place sorting and printing of arbitrarily nested sequences."""

from __future__ import annotations

from nestsort.core.nested import sort_nested
from nestsort.core.printer import format_nested, print_container, print_nested
from nestsort.core.sort import SortStats, sort
from nestsort.domain.classify import classify, leaf_type, structural_depth
from nestsort.domain.comparators import Comparator, ComparatorPolicy, get_comparator
from nestsort.domain.sequences import ArraySequence, FixedSequence, LinkedSequence
from nestsort.domain.structure import build, to_builtin
from nestsort.domain.types import Category, Representation

__version__ = "0.1.0"

__all__ = [
    "ArraySequence",
    "Category",
    "Comparator",
    "ComparatorPolicy",
    "FixedSequence",
    "LinkedSequence",
    "Representation",
    "SortStats",
    "__version__",
    "build",
    "classify",
    "format_nested",
    "get_comparator",
    "leaf_type",
    "print_container",
    "print_nested",
    "sort",
    "sort_nested",
    "structural_depth",
    "to_builtin",
]
