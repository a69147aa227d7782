"""Single-level, comparator-driven, adjacent-exchange sort.

Bubble sort expressed purely in terms of forward positions and adjacent
exchange, so it runs unchanged on contiguous, fixed-size and singly-linked
sequences. At most ``n - 1`` passes run, and a pass without any exchange
ends the sort early.
"""

from __future__ import annotations

import logging
from collections.abc import MutableSequence
from dataclasses import asdict, dataclass
from typing import Any

from nestsort.domain.classify import is_sequence_type
from nestsort.domain.comparators import DEFAULT_COMPARATOR, Comparator
from nestsort.domain.sequences import ArraySequence, SequenceBase

logger = logging.getLogger(__name__)


@dataclass
class SortStats:
    """Work counters, accumulated across every sequence a call sorts."""

    sequences: int = 0
    passes: int = 0
    comparisons: int = 0
    swaps: int = 0

    def merge(self, other: SortStats) -> None:
        self.sequences += other.sequences
        self.passes += other.passes
        self.comparisons += other.comparisons
        self.swaps += other.swaps

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


def _as_sequence(seq: Any) -> SequenceBase[Any]:
    if is_sequence_type(type(seq)):
        return seq  # type: ignore[no-any-return]
    if isinstance(seq, MutableSequence):
        return ArraySequence.view(seq)
    msg = f"Cannot sort {type(seq).__name__}: not a sequence"
    raise TypeError(msg)


def sort(
    seq: SequenceBase[Any] | MutableSequence[Any],
    cmp: Comparator[Any] | None = None,
    *,
    stats: SortStats | None = None,
) -> None:
    """Sort one level of *seq* in place.

    ``cmp(a, b)`` returning True means *a* must come after *b*; the two
    neighbours are then exchanged. Ties never exchange, so the sort is
    stable for comparators that return False on equal-ranked elements.
    Plain mutable Python sequences are sorted through a non-copying view.

    Args:
        seq: The sequence to reorder.
        cmp: Ordering policy; defaults to natural greater-than.
        stats: Optional accumulator for pass/comparison/exchange counts.
    """
    target = _as_sequence(seq)
    compare = cmp if cmp is not None else DEFAULT_COMPARATOR
    n = len(target)
    passes = comparisons = swaps = 0

    if n >= 2:
        for done in range(n - 1):
            passes += 1
            swapped = False
            pos = target.first()
            for _ in range(n - 1 - done):
                following = pos.next() if pos is not None else None
                if pos is None or following is None:
                    msg = f"{type(target).__name__} reports {n} elements but ends early"
                    raise TypeError(msg)
                comparisons += 1
                if compare(pos.value, following.value):
                    target.exchange(pos, following)
                    swaps += 1
                    swapped = True
                pos = following
            if not swapped:
                break

    if stats is not None:
        stats.merge(SortStats(1, passes, comparisons, swaps))
    logger.debug(
        "Sorted %s: n=%d passes=%d comparisons=%d swaps=%d",
        type(target).__name__,
        n,
        passes,
        comparisons,
        swaps,
    )
