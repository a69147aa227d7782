"""Comparator capability and example ordering policies.

A comparator is any callable ``cmp(a, b) -> bool`` answering "must *a* be
ordered after *b*?". ``True`` makes the sort exchange two neighbours, so
returning ``False`` for ties keeps the sort stable. Policies must form a
strict weak ordering for the result order to be defined.

The named policies below are plain functions wrapped in
:class:`ComparatorPolicy`, which adds a name, a description and the leaf
types the policy understands. Each is a pure function of its two
arguments.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

T = TypeVar("T")

Comparator = Callable[[T, T], bool]


@dataclass(frozen=True)
class ComparatorPolicy:
    """A named comparator with the leaf types it can order.

    An empty *leaf_types* means any mutually comparable type.
    """

    name: str
    func: Callable[[Any, Any], bool]
    description: str
    leaf_types: tuple[type, ...] = ()

    def __call__(self, a: Any, b: Any) -> bool:
        return self.func(a, b)

    def accepts(self, tp: type) -> bool:
        """Whether this policy can order leaves of type *tp*."""
        if not self.leaf_types or tp is object:
            return True
        return issubclass(tp, self.leaf_types)


# --- Natural order ---


def greater(a: Any, b: Any) -> bool:
    """Natural greater-than: larger values move later."""
    return a > b


def less(a: Any, b: Any) -> bool:
    """Natural less-than: smaller values move later."""
    return a < b


# --- Integer policies ---


def odd_first(a: int, b: int) -> bool:
    """Odd numbers before even numbers, ascending within each group."""
    a_odd, b_odd = a % 2 != 0, b % 2 != 0
    if a_odd != b_odd:
        return b_odd
    return a > b


def even_first(a: int, b: int) -> bool:
    """Even numbers before odd numbers, ascending within each group."""
    a_even, b_even = a % 2 == 0, b % 2 == 0
    if a_even != b_even:
        return b_even
    return a > b


def divisible_first(divisor: int) -> Callable[[int, int], bool]:
    """Multiples of *divisor* first, ascending within each group."""
    if divisor == 0:
        msg = "divisor must be non-zero"
        raise ValueError(msg)

    def compare(a: int, b: int) -> bool:
        a_div, b_div = a % divisor == 0, b % divisor == 0
        if a_div != b_div:
            return b_div
        return a > b

    return compare


def digit_sum(n: int) -> int:
    """Sum of the decimal digits of ``abs(n)``."""
    n = abs(n)
    total = 0
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit
    return total


def by_digit_sum(a: int, b: int) -> bool:
    """Ascending by sum of decimal digits."""
    return digit_sum(a) > digit_sum(b)


def proximity_to(target: float) -> Callable[[float, float], bool]:
    """Values closest to *target* first; farther values move later."""

    def compare(a: float, b: float) -> bool:
        return abs(a - target) > abs(b - target)

    return compare


# --- String policies ---


def alpha_position(word: str) -> int:
    """Sum of alphabet positions (``a``=1 … ``z``=26); other characters count 0."""
    return sum(ord(c) - ord("a") + 1 for c in word.lower() if "a" <= c <= "z")


def by_alpha_position(a: str, b: str) -> bool:
    """Ascending by sum of alphabet positions."""
    return alpha_position(a) > alpha_position(b)


# --- Registry ---

DEFAULT_COMPARATOR = ComparatorPolicy(
    name="greater",
    func=greater,
    description="Natural order; larger values move after smaller ones.",
)

_NUMBERS: tuple[type, ...] = (int, float)


def _fixed(policy: ComparatorPolicy) -> Callable[..., ComparatorPolicy]:
    def factory(**_params: Any) -> ComparatorPolicy:
        return policy

    return factory


def _divisible(*, divisor: int = 3, **_params: Any) -> ComparatorPolicy:
    return ComparatorPolicy(
        name="divisible_first",
        func=divisible_first(divisor),
        description=f"Multiples of {divisor} first, ascending within each group.",
        leaf_types=(int,),
    )


def _proximity(*, target: float = 10, **_params: Any) -> ComparatorPolicy:
    return ComparatorPolicy(
        name="proximity",
        func=proximity_to(target),
        description=f"Closest to {target} first.",
        leaf_types=_NUMBERS,
    )


_DESCENDING = ComparatorPolicy(
    name="less",
    func=less,
    description="Reverse natural order; smaller values move after larger ones.",
)

_FACTORIES: dict[str, Callable[..., ComparatorPolicy]] = {
    "greater": _fixed(DEFAULT_COMPARATOR),
    "ascending": _fixed(DEFAULT_COMPARATOR),
    "less": _fixed(_DESCENDING),
    "descending": _fixed(_DESCENDING),
    "odd_first": _fixed(
        ComparatorPolicy(
            name="odd_first",
            func=odd_first,
            description="Odd numbers first, ascending within each group.",
            leaf_types=(int,),
        )
    ),
    "even_first": _fixed(
        ComparatorPolicy(
            name="even_first",
            func=even_first,
            description="Even numbers first, ascending within each group.",
            leaf_types=(int,),
        )
    ),
    "divisible_first": _divisible,
    "digit_sum": _fixed(
        ComparatorPolicy(
            name="digit_sum",
            func=by_digit_sum,
            description="Ascending by sum of decimal digits.",
            leaf_types=(int,),
        )
    ),
    "alpha_position": _fixed(
        ComparatorPolicy(
            name="alpha_position",
            func=by_alpha_position,
            description="Ascending by sum of alphabet positions (a=1 ... z=26).",
            leaf_types=(str,),
        )
    ),
    "proximity": _proximity,
}

ALIASES: dict[str, str] = {"ascending": "greater", "descending": "less"}


def comparator_names() -> list[str]:
    """Registered policy names, aliases excluded."""
    return [name for name in _FACTORIES if name not in ALIASES]


def get_comparator(name: str, **params: Any) -> ComparatorPolicy:
    """Resolve a registered policy by *name*.

    *params* feed parameterized policies (``divisor`` for
    ``divisible_first``, ``target`` for ``proximity``) and are ignored by
    the others. Unknown names raise ``KeyError``.
    """
    factory = _FACTORIES.get(name)
    if factory is None:
        msg = f"Unknown comparator '{name}'. Known: {', '.join(sorted(_FACTORIES))}"
        raise KeyError(msg)
    return factory(**params)
