"""Sequence representations behind one minimal traversal interface.

Every representation exposes the same small surface:

- ``element_type`` — class attribute set on specialized classes
  (``ArraySequence.of(int)``), never on the generic base.
- ``first()`` — the first position, or ``None`` for an empty sequence.
- ``position.next()`` — the following position, or ``None`` past the end.
- ``position.value`` — read/write access to the element at a position.
- ``exchange(a, b)`` — swap the elements held at two positions.
- ``__len__`` / ``__iter__``.

Indexed access is not part of the interface: ``LinkedSequence`` can only
be walked forward, and the sort in :mod:`nestsort.core.sort` works on it
unmodified.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence
from functools import cache
from typing import Any, ClassVar, Generic, Protocol, Self, TypeVar

T = TypeVar("T")


class Position(Protocol[T]):
    """A forward cursor on one element of a sequence."""

    value: T

    def next(self) -> Position[T] | None: ...


@cache
def _specialize(origin: type, element_type: type, size: int | None = None) -> type:
    """Create (once) the subclass of *origin* holding *element_type* elements."""
    label = getattr(element_type, "__name__", repr(element_type))
    name = f"{origin.__name__}[{label}]" if size is None else f"{origin.__name__}[{label}, {size}]"
    namespace: dict[str, Any] = {
        "element_type": element_type,
        "_origin": origin,
        "__module__": origin.__module__,
        "__qualname__": name,
    }
    if size is not None:
        namespace["size"] = size
    return type(name, (origin,), namespace)


class SequenceBase(Generic[T]):
    """Shared behaviour for every representation.

    Subclasses provide ``first()`` and ``__len__``. Iteration, element
    checks, exchange and specialization are implemented here in terms of
    positions only.
    """

    element_type: ClassVar[type]
    _origin: ClassVar[type]

    @classmethod
    def of(cls, element_type: type) -> type[Self]:
        """Return the specialized class whose elements are *element_type*."""
        return _specialize(getattr(cls, "_origin", cls), element_type)

    def first(self) -> Position[T] | None:
        raise NotImplementedError

    def __len__(self) -> int:
        raise NotImplementedError

    def __iter__(self) -> Iterator[T]:
        pos = self.first()
        while pos is not None:
            yield pos.value
            pos = pos.next()

    def exchange(self, a: Position[T], b: Position[T]) -> None:
        """Swap the elements at positions *a* and *b*."""
        a.value, b.value = b.value, a.value

    def _check_item(self, item: object) -> None:
        expected = getattr(type(self), "element_type", None)
        if expected is None or expected is object:
            return
        if expected is float and type(item) is int:
            return
        if not isinstance(item, expected):
            msg = (
                f"{type(self).__name__} holds {expected.__name__} elements, "
                f"got {type(item).__name__}"
            )
            raise TypeError(msg)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SequenceBase):
            return NotImplemented
        return type(self) is type(other) and list(self) == list(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


# ── Contiguous storage ───────────────────────────────────────────────


class _IndexPosition(Generic[T]):
    __slots__ = ("_index", "_items")

    def __init__(self, items: MutableSequence[T], index: int) -> None:
        self._items = items
        self._index = index

    @property
    def value(self) -> T:
        return self._items[self._index]

    @value.setter
    def value(self, new: T) -> None:
        self._items[self._index] = new

    def next(self) -> _IndexPosition[T] | None:
        following = self._index + 1
        if following < len(self._items):
            return _IndexPosition(self._items, following)
        return None


class _ContiguousSequence(SequenceBase[T]):
    """Storage backed by an indexable mutable sequence."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: MutableSequence[T] = list(items)
        for item in self._items:
            self._check_item(item)

    def first(self) -> _IndexPosition[T] | None:
        if not self._items:
            return None
        return _IndexPosition(self._items, 0)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)


class ArraySequence(_ContiguousSequence[T]):
    """Growable contiguous sequence, the analogue of a vector."""

    @classmethod
    def view(cls, items: MutableSequence[T]) -> Self:
        """Wrap *items* without copying; exchanges write through to it."""
        seq = object.__new__(cls)
        seq._items = items
        for item in items:
            seq._check_item(item)
        return seq

    def append(self, item: T) -> None:
        self._check_item(item)
        self._items.append(item)


class FixedSequence(_ContiguousSequence[T]):
    """Contiguous sequence whose length is part of its type.

    ``FixedSequence.of(int, 3)`` only accepts exactly three ints and has no
    ``append``.
    """

    size: ClassVar[int]

    @classmethod
    def of(cls, element_type: type, size: int | None = None) -> type[Self]:
        if size is None or size < 0:
            msg = "FixedSequence.of() needs a non-negative size"
            raise TypeError(msg)
        return _specialize(getattr(cls, "_origin", cls), element_type, size)

    def __init__(self, items: Iterable[T] = ()) -> None:
        super().__init__(items)
        expected = getattr(type(self), "size", None)
        if expected is not None and len(self._items) != expected:
            msg = f"{type(self).__name__} needs exactly {expected} elements, got {len(self._items)}"
            raise ValueError(msg)


# ── Linked storage ───────────────────────────────────────────────────


class _Node(Generic[T]):
    __slots__ = ("link", "value")

    def __init__(self, value: T, link: _Node[T] | None = None) -> None:
        self.value = value
        self.link = link

    def next(self) -> _Node[T] | None:
        return self.link


class LinkedSequence(SequenceBase[T]):
    """Singly-linked sequence: forward walking only, no indexed access."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: _Node[T] | None = None
        self._tail: _Node[T] | None = None
        self._size = 0
        for item in items:
            self.append(item)

    def append(self, item: T) -> None:
        self._check_item(item)
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.link = node
        self._tail = node
        self._size += 1

    def first(self) -> _Node[T] | None:
        return self._head

    def __len__(self) -> int:
        return self._size


REPRESENTATIONS: dict[str, type[SequenceBase[Any]]] = {
    "array": ArraySequence,
    "linked": LinkedSequence,
    "fixed": FixedSequence,
}


def representation_of(tp: type) -> str:
    """Name the representation a (possibly specialized) sequence class uses."""
    origin = getattr(tp, "_origin", tp)
    for name, cls in REPRESENTATIONS.items():
        if origin is cls:
            return name
    return tp.__name__
