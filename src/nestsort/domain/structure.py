"""Build typed nested structures from plain Python lists.

This is the single point where a structure's static type is decided:
the depth and leaf type are measured once, checked for uniformity, and
baked into specialized sequence classes. Past this point the algorithms
only consult ``element_type``.

Ragged depth is always rejected since no single type can describe it.
Leaves must share one type, except that ints and floats together form
float leaves. Ragged length is accepted unless ``strict_shape`` is set
or the representation is ``fixed`` (whose length is part of the type).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from nestsort.domain.classify import classify, leaf_type, structural_depth
from nestsort.domain.errors import MixedLeafTypeError, RaggedDepthError, RaggedLengthError
from nestsort.domain.sequences import (
    ArraySequence,
    FixedSequence,
    LinkedSequence,
    SequenceBase,
    representation_of,
)
from nestsort.domain.types import Category, Representation

_BRANCH_TYPES = (list, tuple)
_NUMERIC: frozenset[type] = frozenset({int, float})


def _is_branch(node: object) -> bool:
    return isinstance(node, _BRANCH_TYPES)


def _measure(node: Sequence[Any], path: str) -> tuple[int, bool]:
    """Return ``(depth, exact)`` for a branch.

    A branch made only of empty lists has no exact depth; it reports the
    minimum depth it needs and fits any depth at least that large.
    """
    exact: int | None = None
    floor = 1
    for index, child in enumerate(node):
        if _is_branch(child):
            child_depth, child_exact = _measure(child, f"{path}[{index}]")
            child_depth += 1
        else:
            child_depth, child_exact = 1, True
        if child_exact:
            if exact is not None and exact != child_depth:
                msg = (
                    f"Ragged depth at {path}[{index}]: "
                    f"expected {exact} levels, found {child_depth}"
                )
                raise RaggedDepthError(msg, path=f"{path}[{index}]")
            exact = child_depth
        else:
            floor = max(floor, child_depth)
    if exact is None:
        return floor, False
    if floor > exact:
        msg = f"Ragged depth at {path}: an empty branch needs {floor} levels, siblings have {exact}"
        raise RaggedDepthError(msg, path=path)
    return exact, True


def unify_leaf_types(a: type, b: type) -> type | None:
    """The single leaf type covering *a* and *b*, or None if there is none.

    ``int`` and ``float`` unify to ``float`` since JSON does not say which
    one a number is. ``bool`` stays its own type and never mixes with
    numbers.
    """
    if a is b:
        return a
    if {a, b} <= _NUMERIC:
        return float
    return None


def _collect_leaves(
    node: Sequence[Any],
    level: int,
    depth: int,
    path: str,
    lengths: list[set[int]],
    leaf: list[type],
) -> None:
    lengths[level].add(len(node))
    for index, child in enumerate(node):
        if level + 1 < depth:
            _collect_leaves(child, level + 1, depth, f"{path}[{index}]", lengths, leaf)
            continue
        if not leaf:
            leaf.append(type(child))
            continue
        unified = unify_leaf_types(leaf[0], type(child))
        if unified is None:
            msg = (
                f"Mixed leaf types at {path}[{index}]: "
                f"{leaf[0].__name__} and {type(child).__name__}"
            )
            raise MixedLeafTypeError(msg, path=f"{path}[{index}]")
        leaf[0] = unified


def structure_type(
    leaf: type,
    depth: int,
    kind: Representation | str = Representation.ARRAY,
    sizes: Sequence[int] | None = None,
) -> type[SequenceBase[Any]]:
    """Return the typed class wrapping *leaf* in *depth* sequence levels.

    ``fixed`` needs one length per level in *sizes* (outermost first).
    """
    kind = Representation(kind)
    if depth < 1:
        msg = "depth must be at least 1"
        raise ValueError(msg)
    if kind is Representation.FIXED and (sizes is None or len(sizes) != depth):
        msg = "fixed structures need one size per level"
        raise ValueError(msg)
    tp: type = leaf
    for level in reversed(range(depth)):
        if kind is Representation.FIXED:
            assert sizes is not None
            tp = FixedSequence.of(tp, sizes[level])
        elif kind is Representation.LINKED:
            tp = LinkedSequence.of(tp)
        else:
            tp = ArraySequence.of(tp)
    return tp


def _construct(
    node: Sequence[Any],
    level: int,
    types: list[type[SequenceBase[Any]]],
    copy: bool,
) -> SequenceBase[Any]:
    cls = types[level]
    if level == len(types) - 1:
        if not copy:
            return cls.view(node)  # type: ignore[attr-defined]
        return cls(node)  # type: ignore[call-arg]
    return cls([_construct(child, level + 1, types, copy) for child in node])  # type: ignore[call-arg]


def build(
    data: Sequence[Any],
    *,
    kind: Representation | str = Representation.ARRAY,
    strict_shape: bool = False,
    copy: bool = True,
) -> SequenceBase[Any]:
    """Turn nested lists into a typed structure of the chosen representation.

    Args:
        data: A list (or tuple) of lists ... of scalars.
        kind: ``array``, ``linked`` or ``fixed``.
        strict_shape: Require every sequence on a level to share one length.
        copy: When False (``array`` only), innermost lists are wrapped as
            views so sorting the structure sorts them in place.

    Raises:
        TypeError: *data* is not a list/tuple, or ``copy=False`` meets a tuple.
        RaggedDepthError: branches differ in nesting depth.
        MixedLeafTypeError: leaves do not share one type.
        RaggedLengthError: lengths differ where a shape is required.
    """
    kind = Representation(kind)
    if not _is_branch(data):
        msg = f"Expected a list of values, got {type(data).__name__}"
        raise TypeError(msg)
    if not copy and kind is not Representation.ARRAY:
        msg = "copy=False is only supported for the array representation"
        raise ValueError(msg)

    depth, _ = _measure(data, "$")
    lengths: list[set[int]] = [set() for _ in range(depth)]
    leaf: list[type] = []
    _collect_leaves(data, 0, depth, "$", lengths, leaf)

    if strict_shape or kind is Representation.FIXED:
        for level, seen in enumerate(lengths):
            if len(seen) > 1:
                msg = f"Ragged length at level {level}: {sorted(seen)}"
                raise RaggedLengthError(msg, path=f"level {level}")

    sizes = [next(iter(seen), 0) for seen in lengths]
    types: list[type[SequenceBase[Any]]] = [
        structure_type(leaf[0] if leaf else object, depth - level, kind, sizes[level:])
        for level in range(depth)
    ]
    if not copy:
        _require_lists(data, 0, depth)
    return _construct(data, 0, types, copy)


def _require_lists(node: Sequence[Any], level: int, depth: int) -> None:
    if level == depth - 1:
        if not isinstance(node, list):
            msg = f"In-place sorting needs mutable lists, got {type(node).__name__}"
            raise TypeError(msg)
        return
    for child in node:
        _require_lists(child, level + 1, depth)


def to_builtin(value: Any) -> Any:
    """Convert a typed structure back to nested lists (scalars unchanged)."""
    if classify(type(value)) is Category.SEQUENCE:
        return [to_builtin(item) for item in value]
    return value


def shape_of(structure: SequenceBase[Any]) -> dict[str, Any]:
    """Depth, leaf type name and representation of a built structure."""
    tp = type(structure)
    return {
        "depth": structural_depth(tp),
        "leaf_type": leaf_type(tp).__name__,
        "representation": representation_of(tp),
    }
