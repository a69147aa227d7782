"""Tests for the array, linked and fixed sequence representations."""

from __future__ import annotations

import pytest

from nestsort.domain.sequences import (
    REPRESENTATIONS,
    ArraySequence,
    FixedSequence,
    LinkedSequence,
    SequenceBase,
)


def _walk(seq: SequenceBase[int]) -> list[int]:
    values = []
    pos = seq.first()
    while pos is not None:
        values.append(pos.value)
        pos = pos.next()
    return values


class TestSpecialization:
    def test_of_is_cached(self) -> None:
        assert ArraySequence.of(int) is ArraySequence.of(int)
        assert FixedSequence.of(int, 3) is FixedSequence.of(int, 3)

    def test_distinct_element_types(self) -> None:
        assert ArraySequence.of(int) is not ArraySequence.of(str)
        assert FixedSequence.of(int, 2) is not FixedSequence.of(int, 3)

    def test_class_names(self) -> None:
        assert ArraySequence.of(int).__name__ == "ArraySequence[int]"
        assert FixedSequence.of(int, 3).__name__ == "FixedSequence[int, 3]"

    def test_respecializing_uses_origin(self) -> None:
        assert ArraySequence.of(int).of(str) is ArraySequence.of(str)

    def test_subclass_of_origin(self) -> None:
        assert issubclass(LinkedSequence.of(int), LinkedSequence)

    def test_fixed_needs_size(self) -> None:
        with pytest.raises(TypeError, match="size"):
            FixedSequence.of(int)


class TestTraversal:
    @pytest.mark.parametrize("origin", [ArraySequence, LinkedSequence])
    def test_forward_walk(self, origin: type) -> None:
        seq = origin.of(int)([3, 1, 2])
        assert _walk(seq) == [3, 1, 2]
        assert list(seq) == [3, 1, 2]
        assert len(seq) == 3

    @pytest.mark.parametrize("origin", [ArraySequence, LinkedSequence])
    def test_empty(self, origin: type) -> None:
        seq = origin.of(int)()
        assert seq.first() is None
        assert len(seq) == 0
        assert list(seq) == []

    def test_fixed_walk(self) -> None:
        seq = FixedSequence.of(int, 3)([7, 8, 9])
        assert _walk(seq) == [7, 8, 9]

    @pytest.mark.parametrize("origin", [ArraySequence, LinkedSequence])
    def test_exchange_adjacent(self, origin: type) -> None:
        seq = origin.of(int)([1, 2, 3])
        first = seq.first()
        assert first is not None
        second = first.next()
        assert second is not None
        seq.exchange(first, second)
        assert list(seq) == [2, 1, 3]

    def test_linked_has_no_indexing(self) -> None:
        seq = LinkedSequence.of(int)([1, 2])
        with pytest.raises(TypeError):
            seq[0]  # type: ignore[index]


class TestElementChecks:
    def test_rejects_wrong_element_type(self) -> None:
        with pytest.raises(TypeError, match="holds int elements"):
            ArraySequence.of(int)([1, "two"])

    def test_linked_append_checks(self) -> None:
        seq = LinkedSequence.of(str)()
        with pytest.raises(TypeError):
            seq.append(1)  # type: ignore[arg-type]

    def test_unspecialized_accepts_anything(self) -> None:
        seq = ArraySequence([1, "a", None])
        assert len(seq) == 3

    def test_nested_element_type(self) -> None:
        row = ArraySequence.of(int)
        matrix = ArraySequence.of(row)([row([1]), row([2])])
        assert len(matrix) == 2
        with pytest.raises(TypeError):
            ArraySequence.of(row)([[1], [2]])


class TestFixedSequence:
    def test_exact_length_required(self) -> None:
        with pytest.raises(ValueError, match="exactly 3"):
            FixedSequence.of(int, 3)([1, 2])

    def test_no_append(self) -> None:
        seq = FixedSequence.of(int, 1)([1])
        assert not hasattr(seq, "append")


class TestArrayView:
    def test_view_shares_storage(self) -> None:
        items = [3, 2, 1]
        seq = ArraySequence.of(int).view(items)
        first = seq.first()
        assert first is not None
        first.value = 9
        assert items == [9, 2, 1]

    def test_view_checks_elements(self) -> None:
        with pytest.raises(TypeError):
            ArraySequence.of(int).view(["x"])

    def test_append_writes_through(self) -> None:
        items = [1]
        ArraySequence.view(items).append(2)
        assert items == [1, 2]


class TestEquality:
    def test_same_type_same_values(self) -> None:
        assert ArraySequence.of(int)([1, 2]) == ArraySequence.of(int)([1, 2])

    def test_different_representation(self) -> None:
        assert ArraySequence.of(int)([1, 2]) != LinkedSequence.of(int)([1, 2])

    def test_repr(self) -> None:
        assert repr(LinkedSequence.of(int)([1, 2])) == "LinkedSequence[int]([1, 2])"


def test_representation_registry() -> None:
    assert REPRESENTATIONS == {
        "array": ArraySequence,
        "linked": LinkedSequence,
        "fixed": FixedSequence,
    }
