"""Tests for depth-indented rendering."""

from __future__ import annotations

import io

import pytest

from nestsort.core.printer import (
    format_nested,
    iter_nested_lines,
    print_container,
    print_nested,
)
from nestsort.domain.structure import build, to_builtin


class TestPrintNested:
    def test_matrix_default_layout(self) -> None:
        sink = io.StringIO()
        print_nested([[1, 2], [3, 4]], sink=sink)
        assert sink.getvalue().splitlines() == [
            "{",
            "    {",
            "        1",
            "        2",
            "    }",
            "    {",
            "        3",
            "        4",
            "    }",
            "}",
        ]

    def test_writes_to_stdout_by_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_nested([1])
        assert capsys.readouterr().out == "{\n    1\n}\n"

    def test_scalar_is_single_line(self) -> None:
        sink = io.StringIO()
        print_nested(7, 2, sink=sink)
        assert sink.getvalue() == "        7\n"

    def test_starting_depth_shifts_everything(self) -> None:
        assert list(iter_nested_lines([5], 1)) == ["    {", "        5", "    }"]

    def test_empty_sequence(self) -> None:
        assert format_nested([]) == "{\n}"

    def test_typed_structure(self) -> None:
        value = build([["b", "a"]], kind="linked")
        assert format_nested(value) == "{\n    {\n        b\n        a\n    }\n}"

    def test_does_not_mutate(self) -> None:
        data = [[3, 1], [2]]
        value = build(data)
        format_nested(value)
        format_nested(data)
        assert data == [[3, 1], [2]]
        assert to_builtin(value) == [[3, 1], [2]]


class TestOptions:
    def test_custom_indent(self) -> None:
        assert format_nested([[1]], indent=2) == "{\n  {\n    1\n  }\n}"

    def test_zero_indent(self) -> None:
        assert format_nested([1, 2], indent=0) == "{\n1\n2\n}"

    def test_custom_brackets(self) -> None:
        assert format_nested([1], brackets="[]") == "[\n    1\n]"

    @pytest.mark.parametrize("brackets", ["", "{", "{{}}"])
    def test_bad_brackets_rejected(self, brackets: str) -> None:
        with pytest.raises(ValueError, match="two characters"):
            iter_nested_lines([1], brackets=brackets)

    def test_negative_indent_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            format_nested([1], indent=-1)

    def test_negative_depth_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            format_nested([1], -1)


class TestPrintContainer:
    def test_space_separated_line(self) -> None:
        sink = io.StringIO()
        print_container([1, 2, 3], sink=sink)
        assert sink.getvalue() == "1 2 3\n"

    def test_typed_sequence(self) -> None:
        sink = io.StringIO()
        print_container(build(["x", "y"], kind="linked"), sink=sink)
        assert sink.getvalue() == "x y\n"

    def test_empty(self) -> None:
        sink = io.StringIO()
        print_container([], sink=sink)
        assert sink.getvalue() == "\n"
