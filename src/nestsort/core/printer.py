"""Depth-indented rendering of nested structures.

One recursive rule covers every depth: a scalar is one indented line, a
sequence is an indented opening bracket, its elements one level deeper,
and an indented closing bracket. Rendering never mutates its input.

Example for ``[[1, 2], [3, 4]]``::

    {
        {
            1
            2
        }
        {
            3
            4
        }
    }
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import Any, TextIO

from nestsort.domain.classify import classify
from nestsort.domain.structure import build
from nestsort.domain.types import Category

DEFAULT_INDENT = 4
DEFAULT_BRACKETS = "{}"


def _typed(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return build(value)
    return value


def _render(value: Any, depth: int, indent: int, opening: str, closing: str) -> Iterator[str]:
    pad = " " * (depth * indent)
    if classify(type(value)) is Category.SEQUENCE:
        yield f"{pad}{opening}"
        for item in value:
            yield from _render(item, depth + 1, indent, opening, closing)
        yield f"{pad}{closing}"
    else:
        yield f"{pad}{value}"


def iter_nested_lines(
    value: Any,
    depth: int = 0,
    *,
    indent: int = DEFAULT_INDENT,
    brackets: str = DEFAULT_BRACKETS,
) -> Iterator[str]:
    """Yield the rendered lines of *value*, starting at *depth*."""
    if len(brackets) != 2:
        msg = f"brackets must be exactly two characters, got {brackets!r}"
        raise ValueError(msg)
    if indent < 0 or depth < 0:
        msg = "indent and depth must be non-negative"
        raise ValueError(msg)
    return _render(_typed(value), depth, indent, brackets[0], brackets[1])


def format_nested(
    value: Any,
    depth: int = 0,
    *,
    indent: int = DEFAULT_INDENT,
    brackets: str = DEFAULT_BRACKETS,
) -> str:
    """Render *value* to a single newline-joined string."""
    return "\n".join(iter_nested_lines(value, depth, indent=indent, brackets=brackets))


def print_nested(
    value: Any,
    depth: int = 0,
    *,
    sink: TextIO | None = None,
    indent: int = DEFAULT_INDENT,
    brackets: str = DEFAULT_BRACKETS,
) -> None:
    """Write the rendering of *value* to *sink* (default: stdout)."""
    out = sink if sink is not None else sys.stdout
    for line in iter_nested_lines(value, depth, indent=indent, brackets=brackets):
        out.write(line + "\n")


def print_container(values: Iterable[Any], *, sink: TextIO | None = None) -> None:
    """Write one level of *values* space-separated on a single line."""
    out = sink if sink is not None else sys.stdout
    out.write(" ".join(str(v) for v in values) + "\n")
