"""Command: render a nested JSON array with depth indentation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nestsort.commands._base import NsCommand
from nestsort.services.sorting import SortService

if TYPE_CHECKING:
    from nestsort.commands._context import AppContext


@click.command(
    cls=NsCommand,
    examples=[
        ("'[[1, 2], [3, 4]]'", "four-space indent, curly brackets"),
        ("'[[1, 2], [3, 4]]' --indent 2 --brackets '[]'", "compact, square brackets"),
        ("@cube.json", "read from a file"),
    ],
)
@click.argument("data")
@click.option("--indent", type=int, default=None, help="Spaces per nesting level.")
@click.option("--brackets", default=None, help="Opening and closing bracket, e.g. '[]'.")
@click.pass_obj
def show(app: AppContext, data: str, indent: int | None, brackets: str | None) -> None:
    """Print DATA (JSON, @file or - for stdin) as an indented block."""
    text = app.read_source(data, op="show")
    app.emit(SortService(app.settings).show(text, indent=indent, brackets=brackets))
