"""Command: sort every leaf sequence of a nested JSON array."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nestsort.commands._base import NsCommand
from nestsort.domain.types import Representation
from nestsort.services.sorting import SortService

if TYPE_CHECKING:
    from nestsort.commands._context import AppContext


@click.command(
    cls=NsCommand,
    examples=[
        ("'[5, 2, 9, 1, 5, 6]'", "ascending, the default"),
        ("'[5, 2, 9, 1, 5, 6]' --by odd_first", "odd values before even ones"),
        ("'[[5, 2, 9], [6, 3, 8], [1, 7, 4]]' --repr linked", "same result on linked lists"),
        (
            "'[[3, 6, 9], [1, 12, 7]]' --by divisible_first --divisor 3",
            "multiples of 3 first",
        ),
        ("@matrix.json --by proximity --target 10", "closest to 10 first"),
        ("'[[10.5, 3], [12, 8]]' --by proximity", "ints and floats mix as float leaves"),
    ],
)
@click.argument("data")
@click.option("--by", "comparator", default=None, help="Comparator policy name.")
@click.option(
    "--repr",
    "representation",
    type=click.Choice([r.value for r in Representation]),
    default=None,
    help="Container layout to sort with.",
)
@click.option(
    "--strict-shape",
    is_flag=True,
    help="Require equal lengths for sequences on the same level.",
)
@click.option("--divisor", type=int, default=None, help="Divisor for divisible_first.")
@click.option("--target", type=float, default=None, help="Target for proximity.")
@click.pass_obj
def sort(
    app: AppContext,
    data: str,
    comparator: str | None,
    representation: str | None,
    strict_shape: bool,
    divisor: int | None,
    target: float | None,
) -> None:
    """Sort the innermost sequences of DATA (JSON, @file or - for stdin)."""
    text = app.read_source(data, op="sort")
    app.emit(
        SortService(app.settings).sort(
            text,
            comparator=comparator,
            representation=representation,
            strict_shape=strict_shape or None,
            divisor=divisor,
            target=target,
        )
    )
