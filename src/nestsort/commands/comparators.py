"""Command: list the registered comparator policies."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nestsort.commands._base import NsCommand
from nestsort.services.sorting import SortService

if TYPE_CHECKING:
    from nestsort.commands._context import AppContext


@click.command(
    cls=NsCommand,
    examples=[("", "name, accepted leaf types and description of each policy")],
)
@click.pass_obj
def comparators(app: AppContext) -> None:
    """List available comparator policies."""
    app.emit(SortService(app.settings).comparators())
