"""Subcommand modules for nestsort.

Provides register_commands() which uses deferred imports to keep
``nestsort --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from nestsort.commands.comparators import comparators
    from nestsort.commands.show import show
    from nestsort.commands.sort import sort

    cli.add_command(sort)
    cli.add_command(show)
    cli.add_command(comparators)
