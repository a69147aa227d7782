"""Click command classes that carry worked nestsort examples.

A command declares ``examples`` as ``(arguments, note)`` pairs, where the
arguments follow the command's own path. Each example then shows up in
two places: as an Examples section at the end of ``--help``, and through
an eager ``--examples`` flag that prints the list and exits before any
required DATA argument is checked.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click

Example = tuple[str, str]


class _ExamplesMixin:
    examples: tuple[Example, ...]

    def __init__(self, *args: Any, examples: Sequence[Example] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        if self.examples:
            self.params.append(  # type: ignore[attr-defined]
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples and exit.",
                )
            )

    def example_lines(self, ctx: click.Context) -> list[tuple[str, str]]:
        """Full invocations for this command, paired with their notes."""
        return [(f"{ctx.command_path} {args}".rstrip(), note) for args, note in self.examples]

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':")
        for line, note in self.example_lines(ctx):
            click.echo(f"\n  # {note}\n  {line}")
        ctx.exit(0)

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        super().format_epilog(ctx, formatter)  # type: ignore[misc]
        if self.examples:
            with formatter.section("Examples"):
                formatter.write_dl(self.example_lines(ctx))


class NsCommand(_ExamplesMixin, click.Command):
    """A nestsort subcommand."""


class NsGroup(_ExamplesMixin, click.Group):
    """The nestsort root group; its subcommands default to :class:`NsCommand`."""

    command_class = NsCommand
