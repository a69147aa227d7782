"""Root CLI group for nestsort with global flags and command registration."""

from __future__ import annotations

import click

from nestsort import __version__
from nestsort.commands import register_commands
from nestsort.commands._base import NsGroup
from nestsort.commands._context import AppContext
from nestsort.config.settings import NestsortSettings


@click.group(
    name="nestsort",
    cls=NsGroup,
    invoke_without_command=True,
    examples=[
        ("sort '[[5, 2, 9], [6, 3, 8], [1, 7, 4]]'", "sort each row ascending"),
        ("show '[[1, 2], [3, 4]]'", "print the structure one level per indent"),
        ("comparators", "list the ordering policies"),
        ("-c ~/nestsort.toml --json sort @data.json", "explicit config, JSON envelope"),
        ("-q sort - < data.json", "sorted JSON only, read from stdin"),
    ],
)
@click.version_option(version=__version__, prog_name="nestsort")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """nestsort — sort and print arbitrarily nested sequences."""
    ctx.ensure_object(dict)
    settings = NestsortSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
