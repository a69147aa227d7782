"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Configures logging and centralizes result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from nestsort.output.formatters import OutputSettings, format_result
from nestsort.services.result import ServiceResult

if TYPE_CHECKING:
    from nestsort.config.settings import NestsortSettings


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: NestsortSettings) -> None:
        self.settings = settings

        from nestsort.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

        if settings.verbose:
            from nestsort.services.telemetry import enable_telemetry

            enable_telemetry()

    def read_source(self, source: str, *, op: str) -> str:
        """Resolve a DATA argument to JSON text.

        ``-`` reads stdin, ``@path`` reads a file, anything else is the
        JSON literal itself. An unreadable file is emitted as a failure.
        """
        if source == "-":
            return click.get_text_stream("stdin").read()
        if source.startswith("@"):
            path = Path(source[1:])
            try:
                return path.read_text(encoding="utf-8")
            except OSError as exc:
                self.emit(
                    ServiceResult.failure(
                        op,
                        "INPUT_NOT_FOUND",
                        f"Cannot read {path}: {exc.strerror or exc}",
                        path=str(path),
                    )
                )
                raise SystemExit(1) from exc
        return source

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
