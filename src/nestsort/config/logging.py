"""structlog setup for the nestsort CLI.

Every record, from structlog or from the stdlib loggers in ``core``,
goes through one processor chain to stderr, so stdout carries only the
command's result. ``--verbose`` opens DEBUG for ``nestsort.*``,
``--quiet`` keeps only errors, and ``--log-json`` switches the console
renderer for JSON lines.

Typed structures passed as log values are reduced to a short summary
(``ArraySequence[int](len=3)``) instead of dumping their contents.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

from nestsort.domain.sequences import SequenceBase


def _summarize_structures(
    _logger: Any, _method: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    for key, value in event_dict.items():
        if isinstance(value, SequenceBase):
            event_dict[key] = f"{type(value).__name__}(len={len(value)})"
    return event_dict


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        _summarize_structures,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool, stream: IO[str]) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def package_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """Level for ``nestsort.*`` loggers; ``verbose`` wins over ``quiet``."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
    stream: IO[str] | None = None,
) -> None:
    """Route structlog and stdlib records through one stderr handler.

    Safe to call repeatedly: the root handler is replaced, not added.

    Args:
        verbose: DEBUG output for ``nestsort`` loggers (spans, sort counters).
        quiet: Only errors from ``nestsort`` loggers.
        log_json: JSON lines instead of the console renderer.
        stream: Where records go; defaults to the current ``sys.stderr``.
    """
    out = stream if stream is not None else sys.stderr
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json, out),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)
    logging.getLogger("nestsort").setLevel(package_level(verbose=verbose, quiet=quiet))
