"""Phase telemetry for service calls: timing, structure shape and sort work.

A ``@traced`` service method opens a root span named after the operation.
The phases it runs (``build``, ``sort_nested``, ``render``) open child
spans through :func:`trace_span`. Each span can carry:

- ``structure``: depth, leaf type and representation of what it touched
- ``stats``: the :class:`SortStats` of the sorting it did
- ``notes``: any other value worth reporting (comparator, line count)

The finished tree lands in ``ServiceResult.meta["telemetry"]`` and each
span logs one ``phase.done`` event. Disabled, every entry point returns
after a single ContextVar read.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from nestsort.core.sort import SortStats
from nestsort.domain.sequences import SequenceBase
from nestsort.domain.structure import shape_of
from nestsort.services.result import ServiceResult

log = structlog.get_logger("nestsort.telemetry")

_enabled: ContextVar[bool] = ContextVar("nestsort_telemetry", default=False)
_stack: ContextVar[tuple[PhaseSpan, ...]] = ContextVar("nestsort_spans", default=())


@dataclass
class PhaseSpan:
    """One timed phase of a service call."""

    name: str
    started: float = field(default_factory=time.perf_counter)
    finished: float | None = None
    structure: dict[str, Any] = field(default_factory=dict)
    stats: SortStats | None = None
    notes: dict[str, Any] = field(default_factory=dict)
    children: list[PhaseSpan] = field(default_factory=list)

    @property
    def elapsed_ms(self) -> float:
        if self.finished is None:
            return 0.0
        return (self.finished - self.started) * 1000

    def finish(self) -> None:
        self.finished = time.perf_counter()

    def describe(self, structure: SequenceBase[Any]) -> None:
        """Record the shape of the structure this phase worked on."""
        self.structure = shape_of(structure)

    def count(self, stats: SortStats) -> None:
        """Add sort work done during this phase."""
        if self.stats is None:
            self.stats = SortStats()
        self.stats.merge(stats)

    def note(self, key: str, value: Any) -> None:
        self.notes[key] = value

    def total_stats(self) -> SortStats | None:
        """Sort work of this span and every span below it."""
        parts = [self.stats, *(child.total_stats() for child in self.children)]
        found = [part for part in parts if part is not None]
        if not found:
            return None
        total = SortStats()
        for part in found:
            total.merge(part)
        return total

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "duration_ms": round(self.elapsed_ms, 2)}
        if self.structure:
            out["structure"] = dict(self.structure)
        if self.stats is not None:
            out["stats"] = self.stats.as_dict()
        if self.notes:
            out["notes"] = dict(self.notes)
        if self.children:
            out["children"] = [child.to_dict() for child in self.children]
        return out


def _log_phase(span: PhaseSpan, *, ok: bool) -> None:
    log.debug(
        "phase.done",
        phase=span.name,
        duration_ms=round(span.elapsed_ms, 2),
        ok=ok,
        **span.structure,
        **(span.stats.as_dict() if span.stats is not None else {}),
    )


@contextmanager
def trace_span(name: str) -> Generator[PhaseSpan | None]:
    """Open a child phase under the running service call.

    Yields None when telemetry is off or no traced call is running.
    """
    if not _enabled.get():
        yield None
        return
    stack = _stack.get()
    if not stack:
        yield None
        return

    span = PhaseSpan(name=name)
    stack[-1].children.append(span)
    token = _stack.set((*stack, span))
    ok = False
    try:
        yield span
        ok = True
    finally:
        span.finish()
        _stack.reset(token)
        _log_phase(span, ok=ok)


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Run a service method under a root span and attach the tree to its result.

    The root takes the first structure described below it and the sum of
    all sort work below it, so ``meta["telemetry"]`` summarizes the call.
    """

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        root = PhaseSpan(name=func.__name__)
        token = _stack.set((root,))
        try:
            result = func(*args, **kwargs)
        except Exception:
            root.finish()
            _stack.reset(token)
            _log_phase(root, ok=False)
            raise
        root.finish()
        _stack.reset(token)

        for child in root.children:
            if child.structure:
                root.structure = dict(child.structure)
                break
        root.stats = root.total_stats()

        if isinstance(result, ServiceResult):
            _log_phase(root, ok=result.ok)
            meta = {**(result.meta or {}), "telemetry": root.to_dict()}
            return result.model_copy(update={"meta": meta})  # type: ignore[return-value]
        _log_phase(root, ok=True)
        return result

    return wrapper


def enable_telemetry() -> None:
    """Turn on span collection for the current context (``--verbose``)."""
    _enabled.set(True)


def reset_telemetry() -> None:
    """Turn span collection off and drop any spans still open."""
    _enabled.set(False)
    _stack.set(())


def active_span() -> PhaseSpan | None:
    """The innermost open span, or None when telemetry is off."""
    if not _enabled.get():
        return None
    stack = _stack.get()
    return stack[-1] if stack else None
