"""SortService — sort, render and list comparators for JSON input.

Each operation parses JSON text, builds a typed structure with the
configured representation, and reports the outcome as a ServiceResult.
Precondition errors from the domain layer become structured failures.
"""

from __future__ import annotations

from typing import Any

import structlog

from nestsort.core.nested import sort_nested
from nestsort.core.printer import format_nested
from nestsort.core.sort import SortStats
from nestsort.domain.classify import leaf_type
from nestsort.domain.comparators import ComparatorPolicy, comparator_names, get_comparator
from nestsort.domain.errors import ComparatorTypeError, StructureError
from nestsort.domain.sequences import SequenceBase
from nestsort.domain.structure import build, shape_of, to_builtin
from nestsort.domain.types import Representation
from nestsort.services.base import BaseService
from nestsort.services.result import ServiceResult
from nestsort.services.telemetry import active_span, trace_span, traced

log = structlog.get_logger(__name__)


class SortService(BaseService):
    """Sorting and rendering operations over nested JSON arrays."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @traced
    def sort(
        self,
        text: str,
        *,
        comparator: str | None = None,
        representation: str | None = None,
        strict_shape: bool | None = None,
        divisor: int | None = None,
        target: float | None = None,
    ) -> ServiceResult:
        """Sort every leaf sequence of the JSON structure in *text*.

        Unset options fall back to the ``[sort]`` config section.
        """
        op = "sort"
        cfg = self._settings.sort
        name = comparator or cfg.comparator
        try:
            policy = get_comparator(
                name,
                divisor=divisor if divisor is not None else cfg.divisor,
                target=target if target is not None else cfg.target,
            )
        except KeyError:
            return ServiceResult.failure(
                op,
                "UNKNOWN_COMPARATOR",
                f"Unknown comparator '{name}'",
                known=comparator_names(),
            )
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_OPTION", str(exc))

        root = active_span()
        if root is not None:
            root.note("comparator", policy.name)

        data, error = self._parse(op, text)
        if error is not None:
            return error

        structure, error = self._traced_build(
            op,
            data,
            representation or cfg.representation,
            cfg.strict_shape if strict_shape is None else strict_shape,
        )
        if error is not None:
            return error
        assert structure is not None

        original = to_builtin(structure)
        stats = SortStats()
        with trace_span("sort_nested") as span:
            try:
                sort_nested(structure, policy, stats=stats)
            except ComparatorTypeError as exc:
                return ServiceResult.failure(op, "INCOMPATIBLE_COMPARATOR", str(exc))
            except TypeError as exc:
                return ServiceResult.failure(op, "INCOMPARABLE_VALUES", str(exc))
            if span is not None:
                span.count(stats)

        log.debug(
            "sort.complete",
            structure=structure,
            comparator=policy.name,
            **stats.as_dict(),
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                **self._describe(structure, policy),
                "original": original,
                "sorted": to_builtin(structure),
                "stats": stats.as_dict(),
                **self._printer_options(),
            },
            warnings=self._warnings(structure),
        )

    @traced
    def show(
        self,
        text: str,
        *,
        indent: int | None = None,
        brackets: str | None = None,
    ) -> ServiceResult:
        """Render the JSON structure in *text* without modifying it."""
        op = "show"
        data, error = self._parse(op, text)
        if error is not None:
            return error

        cfg = self._settings.sort
        structure, error = self._traced_build(op, data, cfg.representation, cfg.strict_shape)
        if error is not None:
            return error
        assert structure is not None

        options = self._printer_options(indent=indent, brackets=brackets)
        with trace_span("render") as span:
            try:
                rendering = format_nested(structure, **options)
            except ValueError as exc:
                return ServiceResult.failure(op, "INVALID_OPTION", str(exc))
            if span is not None:
                span.note("lines", rendering.count("\n") + 1)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                **self._describe(structure),
                "structure": to_builtin(structure),
                "rendering": rendering,
                **options,
            },
            warnings=self._warnings(structure),
        )

    @traced
    def comparators(self) -> ServiceResult:
        """List the registered comparator policies."""
        cfg = self._settings.sort
        items: list[dict[str, Any]] = []
        for name in comparator_names():
            policy = get_comparator(name, divisor=cfg.divisor, target=cfg.target)
            items.append(
                {
                    "name": name,
                    "description": policy.description,
                    "leaf_types": [tp.__name__ for tp in policy.leaf_types] or ["any"],
                }
            )
        return ServiceResult(
            ok=True,
            op="comparators",
            data={"items": items, "count": len(items), "default": cfg.comparator},
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _traced_build(
        self,
        op: str,
        data: Any,
        representation: str,
        strict_shape: bool,
    ) -> tuple[SequenceBase[Any] | None, ServiceResult | None]:
        with trace_span("build") as span:
            structure, error = self._build(op, data, representation, strict_shape)
            if span is not None and structure is not None:
                span.describe(structure)
        return structure, error

    @staticmethod
    def _build(
        op: str,
        data: Any,
        representation: str,
        strict_shape: bool,
    ) -> tuple[SequenceBase[Any] | None, ServiceResult | None]:
        try:
            kind = Representation(representation)
        except ValueError:
            known = [r.value for r in Representation]
            return None, ServiceResult.failure(
                op,
                "INVALID_OPTION",
                f"Unknown representation '{representation}'",
                known=known,
            )
        try:
            return build(data, kind=kind, strict_shape=strict_shape), None
        except StructureError as exc:
            return None, ServiceResult.failure(op, "INVALID_STRUCTURE", str(exc), path=exc.path)
        except (TypeError, ValueError) as exc:
            return None, ServiceResult.failure(op, "INVALID_STRUCTURE", str(exc))

    @staticmethod
    def _describe(
        structure: SequenceBase[Any],
        policy: ComparatorPolicy | None = None,
    ) -> dict[str, Any]:
        described = shape_of(structure)
        if policy is not None:
            described["comparator"] = policy.name
            described["description"] = policy.description
        return described

    def _printer_options(
        self,
        *,
        indent: int | None = None,
        brackets: str | None = None,
    ) -> dict[str, Any]:
        cfg = self._settings.printer
        return {
            "indent": cfg.indent if indent is None else indent,
            "brackets": brackets or cfg.brackets,
        }

    @staticmethod
    def _warnings(structure: SequenceBase[Any]) -> list[str]:
        if leaf_type(type(structure)) is object:
            return ["Structure has no scalar leaves"]
        return []
