"""Tests for operation-specific Rich renderers."""

from nestsort.output.renderers import render_quiet, render_result
from nestsort.services.result import ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _sort_result(**extra: object) -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="sort",
        data={
            "depth": 2,
            "leaf_type": "int",
            "representation": "array",
            "comparator": "greater",
            "description": "Natural order",
            "original": [[2, 1], [4, 3]],
            "sorted": [[1, 2], [3, 4]],
            "stats": {"sequences": 2, "passes": 2, "comparisons": 2, "swaps": 2},
            "indent": 4,
            "brackets": "{}",
        },
        **extra,  # type: ignore[arg-type]
    )


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        result = ServiceResult.failure("sort", "INVALID_JSON", "Input is not valid JSON")
        output = render_result(result)
        assert "ERROR" in output
        assert "sort" in output
        assert "Input is not valid JSON" in output

    def test_detail_hidden_by_default(self) -> None:
        result = ServiceResult.failure("sort", "INVALID_STRUCTURE", "Ragged", path="$[1]")
        assert "detail" not in render_result(result)

    def test_verbose_shows_detail(self) -> None:
        result = ServiceResult.failure("sort", "INVALID_STRUCTURE", "Ragged", path="$[1]")
        output = render_result(result, verbose=True)
        assert "detail" in output
        assert "path: $[1]" in output

    def test_no_error_object(self) -> None:
        assert "Unknown error" in render_result(ServiceResult(ok=False, op="test"))


# ── Sort renderer ─────────────────────────────────────────────────────


class TestSortRenderer:
    def test_fields_and_sorted_block(self) -> None:
        output = render_result(_sort_result())
        lines = output.splitlines()
        assert lines[0] == "OK  sort"
        assert "  comparator: greater" in lines
        assert "  depth: 2" in lines
        assert "  sorted:" in lines
        assert "            1" in lines
        assert "  original:" not in lines

    def test_stats_line(self) -> None:
        output = render_result(_sort_result())
        assert "sequences=2  passes=2  comparisons=2  swaps=2" in output

    def test_verbose_shows_original(self) -> None:
        output = render_result(_sort_result(), verbose=True)
        lines = output.splitlines()
        assert "  original:" in lines
        assert lines.index("  original:") < lines.index("  sorted:")

    def test_custom_brackets(self) -> None:
        result = _sort_result()
        data = {**result.data, "brackets": "[]"}
        output = render_result(result.model_copy(update={"data": data}))
        assert "    [" in output.splitlines()

    def test_verbose_telemetry_tree(self) -> None:
        meta = {
            "telemetry": {
                "name": "sort",
                "duration_ms": 1.5,
                "notes": {"comparator": "greater"},
                "children": [
                    {
                        "name": "build",
                        "duration_ms": 0.2,
                        "structure": {"depth": 1, "leaf_type": "int"},
                    },
                    {"name": "sort_nested", "duration_ms": 0.9, "stats": {"swaps": 2}},
                ],
            }
        }
        output = render_result(_sort_result(meta=meta), verbose=True)
        assert "meta:" in output
        assert "ms  sort  (comparator=greater)" in output
        assert "ms  build  (depth=1, leaf_type=int)" in output
        assert "ms  sort_nested  (swaps=2)" in output


# ── Show renderer ─────────────────────────────────────────────────────


class TestShowRenderer:
    def test_plain_rendering(self) -> None:
        result = _ok("show", rendering="{\n    1\n}", depth=1, leaf_type="int")
        assert render_result(result) == "{\n    1\n}"

    def test_verbose_adds_fields(self) -> None:
        result = _ok("show", rendering="{\n}", depth=1, leaf_type="object")
        output = render_result(result, verbose=True)
        assert output.startswith("OK  show")
        assert "  leaf_type: object" in output


# ── Comparators renderer ──────────────────────────────────────────────


class TestComparatorsRenderer:
    def test_table_marks_default(self) -> None:
        result = _ok(
            "comparators",
            items=[
                {"name": "greater", "description": "Natural", "leaf_types": ["any"]},
                {"name": "alpha_position", "description": "Alphabet", "leaf_types": ["str"]},
            ],
            count=2,
            default="greater",
        )
        output = render_result(result)
        assert "greater (default)" in output
        assert "alpha_position" in output
        assert "Alphabet" in output
        assert output.endswith("2 comparators")


# ── Generic fallback ──────────────────────────────────────────────────


class TestGenericRenderer:
    def test_unknown_op(self) -> None:
        output = render_result(_ok("custom", count=3, items=[1, 2]))
        assert "OK  custom" in output
        assert "count: 3" in output
        assert "items: [1,2]" in output


# ── Quiet mode ────────────────────────────────────────────────────────


class TestRenderQuiet:
    def test_sort_prints_compact_json(self) -> None:
        assert render_quiet(_sort_result()) == "[[1,2],[3,4]]"

    def test_show_prints_rendering(self) -> None:
        assert render_quiet(_ok("show", rendering="{\n}")) == "{\n}"

    def test_comparators_prints_names(self) -> None:
        result = _ok("comparators", items=[{"name": "greater"}, {"name": "less"}])
        assert render_quiet(result) == "greater\nless"

    def test_error(self) -> None:
        result = ServiceResult.failure("sort", "X", "Broken")
        assert render_quiet(result) == "ERROR: sort — Broken"

    def test_unknown_op(self) -> None:
        assert render_quiet(_ok("custom")) == "OK: custom"
