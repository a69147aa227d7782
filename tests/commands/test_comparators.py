"""Tests for the comparators command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from nestsort.cli import cli


class TestComparatorsCommand:
    def test_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["comparators"])
        assert result.exit_code == 0
        assert "greater (default)" in result.output
        assert "alpha_position" in result.output
        assert "8 comparators" in result.output

    def test_quiet_lists_names(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "comparators"])
        names = result.output.split()
        assert names[0] == "greater"
        assert "proximity" in names
        assert "ascending" not in names

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "comparators"])
        data = json.loads(result.output)["data"]
        assert data["count"] == len(data["items"])
        assert data["default"] == "greater"
