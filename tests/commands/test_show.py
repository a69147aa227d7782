"""Tests for the show command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from nestsort.cli import cli


class TestShowCommand:
    def test_default_layout(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["show", "[[1, 2], [3, 4]]"])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "{",
            "    {",
            "        1",
            "        2",
            "    }",
            "    {",
            "        3",
            "        4",
            "    }",
            "}",
        ]

    def test_indent_and_brackets(self, cli_runner: CliRunner) -> None:
        args = ["show", "[[1]]", "--indent", "2", "--brackets", "[]"]
        result = cli_runner.invoke(cli, args)
        assert result.output.splitlines() == ["[", "  [", "    1", "  ]", "]"]

    def test_printer_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "nestsort.toml").write_text('[printer]\nbrackets = "()"\n')
        result = cli_runner.invoke(cli, ["show", "[7]"])
        assert result.output.splitlines() == ["(", "    7", ")"]

    def test_quiet_matches_plain(self, cli_runner: CliRunner) -> None:
        plain = cli_runner.invoke(cli, ["show", "[1, 2]"])
        quiet = cli_runner.invoke(cli, ["-q", "show", "[1, 2]"])
        assert plain.output == quiet.output

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "show", '["x"]'])
        data = json.loads(result.output)["data"]
        assert data["rendering"] == "{\n    x\n}"
        assert data["leaf_type"] == "str"

    def test_does_not_sort(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "show", "[2, 1]"])
        assert result.output.splitlines() == ["{", "    2", "    1", "}"]


class TestShowErrors:
    def test_bad_brackets(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "show", "[1]", "--brackets", "<"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "INVALID_OPTION"

    def test_ragged_depth(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["show", "[1, [2]]"])
        assert result.exit_code == 1
        assert "Ragged depth" in result.output
