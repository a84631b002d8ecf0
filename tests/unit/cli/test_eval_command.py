"""Unit tests for the eval command."""

from __future__ import annotations

import json
import os
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from infixcalc.cli.commands import eval_command
from infixcalc.main import cli


@pytest.fixture(autouse=True)
def isolated(clean_env: None, temp_dir: Path) -> Iterator[None]:
    """Run every test in an empty directory with no config."""
    os.chdir(temp_dir)
    yield


class TestEvalText:
    """Tests for text output."""

    def test_prints_result(self, cli_runner: CliRunner) -> None:
        """The result is printed on stdout."""
        result = cli_runner.invoke(cli, ["eval", "(2+3)*4"])
        assert result.exit_code == 0
        assert result.output.strip() == "20.0"

    def test_words_joined(self, cli_runner: CliRunner) -> None:
        """Separate arguments form one expression."""
        result = cli_runner.invoke(cli, ["eval", "2", "^", "3", "^", "2"])
        assert result.exit_code == 0
        assert result.output.strip() == "512.0"

    def test_leading_minus_after_double_dash(self, cli_runner: CliRunner) -> None:
        """A leading sign works after --."""
        result = cli_runner.invoke(cli, ["eval", "--", "-5+3"])
        assert result.exit_code == 0
        assert result.output.strip() == "-2.0"

    def test_precision_option(self, cli_runner: CliRunner) -> None:
        """--precision limits significant digits."""
        result = cli_runner.invoke(cli, ["eval", "-p", "4", "1/3"])
        assert result.exit_code == 0
        assert result.output.strip() == "0.3333"

    def test_precision_out_of_range(self, cli_runner: CliRunner) -> None:
        """--precision outside 1..17 is a usage error."""
        result = cli_runner.invoke(cli, ["eval", "-p", "0", "1/3"])
        assert result.exit_code == 2

    def test_nan_result(self, cli_runner: CliRunner) -> None:
        """nan is printed, not treated as an error."""
        result = cli_runner.invoke(cli, ["eval", "--", "-8^0.5"])
        assert result.exit_code == 0
        assert result.output.strip() == "nan"

    def test_error_exit_code(self, cli_runner: CliRunner) -> None:
        """Expression errors exit with 1 and print the message."""
        result = cli_runner.invoke(cli, ["eval", "5/0"])
        assert result.exit_code == 1
        assert "Error: Division by zero" in result.output

    def test_error_caret(self, cli_runner: CliRunner) -> None:
        """The failing position is marked under the expression."""
        result = cli_runner.invoke(cli, ["eval", "2+a"])
        assert result.exit_code == 1
        assert "Invalid character 'a'" in result.output
        assert "  2+a\n    ^" in result.output

    def test_markup_like_input_printed_verbatim(self, cli_runner: CliRunner) -> None:
        """Square brackets in bad input are shown as typed."""
        result = cli_runner.invoke(cli, ["eval", "[1]"])
        assert result.exit_code == 1
        assert "'['" in result.output

    def test_command_without_group(self, cli_runner: CliRunner) -> None:
        """The command works when invoked on its own."""
        result = cli_runner.invoke(eval_command, ["1+1"])
        assert result.exit_code == 0
        assert result.output.strip() == "2.0"


class TestEvalJson:
    """Tests for JSON output."""

    def test_result_object(self, cli_runner: CliRunner) -> None:
        """Successful evaluations print expression and result."""
        result = cli_runner.invoke(cli, ["eval", "--format", "json", "2+3*4"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {"expression": "2+3*4", "formatted": "14.0", "result": 14.0}

    def test_error_object(self, cli_runner: CliRunner) -> None:
        """Failures print an error object and exit with 1."""
        result = cli_runner.invoke(cli, ["eval", "-f", "json", "(2+3"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["expression"] == "(2+3"
        assert data["error"]["kind"] == "unbalanced_parenthesis"
        assert data["error"]["position"] == 0

    def test_infinite_result_is_valid_json(self, cli_runner: CliRunner) -> None:
        """Infinity is written as a string."""
        result = cli_runner.invoke(cli, ["eval", "-f", "json", "10^400"])
        assert result.exit_code == 0
        assert json.loads(result.output)["result"] == "inf"

    def test_format_from_config(self, cli_runner: CliRunner, temp_dir: Path) -> None:
        """output.format sets the default format."""
        (temp_dir / "infixcalc.yaml").write_text("output:\n  format: json\n")
        result = cli_runner.invoke(cli, ["eval", "1+1"])
        assert json.loads(result.output)["result"] == 2.0

    def test_option_overrides_config(
        self, cli_runner: CliRunner, temp_dir: Path
    ) -> None:
        """--format beats output.format."""
        (temp_dir / "infixcalc.yaml").write_text("output:\n  format: json\n")
        result = cli_runner.invoke(cli, ["eval", "-f", "text", "1+1"])
        assert result.output.strip() == "2.0"
