"""Tests for the katas CLI commands."""
from __future__ import annotations

import logging

import pytest
from click.testing import CliRunner

from katas import __version__
from katas.cli.main import cli


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "CSS selectors, JSON shapes" in result.output

    def test_lists_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        for name in ("selector", "expand", "zigzag", "dominoes", "ranges", "compass", "rectangle"):
            assert name in result.output

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_bad_log_level(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--log-level", "LOUD", "compass"])
        assert result.exit_code == 2
        assert "Unknown log level" in result.output


# ---------------------------------------------------------------------------
# selector / expand
# ---------------------------------------------------------------------------


class TestSelectorCommand:
    def test_full_selector(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            [
                "selector",
                "--pseudo-class", "focus",
                "--attr", 'href$=".png"',
                "--element", "a",
            ],
        )
        assert result.exit_code == 0
        assert result.output == 'a[href$=".png"]:focus\n'

    def test_repeated_classes(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["selector", "--id", "main", "--class", "container", "--class", "editable"]
        )
        assert result.output == "#main.container.editable\n"


class TestExpandCommand:
    def test_expand(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["expand", "a{b,c}"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["ab", "ac"]

    def test_unbalanced(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["expand", "a{b"])
        assert result.exit_code == 1
        assert "Error:" in result.output


# ---------------------------------------------------------------------------
# puzzles
# ---------------------------------------------------------------------------


class TestPuzzleCommands:
    def test_zigzag(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["zigzag", "3"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["0 1 5", "2 4 6", "3 7 8"]

    def test_zigzag_negative(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["zigzag", "--", "-2"])
        assert result.exit_code == 1

    def test_dominoes_yes(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["dominoes", "1:1", "2:2", "1:2"])
        assert result.exit_code == 0
        assert result.output == "yes\n"

    def test_dominoes_no(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["dominoes", "1:1", "0:3", "1:4"])
        assert result.exit_code == 1
        assert result.output == "no\n"

    def test_dominoes_bad_tile(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["dominoes", "12"])
        assert result.exit_code == 2

    def test_ranges(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["ranges", "0", "1", "2", "5", "7", "8", "9"])
        assert result.exit_code == 0
        assert result.output == "0-2,5,7-9\n"

    def test_compass(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["compass"])
        lines = result.output.splitlines()
        assert len(lines) == 32
        assert lines[0].split() == ["N", "0.00"]
        assert lines[-1].split() == ["NbW", "348.75"]

    def test_rectangle(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["rectangle", "10", "20"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ['{"width":10.0,"height":20.0}', "Area: 200"]

    def test_rectangle_indented(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--json-indent", "2", "rectangle", "1", "2"])
        assert result.output.splitlines()[:2] == ["{", '  "width": 1.0,']
