"""Tests for --examples flag on CLI commands.

Parametrized to cover all commands that define examples text.
"""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from studentctl.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--examples"], ["studentctl list", "studentctl --db school.db run"]),
    (["add", "--examples"], ["studentctl add", "--dob 1815-12-10"]),
    (["show", "--examples"], ["studentctl show 1"]),
    (["update", "--examples"], ["--gpa 3.5"]),
    (["delete", "--examples"], ["studentctl delete 1 --yes"]),
    (["list", "--examples"], ["studentctl --quiet list"]),
    (["search", "--examples"], ["studentctl search ada"]),
    (["major", "--examples"], ["studentctl major math"]),
    (["gpa", "--examples"], ["studentctl gpa 3.5"]),
    (["run", "--examples"], ["studentctl run"]),
]


@pytest.mark.usefixtures("_isolated_db")
class TestExamplesFlag:
    @pytest.mark.parametrize(
        ("args", "keywords"),
        EXAMPLES_COMMANDS,
        ids=[" ".join(args) for args, _ in EXAMPLES_COMMANDS],
    )
    def test_examples_output(
        self, cli_runner: CliRunner, args: list[str], keywords: list[str]
    ) -> None:
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0, result.output
        assert "Examples for" in result.output
        for keyword in keywords:
            assert keyword in result.output

    def test_examples_not_in_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["add", "--help"])
        assert result.exit_code == 0
        assert "--examples" in result.output
        assert "studentctl add --first-name" not in result.output
