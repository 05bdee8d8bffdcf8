"""Tests for the list, search, major, and gpa commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from studentctl.cli import cli

_PEOPLE = [
    ("Ada", "Lovelace", "ada@x.com", "Math", "4.0"),
    ("Alan", "Turing", "alan@x.com", "Computer Science", "3.6"),
    ("Grace", "Hopper", "grace@x.com", "Mathematics", "3.2"),
]


@pytest.fixture
def seeded(cli_runner: CliRunner, _isolated_db: None) -> None:
    for first, last, email, major, gpa in _PEOPLE:
        result = cli_runner.invoke(
            cli,
            [
                "add",
                "--first-name", first,
                "--last-name", last,
                "--email", email,
                "--phone", "1234567890",
                "--dob", "1990-05-17",
                "--major", major,
                "--gpa", gpa,
            ],
        )  # fmt: skip
        assert result.exit_code == 0, result.output


def _names(output: str) -> list[str]:
    return [item["first_name"] for item in json.loads(output)["data"]["items"]]


@pytest.mark.usefixtures("seeded")
class TestList:
    def test_list_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["list"])
        assert result.exit_code == 0
        assert "Total students: 3" in result.output
        assert "Hopper" in result.output

    def test_list_quiet_ids(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "list"])
        assert result.output.split() == ["1", "2", "3"]

    def test_list_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "list"])
        assert _names(result.output) == ["Ada", "Alan", "Grace"]


@pytest.mark.usefixtures("_isolated_db")
class TestEmpty:
    def test_empty_list(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["list"])
        assert result.exit_code == 0
        assert "No students found." in result.output


@pytest.mark.usefixtures("seeded")
class TestSearch:
    def test_search_is_case_insensitive(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "search", "AL"])
        assert _names(result.output) == ["Alan"]

    def test_search_last_name(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["search", "hop"])
        assert '1 student(s) with name containing "hop"' in result.output

    def test_blank_search(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["search", "  "])
        assert result.exit_code == 0
        assert "No students found." in result.output

    def test_wildcards_are_literal(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "search", "%"])
        assert _names(result.output) == []


@pytest.mark.usefixtures("seeded")
class TestMajor:
    def test_major_highest_gpa_first(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "major", "math"])
        assert _names(result.output) == ["Ada", "Grace"]

    def test_major_no_match(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["major", "Biology"])
        assert "No students found." in result.output


@pytest.mark.usefixtures("seeded")
class TestGpa:
    def test_threshold_inclusive(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "gpa", "3.6"])
        assert _names(result.output) == ["Ada", "Alan"]

    def test_caption(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["gpa", "3.0"])
        assert "3 student(s) with GPA >= 3.0" in result.output

    def test_out_of_range_threshold(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "gpa", "4.1"])
        assert result.exit_code == 0
        assert _names(result.output) == []

    def test_non_numeric(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["gpa", "high"])
        assert result.exit_code == 2

    @pytest.mark.parametrize("value", ["nan", "inf", "1_0"])
    def test_non_decimal_forms_rejected(self, cli_runner: CliRunner, value: str) -> None:
        result = cli_runner.invoke(cli, ["gpa", value])
        assert result.exit_code == 2
