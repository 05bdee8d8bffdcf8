"""Tests for the interactive ``run`` menu."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from studentctl.cli import cli

ADD_ADA = "1\nAda\nLovelace\nada@x.com\n1234567890\n1900-01-01\nMath\n4.0\n"
EXIT = "9\n"


def _menu(cli_runner: CliRunner, *steps: str):
    return cli_runner.invoke(cli, ["run"], input="".join(steps))


@pytest.mark.usefixtures("_isolated_db")
class TestMenuLoop:
    def test_banner_and_exit(self, cli_runner: CliRunner) -> None:
        result = _menu(cli_runner, EXIT)
        assert result.exit_code == 0
        assert "STUDENT MANAGEMENT SYSTEM" in result.output
        assert "1. Add New Student" in result.output
        assert "9. Exit" in result.output
        assert result.output.rstrip().endswith("Goodbye!")

    @pytest.mark.parametrize("choice", ["0", "10", "abc", ""])
    def test_invalid_choice(self, cli_runner: CliRunner, choice: str) -> None:
        result = _menu(cli_runner, f"{choice}\n", EXIT)
        assert result.exit_code == 0
        assert "Invalid choice. Please try again." in result.output

    def test_end_of_input_exits(self, cli_runner: CliRunner) -> None:
        result = _menu(cli_runner, "")
        assert result.exit_code == 0
        assert "Goodbye!" in result.output


@pytest.mark.usefixtures("_isolated_db")
class TestMenuAdd:
    def test_add_student(self, cli_runner: CliRunner) -> None:
        result = _menu(cli_runner, ADD_ADA, EXIT)
        assert "Student added successfully! Student ID: 1" in result.output

    def test_bad_date(self, cli_runner: CliRunner) -> None:
        bad = ADD_ADA.replace("1900-01-01", "1-1-1900")
        result = _menu(cli_runner, bad, EXIT)
        assert "Invalid date format. Please use yyyy-MM-dd format." in result.output

    def test_bad_gpa(self, cli_runner: CliRunner) -> None:
        bad = ADD_ADA.replace("\n4.0\n", "\nA+\n")
        result = _menu(cli_runner, bad, EXIT)
        assert "Invalid GPA format. Please enter a valid number." in result.output

    def test_validation_failure(self, cli_runner: CliRunner) -> None:
        bad = ADD_ADA.replace("ada@x.com", "ada-at-x")
        result = _menu(cli_runner, bad, EXIT)
        assert "Failed to add student: Invalid email format." in result.output

    def test_duplicate_email(self, cli_runner: CliRunner) -> None:
        result = _menu(cli_runner, ADD_ADA, ADD_ADA, EXIT)
        assert "Failed to add student: Email already exists in the database" in result.output


@pytest.mark.usefixtures("_isolated_db")
class TestMenuRead:
    def test_view_all_empty(self, cli_runner: CliRunner) -> None:
        result = _menu(cli_runner, "2\n", EXIT)
        assert "No students found." in result.output

    def test_view_all(self, cli_runner: CliRunner) -> None:
        result = _menu(cli_runner, ADD_ADA, "2\n", EXIT)
        assert "Total students: 1" in result.output

    def test_view_one(self, cli_runner: CliRunner) -> None:
        result = _menu(cli_runner, ADD_ADA, "3\n1\n", EXIT)
        assert "Date of Birth" in result.output
        assert "Ada Lovelace" in result.output

    def test_view_one_bad_id(self, cli_runner: CliRunner) -> None:
        result = _menu(cli_runner, "3\none\n", EXIT)
        assert "Invalid Student ID format." in result.output

    def test_view_one_oversized_id(self, cli_runner: CliRunner) -> None:
        result = _menu(cli_runner, "3\n99999999999999999999\n", EXIT)
        assert result.exit_code == 0
        assert "Database error" in result.output
        assert "Goodbye!" in result.output

    def test_view_one_missing(self, cli_runner: CliRunner) -> None:
        result = _menu(cli_runner, "3\n7\n", EXIT)
        assert "Student with ID 7 not found" in result.output

    def test_search_blank(self, cli_runner: CliRunner) -> None:
        result = _menu(cli_runner, "6\n\n", EXIT)
        assert "Please enter a name to search." in result.output

    def test_search(self, cli_runner: CliRunner) -> None:
        result = _menu(cli_runner, ADD_ADA, "6\nlove\n", EXIT)
        assert '1 student(s) with name containing "love"' in result.output

    def test_major_blank(self, cli_runner: CliRunner) -> None:
        result = _menu(cli_runner, "7\n\n", EXIT)
        assert "Please enter a major to filter." in result.output

    def test_major(self, cli_runner: CliRunner) -> None:
        result = _menu(cli_runner, ADD_ADA, "7\nmat\n", EXIT)
        assert '1 student(s) with major containing "mat"' in result.output

    @pytest.mark.parametrize("value", ["4.5", "-1", "abc"])
    def test_gpa_invalid(self, cli_runner: CliRunner, value: str) -> None:
        result = _menu(cli_runner, f"8\n{value}\n", EXIT)
        assert "Invalid GPA. Please enter a value between 0.0 and 4.0." in result.output

    def test_gpa(self, cli_runner: CliRunner) -> None:
        result = _menu(cli_runner, ADD_ADA, "8\n3.5\n", EXIT)
        assert "1 student(s) with GPA >= 3.5" in result.output


@pytest.mark.usefixtures("_isolated_db")
class TestMenuUpdate:
    def test_keep_all_but_gpa(self, cli_runner: CliRunner) -> None:
        update = "4\n1\n" + "\n" * 6 + "3.5\n"
        result = _menu(cli_runner, ADD_ADA, update, EXIT)
        assert "Student updated successfully!" in result.output
        assert "3.50" in result.output

        shown = cli_runner.invoke(cli, ["--json", "show", "1"])
        data = json.loads(shown.output)["data"]
        assert data["gpa"] == 3.5
        assert data["email"] == "ada@x.com"

    def test_missing_id(self, cli_runner: CliRunner) -> None:
        result = _menu(cli_runner, "4\n3\n", EXIT)
        assert "Student with ID 3 not found" in result.output
        assert "Enter new information" not in result.output

    def test_bad_date_cancels(self, cli_runner: CliRunner) -> None:
        update = "4\n1\n\n\n\n\nyesterday\n\n\n"
        result = _menu(cli_runner, ADD_ADA, update, EXIT)
        assert "Invalid date format. Update cancelled." in result.output

    def test_bad_gpa_cancels(self, cli_runner: CliRunner) -> None:
        update = "4\n1\n" + "\n" * 6 + "lots\n"
        result = _menu(cli_runner, ADD_ADA, update, EXIT)
        assert "Invalid GPA format. Update cancelled." in result.output

    def test_validation_failure(self, cli_runner: CliRunner) -> None:
        update = "4\n1\nA\n" + "\n" * 6
        result = _menu(cli_runner, ADD_ADA, update, EXIT)
        assert "Failed to update student: Invalid first name." in result.output


@pytest.mark.usefixtures("_isolated_db")
class TestMenuDelete:
    def test_confirm_delete(self, cli_runner: CliRunner) -> None:
        result = _menu(cli_runner, ADD_ADA, "5\n1\ny\n", "2\n", EXIT)
        assert "Are you sure you want to delete this student?" in result.output
        assert "Student deleted successfully!" in result.output
        assert "No students found." in result.output

    def test_cancel_delete(self, cli_runner: CliRunner) -> None:
        result = _menu(cli_runner, ADD_ADA, "5\n1\nn\n", EXIT)
        assert "Delete operation cancelled." in result.output

    def test_missing_id(self, cli_runner: CliRunner) -> None:
        result = _menu(cli_runner, "5\n8\n", EXIT)
        assert "Student with ID 8 not found" in result.output
        assert "Are you sure" not in result.output
