"""Tests for format_result dispatch."""

import json

from studentctl.output.formatters import OutputSettings, format_result
from studentctl.services.result import ServiceResult


def _created() -> ServiceResult:
    return ServiceResult(ok=True, op="create_student", data={"id": 3})


class TestFormatResult:
    def test_default_is_rich(self) -> None:
        output = format_result(_created())
        assert "OK" in output
        assert "id: 3" in output

    def test_json_output(self) -> None:
        output = format_result(_created(), settings=OutputSettings(json_output=True))
        parsed = json.loads(output)
        assert parsed["ok"] is True
        assert parsed["op"] == "create_student"
        assert parsed["data"] == {"id": 3}
        assert parsed["error"] is None

    def test_quiet_output(self) -> None:
        assert format_result(_created(), settings=OutputSettings(quiet=True)) == "3"

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(_created(), settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["data"]["id"] == 3
