"""Tests for the format_result dispatcher and OutputSettings."""

import json

from contentmenu.output.formatters import OutputSettings, format_result
from contentmenu.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="ERR", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResult:
    def test_json_mode_returns_valid_json(self) -> None:
        settings = OutputSettings(json_output=True)
        output = format_result(_ok("render_menu", count=2), settings=settings)
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"] == {"count": 2}

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_err(), settings=settings))["ok"] is False

    def test_quiet(self) -> None:
        assert format_result(_ok("init"), settings=OutputSettings(quiet=True)) == "OK: init"

    def test_default_is_rich(self) -> None:
        output = format_result(_err(msg="went wrong"))
        assert "ERROR" in output
        assert "went wrong" in output
