"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from tzstamp.domain.errors import InvalidComponentError, InvalidTimezoneError
from tzstamp.domain.types import ErrorKind
from tzstamp.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="convert", data={"timestamp": 1_733_315_400})
        assert result.ok is True
        assert result.op == "convert"
        assert result.data == {"timestamp": 1_733_315_400}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_failure_from_exception(self) -> None:
        exc = InvalidComponentError(ErrorKind.INVALID_MONTH, "month", 13, 1, 12)
        result = ServiceResult.failure("convert", exc)
        assert result.ok is False
        assert result.op == "convert"
        assert result.data == {}
        assert result.error is not None
        assert result.error.code == "InvalidMonth"
        assert result.error.message == "Invalid month: 13. Must be between 1-12"
        assert result.error.detail == {"field": "month", "value": 13, "min": 1, "max": 12}

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=True,
            op="iso",
            data={"iso": "2024-01-01T00:00:00.000Z"},
            meta={"telemetry": {"name": "x"}},
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["iso"] == "2024-01-01T00:00:00.000Z"
        assert parsed["meta"]["telemetry"]["name"] == "x"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="now")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_from_timezone_exception(self) -> None:
        error = ServiceError.from_exception(InvalidTimezoneError("Not/AZone", "missing"))
        assert error.code == "InvalidTimezone"
        assert error.message.startswith("Invalid timezone: Not/AZone.")
        assert error.detail == {"timezone": "Not/AZone", "reason": "missing"}

    def test_default_detail(self) -> None:
        error = ServiceError(code="InvalidDate", message="Invalid date: x")
        assert error.detail == {}
