"""Tests for the DateTimeInput record model."""

import pytest

from tzstamp.domain.errors import InvalidInputError
from tzstamp.domain.inputs import DateTimeInput
from tzstamp.domain.types import ErrorKind

RECORD = {
    "year": 2024,
    "month": 12,
    "day": 4,
    "hour": 14,
    "minute": 30,
    "second": 0,
    "timezone": "+05:30",
}


class TestFromRecord:
    def test_valid_mapping(self) -> None:
        data = DateTimeInput.from_record(RECORD)
        assert data.year == 2024
        assert data.timezone == "+05:30"
        assert data.use_milliseconds is False

    def test_model_passes_through(self) -> None:
        model = DateTimeInput(**RECORD)
        assert DateTimeInput.from_record(model) is model

    @pytest.mark.parametrize("key", ["use_milliseconds", "useMilliseconds"])
    def test_milliseconds_flag_aliases(self, key: str) -> None:
        data = DateTimeInput.from_record({**RECORD, key: True})
        assert data.use_milliseconds is True

    def test_missing_field(self) -> None:
        record = {k: v for k, v in RECORD.items() if k != "timezone"}
        with pytest.raises(InvalidInputError) as excinfo:
            DateTimeInput.from_record(record)
        assert excinfo.value.kind == ErrorKind.INVALID_INPUT
        assert str(excinfo.value).startswith("Invalid input: timezone:")
        assert excinfo.value.detail["errors"][0]["field"] == "timezone"
        assert excinfo.value.detail["errors"][0]["type"] == "missing"

    def test_several_missing_fields_reported(self) -> None:
        with pytest.raises(InvalidInputError) as excinfo:
            DateTimeInput.from_record({"year": 2024})
        fields = {e["field"] for e in excinfo.value.detail["errors"]}
        assert fields == {"month", "day", "hour", "minute", "second", "timezone"}

    @pytest.mark.parametrize("bad", ["12", 12.0, True])
    def test_strict_integers(self, bad: object) -> None:
        with pytest.raises(InvalidInputError):
            DateTimeInput.from_record({**RECORD, "month": bad})

    def test_not_a_mapping(self) -> None:
        with pytest.raises(InvalidInputError) as excinfo:
            DateTimeInput.from_record([2024, 12, 4])  # type: ignore[arg-type]
        assert "expected a mapping, got list" in str(excinfo.value)

    def test_frozen(self) -> None:
        data = DateTimeInput.from_record(RECORD)
        with pytest.raises(Exception):
            data.year = 2025  # type: ignore[misc]
