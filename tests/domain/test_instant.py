"""Tests for instant arithmetic and ISO rendering."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from tzstamp.domain import instant
from tzstamp.domain.civil import CivilDateTime


class TestUtcMillis:
    def test_epoch(self) -> None:
        assert instant.utc_millis(CivilDateTime(1970, 1, 1)) == 0

    def test_known_instant(self) -> None:
        assert instant.utc_millis(CivilDateTime(2024, 1, 1)) == 1_704_067_200_000

    def test_before_epoch(self) -> None:
        assert instant.utc_millis(CivilDateTime(1969, 12, 31, 23, 59, 59)) == -1000

    def test_invalid_calendar_date(self) -> None:
        with pytest.raises(ValueError):
            instant.utc_millis(CivilDateTime(2023, 2, 29))


class TestFromDatetime:
    def test_offset_aware(self) -> None:
        moment = datetime(2024, 12, 4, 18, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))
        assert instant.from_datetime(moment) == 1_733_315_400_000

    def test_keeps_milliseconds(self) -> None:
        moment = datetime(1970, 1, 1, 0, 0, 1, 250_000, tzinfo=UTC)
        assert instant.from_datetime(moment) == 1250


class TestUnits:
    def test_seconds_floor(self) -> None:
        assert instant.to_seconds(1999) == 1
        assert instant.to_seconds(-1) == -1

    def test_in_unit(self) -> None:
        assert instant.in_unit(1_704_067_200_000, use_milliseconds=False) == 1_704_067_200
        assert instant.in_unit(1_704_067_200_000, use_milliseconds=True) == 1_704_067_200_000


class TestFormatIso:
    @pytest.mark.parametrize(
        "millis,expected",
        [
            (0, "1970-01-01T00:00:00.000Z"),
            (1_704_067_200_000, "2024-01-01T00:00:00.000Z"),
            (1_733_302_800_000, "2024-12-04T09:00:00.000Z"),
            (1_733_315_400_123, "2024-12-04T12:30:00.123Z"),
            (-1, "1969-12-31T23:59:59.999Z"),
            (951_782_400_000, "2000-02-29T00:00:00.000Z"),
            (253_402_300_799_999, "9999-12-31T23:59:59.999Z"),
        ],
    )
    def test_in_four_digit_range(self, millis: int, expected: str) -> None:
        assert instant.format_iso(millis) == expected

    def test_year_zero(self) -> None:
        assert instant.format_iso(-62_167_219_200_000) == "0000-01-01T00:00:00.000Z"

    def test_negative_year_expanded(self) -> None:
        assert instant.format_iso(-62_198_755_200_000) == "-000001-01-01T00:00:00.000Z"

    def test_year_ten_thousand_expanded(self) -> None:
        assert instant.format_iso(253_402_300_800_000) == "+010000-01-01T00:00:00.000Z"

    def test_far_future_matches_cycle_shift(self) -> None:
        """Adding 400 years moves only the year field."""
        base = 1_733_315_400_000
        assert instant.format_iso(base + 2 * instant.CYCLE_MS) == "2824-12-04T12:30:00.000Z"
