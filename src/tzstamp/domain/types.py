"""Classification enums for designators and conversion failures."""

from __future__ import annotations

from enum import StrEnum


class DesignatorKind(StrEnum):
    """The two timezone designator variants."""

    FIXED_OFFSET = "fixed_offset"
    NAMED_ZONE = "named_zone"


class ErrorKind(StrEnum):
    """Failure kinds raised by conversions.

    None of them are transient: every kind is an input-validation failure.
    """

    INVALID_MONTH = "InvalidMonth"
    INVALID_DAY = "InvalidDay"
    INVALID_HOUR = "InvalidHour"
    INVALID_MINUTE = "InvalidMinute"
    INVALID_SECOND = "InvalidSecond"
    INVALID_DATE = "InvalidDate"
    INVALID_TIMEZONE = "InvalidTimezone"
    INVALID_INPUT = "InvalidInput"
