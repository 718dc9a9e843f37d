"""Instant arithmetic: milliseconds since the epoch is the canonical unit.

Seconds are a derived view (floor division by 1000).  The ISO rendering
covers the full integer range by shifting through 400-year Gregorian
cycles, which repeat exactly in days, so only the year needs correcting.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from tzstamp.domain.civil import CivilDateTime

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
MILLISECOND = timedelta(milliseconds=1)
MS_PER_SECOND = 1000
CYCLE_MS = 146_097 * 86_400 * MS_PER_SECOND  # 400 Gregorian years


def from_datetime(moment: datetime) -> int:
    """Milliseconds between the epoch and an aware datetime."""
    return (moment - EPOCH) // MILLISECOND


def utc_millis(civil: CivilDateTime) -> int:
    """Interpret *civil* as UTC and return its instant.

    Raises:
        ValueError: The fields do not form a real calendar date.
    """
    moment = datetime(
        civil.year,
        civil.month,
        civil.day,
        civil.hour,
        civil.minute,
        civil.second,
        tzinfo=UTC,
    )
    return from_datetime(moment)


def to_seconds(millis: int) -> int:
    return millis // MS_PER_SECOND


def in_unit(millis: int, use_milliseconds: bool) -> int:
    """Return *millis* unchanged or as whole seconds."""
    return millis if use_milliseconds else to_seconds(millis)


def _year_text(year: int) -> str:
    if 0 <= year <= 9999:
        return f"{year:04d}"
    sign = "+" if year > 0 else "-"
    return f"{sign}{abs(year):06d}"


def format_iso(millis: int) -> str:
    """Render an instant as ``YYYY-MM-DDTHH:mm:ss.sssZ`` in UTC.

    Years outside 0000-9999 use the expanded ``±YYYYYY`` form.
    """
    cycles, offset = divmod(millis, CYCLE_MS)
    moment = EPOCH + timedelta(milliseconds=offset)
    year = moment.year + 400 * cycles
    return (
        f"{_year_text(year)}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
        f".{moment.microsecond // 1000:03d}Z"
    )
