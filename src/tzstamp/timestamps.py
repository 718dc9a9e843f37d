"""Public conversion API: civil date/time + timezone <-> Unix timestamps.

Two designator formats are accepted:

1. UTC offsets: ``"Z"``, ``"+05:30"``, ``"-08:00"``
2. IANA zone names: ``"America/New_York"``, ``"Asia/Kolkata"``

Usage::

    >>> date_to_unix_time(2024, 12, 4, 14, 30, 0, "+05:30")
    1733302800
    >>> date_to_unix_time(2024, 12, 4, 7, 30, 0, "America/New_York", use_milliseconds=True)
    1733315400000
    >>> unix_time_to_iso(1704067200)
    '2024-01-01T00:00:00.000Z'

Every function is pure apart from reading the host clock and zone rules,
so calls are safe from any thread.  Failures raise a
:class:`~tzstamp.domain.errors.ConversionError` subclass and nothing is
logged here.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from tzstamp.domain import instant
from tzstamp.domain.civil import validate_components
from tzstamp.domain.designators import classify_designator
from tzstamp.domain.errors import InvalidInputError
from tzstamp.domain.host import CalendarHost
from tzstamp.domain.inputs import DateTimeInput
from tzstamp.domain.resolvers import resolve
from tzstamp.infrastructure.calendar import ZoneInfoCalendar

_default_host: CalendarHost = ZoneInfoCalendar()


def default_host() -> CalendarHost:
    """The zoneinfo-backed host used when no ``host`` is passed."""
    return _default_host


def date_to_unix_time(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    timezone: str,
    use_milliseconds: bool = False,
    *,
    host: CalendarHost | None = None,
) -> int:
    """Convert date/time components in *timezone* to a Unix timestamp.

    Args:
        year: Full year (e.g. 2024).
        month: 1-12.
        day: 1-31 (checked against the month during resolution).
        hour: 0-23.
        minute: 0-59.
        second: 0-59.
        timezone: ``"Z"``, ``"±HH:MM"``, or an IANA zone name.
        use_milliseconds: Return milliseconds instead of seconds.
        host: Calendar capability override (defaults to zoneinfo).

    Raises:
        InvalidComponentError: A component is out of range.
        InvalidDateError: The components are not a real date.
        InvalidTimezoneError: The zone name is not recognized.
    """
    civil = validate_components(year, month, day, hour, minute, second)
    designator = classify_designator(timezone)
    millis = resolve(civil, designator, host or _default_host)
    return instant.in_unit(millis, use_milliseconds)


def date_to_unix_time_from_object(
    record: DateTimeInput | Mapping[str, Any],
    *,
    host: CalendarHost | None = None,
) -> int:
    """Record form of :func:`date_to_unix_time`.

    *record* is a :class:`DateTimeInput` or a mapping with the keys
    ``year, month, day, hour, minute, second, timezone`` and an optional
    ``use_milliseconds`` (or ``useMilliseconds``).

    Raises:
        InvalidInputError: A required field is missing or mistyped.
    """
    data = DateTimeInput.from_record(record)
    return date_to_unix_time(
        data.year,
        data.month,
        data.day,
        data.hour,
        data.minute,
        data.second,
        data.timezone,
        data.use_milliseconds,
        host=host,
    )


def get_current_unix_time(
    use_milliseconds: bool = False,
    *,
    host: CalendarHost | None = None,
) -> int:
    """Current Unix timestamp from the host clock (floored)."""
    return instant.in_unit((host or _default_host).now_millis(), use_milliseconds)


def unix_time_to_iso(unix_time: int | float) -> str:
    """Render a Unix timestamp (seconds) as ``YYYY-MM-DDTHH:mm:ss.sssZ``.

    Fractional seconds are truncated toward zero at millisecond precision.

    Raises:
        InvalidInputError: *unix_time* (in milliseconds) is infinite or NaN.
    """
    if isinstance(unix_time, int):
        millis = unix_time * instant.MS_PER_SECOND
    else:
        scaled = unix_time * instant.MS_PER_SECOND
        if not math.isfinite(scaled):
            raise InvalidInputError(f"unix_time must be finite, got {unix_time!r}")
        millis = math.trunc(scaled)
    return instant.format_iso(millis)
