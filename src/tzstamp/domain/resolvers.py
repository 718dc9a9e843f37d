"""Offset and named-zone resolution, plus the dispatcher.

Both resolvers return an instant in epoch milliseconds.  Neither depends
on the other; :func:`resolve` is their only caller.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from tzstamp.domain import instant
from tzstamp.domain.civil import CivilDateTime
from tzstamp.domain.designators import FixedOffset, NamedZone, TimezoneDesignator
from tzstamp.domain.errors import InvalidDateError, InvalidTimezoneError
from tzstamp.domain.host import CalendarHost, ZoneLookupError

# Years whose local reading can leave 1-9999, and the cycle shift applied.
_EDGE_SHIFT = {1: 1, 9999: -1}


def resolve_fixed_offset(civil: CivilDateTime, designator: FixedOffset) -> int:
    """Treat *civil* as a reading taken at a fixed offset from UTC.

    The reading and offset are composed into ISO 8601 text and parsed;
    day-of-month overflow (Feb 30) and out-of-range offsets (``+99:99``)
    both fail the parse.

    Raises:
        InvalidDateError: The composed text is not a real instant.
    """
    composed = f"{civil.isoformat()}{designator.text}"
    try:
        parsed = datetime.fromisoformat(composed)
    except ValueError as exc:
        raise InvalidDateError(composed) from exc
    return instant.from_datetime(parsed)


def resolve_named_zone(civil: CivilDateTime, zone: NamedZone, host: CalendarHost) -> int:
    """Find the instant that *zone* displays as *civil*.

    Single-sample correction: read the fields as UTC to get a provisional
    instant, ask the zone what it displays at that instant, and shift by
    the difference.  The offset is sampled only at the provisional
    instant, so a reading inside a DST gap or overlap resolves with the
    offset in force at the provisional instant.

    Raises:
        InvalidTimezoneError: The host does not recognize the zone.
        InvalidDateError: The fields are not a real calendar date.
    """
    try:
        host.validate_zone(zone.identifier)
    except ZoneLookupError as exc:
        raise InvalidTimezoneError(zone.identifier, str(exc)) from exc

    composed = f"{civil.isoformat()}[{zone.identifier}]"
    # A local reading in year 0 or 10000 has no datetime; sample one
    # 400-year cycle inward, where the calendar repeats exactly.
    cycles = _EDGE_SHIFT.get(civil.year, 0)
    sampled = replace(civil, year=civil.year + 400 * cycles) if cycles else civil
    try:
        provisional = instant.utc_millis(sampled)
        displayed = host.wall_clock_at(zone.identifier, provisional)
        reinterpreted = instant.utc_millis(displayed)
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(composed) from exc

    delta = provisional - reinterpreted
    return provisional + delta - cycles * instant.CYCLE_MS


def resolve(civil: CivilDateTime, designator: TimezoneDesignator, host: CalendarHost) -> int:
    """Dispatch to the resolver matching the designator variant."""
    if isinstance(designator, FixedOffset):
        return resolve_fixed_offset(civil, designator)
    return resolve_named_zone(civil, designator, host)
