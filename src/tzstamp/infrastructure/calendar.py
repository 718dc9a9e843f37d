"""ZoneInfoCalendar — the default :class:`CalendarHost`.

Zone rules come from the stdlib ``zoneinfo`` module, which reads the
system tz database and falls back to the ``tzdata`` package on hosts
without one (Windows, slim containers).
"""

from __future__ import annotations

import time
from datetime import timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tzstamp.domain.civil import CivilDateTime
from tzstamp.domain.host import ZoneLookupError
from tzstamp.domain.instant import CYCLE_MS, EPOCH

_MINUTE = timedelta(minutes=1)
# Instants within a day of either end of the datetime range.
_SAFE_LOW_MS = -62_135_596_800_000 + 86_400_000
_SAFE_HIGH_MS = 253_402_300_800_000 - 86_400_000


class ZoneInfoCalendar:
    """Host calendar backed by ``zoneinfo`` and the system clock.

    Stateless from the caller's side: ``ZoneInfo`` keeps its own
    process-wide cache of loaded zones, and nothing here mutates it.
    """

    def now_millis(self) -> int:
        return time.time_ns() // 1_000_000

    def _zone(self, zone_id: str) -> ZoneInfo:
        try:
            return ZoneInfo(zone_id)
        except ZoneInfoNotFoundError as exc:
            reason = exc.args[0] if exc.args else f"No time zone found with key {zone_id}"
            raise ZoneLookupError(reason) from exc
        except (ValueError, OSError) as exc:
            # Malformed keys ("../etc", "") and directory names ("America")
            raise ZoneLookupError(f"No time zone found with key {zone_id}: {exc}") from exc

    def validate_zone(self, zone_id: str) -> None:
        self._zone(zone_id)

    def is_valid_zone(self, zone_id: str) -> bool:
        try:
            self._zone(zone_id)
        except ZoneLookupError:
            return False
        return True

    def wall_clock_at(self, zone_id: str, instant_ms: int) -> CivilDateTime:
        """Display *instant_ms* in *zone_id*, truncated to whole seconds.

        Raises:
            ZoneLookupError: Unknown zone.
            OverflowError: The local reading falls outside years 1-9999.
        """
        zone = self._zone(zone_id)
        local = (EPOCH + timedelta(milliseconds=instant_ms)).astimezone(zone)
        return CivilDateTime(
            year=local.year,
            month=local.month,
            day=local.day,
            hour=local.hour,
            minute=local.minute,
            second=local.second,
        )

    def offset_at(self, zone_id: str, instant_ms: int) -> int:
        """Offset in minutes east of UTC; defined across the whole 1-9999 range."""
        zone = self._zone(zone_id)
        if instant_ms < _SAFE_LOW_MS:
            instant_ms += CYCLE_MS
        elif instant_ms >= _SAFE_HIGH_MS:
            instant_ms -= CYCLE_MS
        local = (EPOCH + timedelta(milliseconds=instant_ms)).astimezone(zone)
        offset = local.utcoffset()
        if offset is None:
            return 0
        return offset // _MINUTE
