"""The host calendar capability consumed by the resolvers.

The timezone database itself is out of scope: resolvers only see this
narrow interface, and the default implementation lives in
:mod:`tzstamp.infrastructure.calendar`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tzstamp.domain.civil import CivilDateTime


class ZoneLookupError(LookupError):
    """The host does not recognize a zone identifier."""


@runtime_checkable
class CalendarHost(Protocol):
    """Read-only access to the host clock and IANA zone rules."""

    def now_millis(self) -> int:
        """Current wall-clock instant in epoch milliseconds."""
        ...

    def validate_zone(self, zone_id: str) -> None:
        """Raise :class:`ZoneLookupError` unless *zone_id* is a known zone."""
        ...

    def is_valid_zone(self, zone_id: str) -> bool:
        """Non-raising form of :meth:`validate_zone`."""
        ...

    def wall_clock_at(self, zone_id: str, instant_ms: int) -> CivilDateTime:
        """The civil fields *zone_id* displays at *instant_ms* (second precision)."""
        ...

    def offset_at(self, zone_id: str, instant_ms: int) -> int:
        """UTC offset of *zone_id* at *instant_ms*, in minutes east of UTC."""
        ...
