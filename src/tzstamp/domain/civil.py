"""CivilDateTime and component range validation.

A civil (wall-clock) reading has no absolute meaning until it is paired
with a timezone designator.  Validation here is a pure range check: it
never cross-checks day-of-month against the month, which is left to the
calendar construction in the resolvers.
"""

from __future__ import annotations

from dataclasses import dataclass

from tzstamp.domain.errors import InvalidComponentError, InvalidInputError
from tzstamp.domain.types import ErrorKind

# Checked in this order; the first failure wins.
COMPONENT_RANGES: dict[str, tuple[ErrorKind, int, int]] = {
    "month": (ErrorKind.INVALID_MONTH, 1, 12),
    "day": (ErrorKind.INVALID_DAY, 1, 31),
    "hour": (ErrorKind.INVALID_HOUR, 0, 23),
    "minute": (ErrorKind.INVALID_MINUTE, 0, 59),
    "second": (ErrorKind.INVALID_SECOND, 0, 59),
}


@dataclass(frozen=True, slots=True)
class CivilDateTime:
    """A wall-clock reading: year, month, day, hour, minute, second."""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    def isoformat(self) -> str:
        """Render as ``YYYY-MM-DDTHH:MM:SS`` with no zone suffix."""
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )


def _require_int(field: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{field} must be an integer, got {value!r}")
    return value


def validate_components(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
) -> CivilDateTime:
    """Range-check the six components and build a :class:`CivilDateTime`.

    Raises:
        InvalidInputError: A component is not an integer.
        InvalidComponentError: A component is outside its range.
    """
    values = {
        "year": _require_int("year", year),
        "month": _require_int("month", month),
        "day": _require_int("day", day),
        "hour": _require_int("hour", hour),
        "minute": _require_int("minute", minute),
        "second": _require_int("second", second),
    }
    for field, (kind, lo, hi) in COMPONENT_RANGES.items():
        value = values[field]
        if value < lo or value > hi:
            raise InvalidComponentError(kind, field, value, lo, hi)
    return CivilDateTime(**values)
