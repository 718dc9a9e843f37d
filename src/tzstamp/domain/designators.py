"""Timezone designators and the syntactic classifier.

A designator string is classified exactly once into one of two variants:

- :class:`FixedOffset` for ``"Z"`` or ``±HH:MM``
- :class:`NamedZone` for anything else (an IANA zone name candidate)

Classification is syntax only.  ``"+99:99"`` is a FixedOffset and fails
later at calendar construction; ``"Not/AZone"`` is a NamedZone and fails
later at zone lookup.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from tzstamp.domain.errors import InvalidInputError
from tzstamp.domain.types import DesignatorKind

UTC_DESIGNATOR = "Z"
OFFSET_PATTERN: re.Pattern[str] = re.compile(r"([+-])([0-9]{2}):([0-9]{2})")


@dataclass(frozen=True, slots=True)
class FixedOffset:
    """A constant offset from UTC, kept alongside its source text."""

    sign: int
    hours: int
    minutes: int
    text: str

    @property
    def kind(self) -> DesignatorKind:
        return DesignatorKind.FIXED_OFFSET

    @property
    def total_minutes(self) -> int:
        return self.sign * (self.hours * 60 + self.minutes)

    @property
    def is_utc(self) -> bool:
        return self.total_minutes == 0


@dataclass(frozen=True, slots=True)
class NamedZone:
    """An IANA zone identifier; validity is unknown until resolution."""

    identifier: str

    @property
    def kind(self) -> DesignatorKind:
        return DesignatorKind.NAMED_ZONE


TimezoneDesignator = FixedOffset | NamedZone

UTC = FixedOffset(sign=1, hours=0, minutes=0, text=UTC_DESIGNATOR)


def classify_designator(text: str) -> TimezoneDesignator:
    """Classify *text* as a :class:`FixedOffset` or a :class:`NamedZone`.

    Raises:
        InvalidInputError: *text* is not a string.
    """
    if not isinstance(text, str):
        raise InvalidInputError(f"timezone must be a string, got {text!r}")
    if text == UTC_DESIGNATOR:
        return UTC
    match = OFFSET_PATTERN.fullmatch(text)
    if match is None:
        return NamedZone(identifier=text)
    sign, hours, minutes = match.groups()
    return FixedOffset(
        sign=-1 if sign == "-" else 1,
        hours=int(hours),
        minutes=int(minutes),
        text=text,
    )
