"""Conversion error hierarchy.

Every failure carries an :class:`ErrorKind` so callers (and the service
layer) can branch on the kind without parsing messages.  ``str(error)``
is always the human message.
"""

from __future__ import annotations

from typing import Any

from tzstamp.domain.types import ErrorKind

TIMEZONE_HINT = (
    'Use UTC offset format (e.g., "+05:30") or valid IANA timezone name '
    '(e.g., "America/New_York").'
)


class ConversionError(ValueError):
    """Base class for all conversion failures."""

    kind: ErrorKind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str, *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail or {}


class InvalidComponentError(ConversionError):
    """A numeric component is outside its accepted range."""

    def __init__(self, kind: ErrorKind, field: str, value: int, lo: int, hi: int) -> None:
        super().__init__(
            f"Invalid {field}: {value}. Must be between {lo}-{hi}",
            detail={"field": field, "value": value, "min": lo, "max": hi},
        )
        self.kind = kind
        self.field = field
        self.value = value


class InvalidDateError(ConversionError):
    """Components are in range but do not form a real calendar instant."""

    kind = ErrorKind.INVALID_DATE

    def __init__(self, composed: str) -> None:
        super().__init__(f"Invalid date: {composed}", detail={"composed": composed})
        self.composed = composed


class InvalidTimezoneError(ConversionError):
    """The designator is neither offset syntax nor a recognized IANA zone."""

    kind = ErrorKind.INVALID_TIMEZONE

    def __init__(self, timezone: str, reason: str) -> None:
        super().__init__(
            f"Invalid timezone: {timezone}. {TIMEZONE_HINT} Error: {reason}",
            detail={"timezone": timezone, "reason": reason},
        )
        self.timezone = timezone
        self.reason = reason


class InvalidInputError(ConversionError):
    """A record passed to the object adapter is missing or mistyped fields."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, reason: str, *, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(f"Invalid input: {reason}", detail={"errors": errors or []})
