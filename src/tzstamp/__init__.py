"""tzstamp — deterministic, timezone-aware Unix timestamp construction."""

from __future__ import annotations

from tzstamp.domain.errors import (
    ConversionError,
    InvalidComponentError,
    InvalidDateError,
    InvalidInputError,
    InvalidTimezoneError,
)
from tzstamp.domain.inputs import DateTimeInput
from tzstamp.domain.types import ErrorKind
from tzstamp.timestamps import (
    date_to_unix_time,
    date_to_unix_time_from_object,
    get_current_unix_time,
    unix_time_to_iso,
)

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "DateTimeInput",
    "ErrorKind",
    "InvalidComponentError",
    "InvalidDateError",
    "InvalidInputError",
    "InvalidTimezoneError",
    "__version__",
    "date_to_unix_time",
    "date_to_unix_time_from_object",
    "get_current_unix_time",
    "unix_time_to_iso",
]
