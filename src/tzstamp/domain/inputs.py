"""Record form of a conversion request.

Accepted by :func:`tzstamp.date_to_unix_time_from_object`.  Field names
follow the positional arguments; ``useMilliseconds`` is accepted as an
alias so records produced by JavaScript callers validate unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from tzstamp.domain.errors import InvalidInputError


class DateTimeInput(BaseModel):
    """Date/time components plus a timezone designator."""

    model_config = ConfigDict(frozen=True, strict=True, populate_by_name=True)

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    timezone: str
    use_milliseconds: bool = Field(
        default=False,
        validation_alias=AliasChoices("use_milliseconds", "useMilliseconds"),
    )

    @classmethod
    def from_record(cls, record: DateTimeInput | Mapping[str, Any]) -> DateTimeInput:
        """Validate a mapping (or pass through an existing model).

        Raises:
            InvalidInputError: A required field is missing or mistyped.
        """
        if isinstance(record, cls):
            return record
        if not isinstance(record, Mapping):
            raise InvalidInputError(f"expected a mapping, got {type(record).__name__}")
        try:
            return cls.model_validate(dict(record))
        except ValidationError as exc:
            errors = [
                {
                    "field": ".".join(str(part) for part in err["loc"]),
                    "message": err["msg"],
                    "type": err["type"],
                }
                for err in exc.errors()
            ]
            reason = "; ".join(f"{e['field']}: {e['message']}" for e in errors)
            raise InvalidInputError(reason, errors=errors) from exc
