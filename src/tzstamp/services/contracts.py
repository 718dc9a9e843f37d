"""Typed payload contracts for ConvertService results.

Payloads are validated before they leave the service layer so key
regressions (``timestamp`` vs ``value``, a missing ``iso``) fail fast in
tests and during development.
"""

from __future__ import annotations

from typing import Any, Literal, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class ConversionResultData(BaseModel):
    """Payload contract for ``ConvertService.convert`` and ``convert_record``."""

    timestamp: int
    unit: Literal["s", "ms"]
    iso: str
    timezone: str
    designator: Literal["fixed_offset", "named_zone"]
    offset_minutes: int | None = None


class NowResultData(BaseModel):
    """Payload contract for ``ConvertService.now``."""

    timestamp: int
    unit: Literal["s", "ms"]
    iso: str


class IsoResultData(BaseModel):
    """Payload contract for ``ConvertService.to_iso``."""

    timestamp: int | float
    iso: str
