"""ConvertService — conversions as ServiceResult for the CLI.

Wraps the same validate -> classify -> resolve pipeline as
:mod:`tzstamp.timestamps`, but reports failures as structured results
and adds diagnostics: the resolved offset and a warning when a named
zone's offset changes between the provisional and the final instant
(the reading sits in or near a DST transition).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from tzstamp.domain import instant
from tzstamp.domain.civil import CivilDateTime, validate_components
from tzstamp.domain.designators import FixedOffset, TimezoneDesignator, classify_designator
from tzstamp.domain.errors import ConversionError
from tzstamp.domain.inputs import DateTimeInput
from tzstamp.domain.resolvers import resolve
from tzstamp.services.base import BaseService
from tzstamp.services.contracts import (
    ConversionResultData,
    IsoResultData,
    NowResultData,
    dump_validated,
)
from tzstamp.services.result import ServiceResult
from tzstamp.services.telemetry import trace_span, traced
from tzstamp.timestamps import unix_time_to_iso

logger = logging.getLogger(__name__)


def _unit(use_milliseconds: bool) -> str:
    return "ms" if use_milliseconds else "s"


class ConvertService(BaseService):
    """Timestamp conversions against an injected :class:`CalendarHost`."""

    @traced
    def convert(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        timezone: str,
        *,
        use_milliseconds: bool = False,
    ) -> ServiceResult:
        """Convert components in *timezone* to a Unix timestamp."""
        op = "convert"
        try:
            with trace_span("validate"):
                civil = validate_components(year, month, day, hour, minute, second)
            return self._resolve(op, civil, timezone, use_milliseconds=use_milliseconds)
        except ConversionError as exc:
            logger.debug("Conversion failed (%s): %s", exc.kind, exc.message)
            return ServiceResult.failure(op, exc)

    @traced
    def convert_record(self, record: DateTimeInput | Mapping[str, Any]) -> ServiceResult:
        """Convert a record (mapping or :class:`DateTimeInput`)."""
        op = "convert_record"
        try:
            with trace_span("parse_record"):
                data = DateTimeInput.from_record(record)
            with trace_span("validate"):
                civil = validate_components(
                    data.year, data.month, data.day, data.hour, data.minute, data.second
                )
            return self._resolve(
                op, civil, data.timezone, use_milliseconds=data.use_milliseconds
            )
        except ConversionError as exc:
            logger.debug("Conversion failed (%s): %s", exc.kind, exc.message)
            return ServiceResult.failure(op, exc)

    @traced
    def now(self, *, use_milliseconds: bool = False) -> ServiceResult:
        """Current Unix timestamp from the host clock."""
        millis = self._host.now_millis()
        data = dump_validated(
            NowResultData,
            {
                "timestamp": instant.in_unit(millis, use_milliseconds),
                "unit": _unit(use_milliseconds),
                "iso": instant.format_iso(millis),
            },
        )
        return ServiceResult(ok=True, op="now", data=data)

    @traced
    def to_iso(self, unix_time: int | float) -> ServiceResult:
        """Render a Unix timestamp (seconds) as an ISO 8601 UTC string."""
        op = "iso"
        try:
            iso = unix_time_to_iso(unix_time)
        except ConversionError as exc:
            logger.debug("ISO rendering failed (%s): %s", exc.kind, exc.message)
            return ServiceResult.failure(op, exc)
        data = dump_validated(IsoResultData, {"timestamp": unix_time, "iso": iso})
        return ServiceResult(ok=True, op=op, data=data)

    # ── Internals ─────────────────────────────────────────────────────

    def _resolve(
        self,
        op: str,
        civil: CivilDateTime,
        timezone: str,
        *,
        use_milliseconds: bool,
    ) -> ServiceResult:
        warnings: list[str] = []

        with trace_span("classify") as span:
            designator = classify_designator(timezone)
            if span is not None:
                span.annotate("designator", str(designator.kind))

        with trace_span("resolve"):
            millis = resolve(civil, designator, self._host)

        offset = self._offset_minutes(civil, designator, millis, warnings)
        logger.debug("Resolved %s %s to %d ms", civil.isoformat(), timezone, millis)

        data = dump_validated(
            ConversionResultData,
            {
                "timestamp": instant.in_unit(millis, use_milliseconds),
                "unit": _unit(use_milliseconds),
                "iso": instant.format_iso(millis),
                "timezone": timezone,
                "designator": str(designator.kind),
                "offset_minutes": offset,
            },
        )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def _offset_minutes(
        self,
        civil: CivilDateTime,
        designator: TimezoneDesignator,
        millis: int,
        warnings: list[str],
    ) -> int | None:
        """Offset in force at the result; flags a DST-boundary mismatch."""
        if isinstance(designator, FixedOffset):
            return designator.total_minutes

        zone_id = designator.identifier
        try:
            resolved = self._host.offset_at(zone_id, millis)
            sampled = self._host.offset_at(zone_id, instant.utc_millis(civil))
        except (ValueError, OverflowError):
            return None

        if sampled != resolved:
            warnings.append(
                f"{civil.isoformat()} in {zone_id} is near a DST transition: "
                f"offset sampled as {sampled} min, offset at result is {resolved} min"
            )
        return resolved
