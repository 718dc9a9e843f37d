"""Shared pytest fixtures and test helpers for tzstamp tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from click.testing import CliRunner

from tzstamp.domain.civil import CivilDateTime
from tzstamp.domain.host import ZoneLookupError
from tzstamp.domain.instant import EPOCH
from tzstamp.services.telemetry import _current_span, disable_telemetry

# Tuesday 2024-12-04 12:30:00.123 UTC
FIXED_NOW_MS = 1_733_315_400_123


class FakeCalendar:
    """CalendarHost with fixed per-zone offsets and a frozen clock."""

    def __init__(self, offsets: dict[str, int] | None = None, now_ms: int = FIXED_NOW_MS) -> None:
        self.offsets = offsets if offsets is not None else {"Test/Plus0130": 90}
        self.now_ms = now_ms
        self.lookups: list[str] = []

    def now_millis(self) -> int:
        return self.now_ms

    def validate_zone(self, zone_id: str) -> None:
        self.lookups.append(zone_id)
        if zone_id not in self.offsets:
            raise ZoneLookupError(f"unknown zone {zone_id}")

    def is_valid_zone(self, zone_id: str) -> bool:
        return zone_id in self.offsets

    def wall_clock_at(self, zone_id: str, instant_ms: int) -> CivilDateTime:
        self.validate_zone(zone_id)
        local = EPOCH + timedelta(milliseconds=instant_ms, minutes=self.offsets[zone_id])
        return CivilDateTime(
            local.year, local.month, local.day, local.hour, local.minute, local.second
        )

    def offset_at(self, zone_id: str, instant_ms: int) -> int:
        self.validate_zone(zone_id)
        return self.offsets[zone_id]


def utc_seconds(*args: int) -> int:
    """Epoch seconds for a UTC civil time, computed independently of tzstamp."""
    return int(datetime(*args, tzinfo=UTC).timestamp())


@pytest.fixture
def fake_host() -> FakeCalendar:
    return FakeCalendar()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty directory so no stray tzstamp.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop TZSTAMP_* variables inherited from the developer's shell."""
    for key in list(os.environ):
        if key.startswith("TZSTAMP_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo telemetry and logging changes made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    tz = logging.getLogger("tzstamp")
    tz_level = tz.level
    yield
    disable_telemetry()
    _current_span.set(None)
    root.handlers = original_handlers
    root.setLevel(original_level)
    tz.setLevel(tz_level)
