"""Command: convert a JSON record to a Unix timestamp."""

from __future__ import annotations

import json
from typing import IO, TYPE_CHECKING

import click

from tzstamp.commands._base import TzCommand

if TYPE_CHECKING:
    from tzstamp.commands._context import AppContext


@click.command(
    "convert-record",
    cls=TzCommand,
    examples="""\
  tzstamp convert-record request.json
  echo '{"year": 2024, "month": 12, "day": 4, "hour": 14, "minute": 30,
         "second": 0, "timezone": "+05:30"}' | tzstamp convert-record
  echo '{"year": 2025, "month": 12, "day": 4, "hour": 16, "minute": 49,
         "second": 0, "timezone": "Asia/Jerusalem", "useMilliseconds": true}' \\
    | tzstamp --json convert-record -""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.pass_obj
def convert_record(app: AppContext, source: IO[str]) -> None:
    """Convert a JSON object with year/month/day/hour/minute/second/timezone fields."""
    try:
        record = json.loads(source.read())
    except json.JSONDecodeError as exc:
        raise click.ClickException(f"Invalid JSON: {exc}") from exc
    app.emit(app.service.convert_record(record))
