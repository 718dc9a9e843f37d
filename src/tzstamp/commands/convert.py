"""Command: convert date/time components to a Unix timestamp."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tzstamp.commands._base import TzCommand

if TYPE_CHECKING:
    from tzstamp.commands._context import AppContext


@click.command(
    cls=TzCommand,
    examples="""\
  tzstamp convert 2024 1 1 0 0 0
  tzstamp convert 2024 12 4 14 30 0 --tz=+05:30
  tzstamp convert 2024 12 4 7 30 0 --tz=-05:00
  tzstamp convert 2024 12 4 7 30 0 --tz America/New_York --ms
  tzstamp -q convert 2024 2 29 0 0 0 --tz Z""",
)
@click.argument("year", type=int)
@click.argument("month", type=int)
@click.argument("day", type=int)
@click.argument("hour", type=int)
@click.argument("minute", type=int)
@click.argument("second", type=int)
@click.option(
    "--tz",
    "timezone",
    default=None,
    help='"Z", "±HH:MM", or an IANA zone name. Defaults to [convert] default_timezone.',
)
@click.option(
    "--ms/--seconds",
    "use_milliseconds",
    default=None,
    help="Milliseconds instead of seconds. Defaults to [convert] use_milliseconds.",
)
@click.pass_obj
def convert(
    app: AppContext,
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    timezone: str | None,
    use_milliseconds: bool | None,
) -> None:
    """Convert YEAR MONTH DAY HOUR MINUTE SECOND in a timezone to a Unix timestamp."""
    defaults = app.settings.convert
    app.emit(
        app.service.convert(
            year,
            month,
            day,
            hour,
            minute,
            second,
            timezone if timezone is not None else defaults.default_timezone,
            use_milliseconds=(
                use_milliseconds if use_milliseconds is not None else defaults.use_milliseconds
            ),
        )
    )
