"""Command: print the current Unix timestamp."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tzstamp.commands._base import TzCommand

if TYPE_CHECKING:
    from tzstamp.commands._context import AppContext


@click.command(
    cls=TzCommand,
    examples="""\
  tzstamp now
  tzstamp now --ms
  tzstamp -q now""",
)
@click.option(
    "--ms/--seconds",
    "use_milliseconds",
    default=None,
    help="Milliseconds instead of seconds. Defaults to [convert] use_milliseconds.",
)
@click.pass_obj
def now(app: AppContext, use_milliseconds: bool | None) -> None:
    """Print the current Unix timestamp from the system clock."""
    if use_milliseconds is None:
        use_milliseconds = app.settings.convert.use_milliseconds
    app.emit(app.service.now(use_milliseconds=use_milliseconds))
