"""Command: render a Unix timestamp as ISO 8601 UTC."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tzstamp.commands._base import NUMBER, TzCommand

if TYPE_CHECKING:
    from tzstamp.commands._context import AppContext


@click.command(
    cls=TzCommand,
    examples="""\
  tzstamp iso 1704067200
  tzstamp -q iso 1733315400
  tzstamp iso -- -86400""",
)
@click.argument("unix_time", type=NUMBER)
@click.pass_obj
def iso(app: AppContext, unix_time: int | float) -> None:
    """Render UNIX_TIME (seconds since the epoch) as YYYY-MM-DDTHH:mm:ss.sssZ."""
    app.emit(app.service.to_iso(unix_time))
