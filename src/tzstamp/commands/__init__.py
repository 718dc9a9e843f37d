"""Subcommand modules for tzstamp.

register_commands() uses deferred imports to keep ``tzstamp --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from tzstamp.commands.convert import convert
    from tzstamp.commands.iso import iso
    from tzstamp.commands.now import now
    from tzstamp.commands.record import convert_record

    cli.add_command(convert)
    cli.add_command(convert_record)
    cli.add_command(now)
    cli.add_command(iso)
