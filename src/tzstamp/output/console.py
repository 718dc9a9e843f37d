"""Rich Console factory and theme for tzstamp output.

Consoles render into a StringIO buffer so the formatters keep a
``-> str`` contract.  In non-TTY environments (tests, pipes) Rich
disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TZ_THEME = Theme(
    {
        "tz.ok": "bold green",
        "tz.error": "bold red",
        "tz.op": "bold cyan",
        "tz.key": "dim",
        "tz.timestamp": "bold magenta",
        "tz.iso": "bold",
        "tz.zone.fixed_offset": "blue",
        "tz.zone.named_zone": "green",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (for stable test output).
    """
    return Console(
        file=StringIO(),
        theme=TZ_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_designator(kind: str) -> str:
    """Return the Rich style name for a designator kind."""
    return f"tz.zone.{kind}" if kind in ("fixed_offset", "named_zone") else ""
