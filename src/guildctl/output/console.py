"""Rich Console factory and guild table rendering.

Creates Console instances that render to a StringIO buffer so callers get
plain strings back.  In non-TTY environments (tests, pipes) Rich
automatically disables color codes.
"""

from __future__ import annotations

from collections.abc import Sequence
from io import StringIO

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from guildctl.domain.models import Guild

GUILD_THEME = Theme(
    {
        "guild.index": "dim",
        "guild.id": "bold blue",
        "guild.name": "bold",
        "guild.count": "bold cyan",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=GUILD_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def render_guilds(guilds: Sequence[Guild], *, no_color: bool = False) -> str:
    """Render a numbered table of *guilds* with a count header."""
    console = create_console(no_color=no_color)
    console.print(f"Found [guild.count]{len(guilds)}[/] guild(s).")
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("#", style="guild.index", justify="right")
    table.add_column("ID", style="guild.id")
    table.add_column("Name", style="guild.name")
    for number, guild in enumerate(guilds, start=1):
        table.add_row(str(number), Text(guild.id or "-"), Text(guild.name or "-"))
    console.print(table)
    return get_output(console).rstrip("\n")
