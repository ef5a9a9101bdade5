"""Console loop driving the menu state machine.

The loop owns all side effects: reading lines, printing, and calling
:class:`~guildctl.services.guilds.GuildService`.  Console access goes
through the :class:`LineIO` protocol so tests can script the input and
capture the transcript.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Protocol

import click

from guildctl.output.console import render_guilds
from guildctl.session.machine import (
    MENU_LINES,
    ConfirmingGuild,
    Exiting,
    ListingGuilds,
    MainMenu,
    State,
    Transition,
    confirm_prompt,
    on_confirmation,
    on_leave_result,
    on_listing,
    on_menu_choice,
)

if TYPE_CHECKING:
    from guildctl.services.guilds import GuildService


class LineIO(Protocol):
    def write(self, text: str) -> None: ...

    def read_line(self) -> str:
        """Next input line; raises EOFError when input is exhausted."""
        ...


class ConsoleIO:
    """Standard input/output via click."""

    def write(self, text: str) -> None:
        click.echo(text)

    def read_line(self) -> str:
        line = sys.stdin.readline()
        if not line:
            raise EOFError
        return line


class SessionLoop:
    """Run the interactive menu until the user picks "Exit"."""

    def __init__(self, guilds: GuildService, io: LineIO, *, show_table: bool = True) -> None:
        self._guilds = guilds
        self._io = io
        self._show_table = show_table

    def run(self) -> None:
        """Block until the ``Exiting`` state. EOFError from the I/O propagates."""
        state: State = MainMenu()
        while not isinstance(state, Exiting):
            transition = self.step(state)
            for message in transition.messages:
                self._io.write(message)
            state = transition.state

    def step(self, state: State) -> Transition:
        if isinstance(state, MainMenu):
            for line in MENU_LINES:
                self._io.write(line)
            return on_menu_choice(self._io.read_line())

        if isinstance(state, ListingGuilds):
            guilds = self._guilds.list_guilds()
            if guilds and self._show_table:
                self._io.write(render_guilds(guilds))
            return on_listing(guilds)

        if isinstance(state, ConfirmingGuild):
            self._io.write(confirm_prompt(state))
            transition = on_confirmation(state, self._io.read_line())
            if transition.leave is not None:
                ok = self._guilds.leave_guild(transition.leave.id)
                transition = on_leave_result(state, ok)
            return transition

        raise ValueError(f"No step for state {state!r}")
