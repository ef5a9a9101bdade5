"""Menu and confirmation state machine.

Every handler here is pure: it takes the current state plus one piece of
input (a console line, a listing, or a leave outcome) and returns a
:class:`Transition` naming the next state and the lines to print. Network
calls happen in :mod:`guildctl.session.loop`, which feeds their results
back in.

States::

    MainMenu --"1"--> ListingGuilds --[guilds]--> ConfirmingGuild(0)
        |  ^                 |                     |  "y"/"n" -> ConfirmingGuild(i+1)
        |  '----[no guilds]--'                     |  after the last guild -> MainMenu
        '--"2"--> Exiting
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from guildctl.domain.models import Guild

MENU_LINES = (
    "What would you like to do?",
    "1. Mass leave guilds",
    "2. Exit",
)
INVALID_INPUT = "Invalid input! Please try again."
NO_GUILDS = "No guilds found."


@dataclass(frozen=True)
class Tally:
    """Outcome counts for one confirmation pass."""

    left: int = 0
    failed: int = 0
    skipped: int = 0

    def summary(self) -> str:
        return f"Done: left {self.left}, failed {self.failed}, skipped {self.skipped}."


@dataclass(frozen=True)
class MainMenu:
    pass


@dataclass(frozen=True)
class ListingGuilds:
    pass


@dataclass(frozen=True)
class ConfirmingGuild:
    guilds: tuple[Guild, ...]
    index: int = 0
    tally: Tally = field(default_factory=Tally)

    @property
    def guild(self) -> Guild:
        return self.guilds[self.index]

    @property
    def is_last(self) -> bool:
        return self.index >= len(self.guilds) - 1


@dataclass(frozen=True)
class Exiting:
    pass


State = MainMenu | ListingGuilds | ConfirmingGuild | Exiting


@dataclass(frozen=True)
class Transition:
    """Next state, lines to print, and a guild to leave before continuing.

    When ``leave`` is set the caller must perform the leave and pass the
    outcome to :func:`on_leave_result` instead of using ``state`` directly.
    """

    state: State
    messages: tuple[str, ...] = ()
    leave: Guild | None = None


def confirm_prompt(state: ConfirmingGuild) -> str:
    return f"Would you like to leave guild {state.guild.name} (y/n)?"


def on_menu_choice(line: str) -> Transition:
    choice = line.strip()
    if choice == "1":
        return Transition(ListingGuilds())
    if choice == "2":
        return Transition(Exiting())
    return Transition(MainMenu(), (INVALID_INPUT,))


def on_listing(guilds: Sequence[Guild]) -> Transition:
    if not guilds:
        return Transition(MainMenu(), (NO_GUILDS,))
    return Transition(ConfirmingGuild(tuple(guilds)))


def _advance(state: ConfirmingGuild, tally: Tally, message: str) -> Transition:
    if state.is_last:
        return Transition(MainMenu(), (message, tally.summary()))
    return Transition(ConfirmingGuild(state.guilds, state.index + 1, tally), (message,))


def on_confirmation(state: ConfirmingGuild, line: str) -> Transition:
    """Handle the answer to :func:`confirm_prompt`.

    ``"y"`` asks the caller to leave the guild. ``"n"`` skips it. Anything
    else re-prompts for the same guild.
    """
    answer = line.strip()
    if answer == "y":
        return Transition(state, leave=state.guild)
    if answer == "n":
        tally = Tally(state.tally.left, state.tally.failed, state.tally.skipped + 1)
        return _advance(state, tally, f"Skipped leaving guild {state.guild.name}.")
    return Transition(state, (INVALID_INPUT,))


def on_leave_result(state: ConfirmingGuild, ok: bool) -> Transition:
    name = state.guild.name
    if ok:
        tally = Tally(state.tally.left + 1, state.tally.failed, state.tally.skipped)
        return _advance(state, tally, f"Successfully left guild {name}!")
    tally = Tally(state.tally.left, state.tally.failed + 1, state.tally.skipped)
    return _advance(state, tally, f"Failed to leave guild {name}!")
