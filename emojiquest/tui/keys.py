from __future__ import annotations

import curses
from typing import TYPE_CHECKING

from ..models.api import ConfirmInput, IdleInput, MoveInput, QuitInput
from ..models.enums import Direction

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..models.api import InputEvent

KEY_ESCAPE = 27

KEY_MOVE_UP = [curses.KEY_UP, ord("w"), ord("W")]
KEY_MOVE_DOWN = [curses.KEY_DOWN, ord("s"), ord("S")]
KEY_MOVE_LEFT = [curses.KEY_LEFT, ord("a"), ord("A")]
KEY_MOVE_RIGHT = [curses.KEY_RIGHT, ord("d"), ord("D")]
KEY_QUIT = [KEY_ESCAPE, ord("q"), ord("Q")]
KEY_CONFIRM = [curses.KEY_ENTER, ord("\n"), ord("\r"), ord(" ")]

KEY_HELP = "Move: arrows/WASD   Quit: Esc/q   Confirm: Enter"

_MOVES: dict[int, Direction] = {
    **{k: Direction.UP for k in KEY_MOVE_UP},
    **{k: Direction.DOWN for k in KEY_MOVE_DOWN},
    **{k: Direction.LEFT for k in KEY_MOVE_LEFT},
    **{k: Direction.RIGHT for k in KEY_MOVE_RIGHT},
}


def event_for_key(key: int) -> InputEvent:
    """Translate one curses key code; anything unbound is an idle turn."""
    if key in _MOVES:
        return MoveInput(direction=_MOVES[key])
    if key in KEY_QUIT:
        return QuitInput()
    if key in KEY_CONFIRM:
        return ConfirmInput()
    return IdleInput()


def curses_input_source(stdscr) -> Iterator[InputEvent]:
    """Endless stream of events, blocking on the keyboard for each one."""
    while True:
        key = stdscr.getch()
        if key in (-1, curses.KEY_RESIZE, curses.KEY_MOUSE):
            continue
        yield event_for_key(key)
