from __future__ import annotations

import curses
from typing import TYPE_CHECKING

from ..core.glyphs import VS16
from .keys import KEY_HELP

if TYPE_CHECKING:
    from ..models.api import Snapshot

HEADER = "This area displays helpful information about the game."
# emoji glyphs take two terminal columns
GLYPH_WIDTH = 2


def frame_lines(snapshot: Snapshot) -> list[tuple[str, int, int]]:
    """(text, curses attribute, columns per character) for each line of a frame."""
    lines = [(HEADER, curses.A_DIM, 1), (KEY_HELP, curses.A_DIM, 1), ("", 0, 1)]
    lines.extend((row, 0, GLYPH_WIDTH) for row in snapshot.rows())
    lines.append(("", 0, 1))
    lines.append(
        ("Player Inventory: " + " ".join(snapshot.inventory), curses.A_BOLD, 1)
    )
    lines.append(("", 0, 1))
    lines.append((snapshot.status, 0, 1))
    return lines


def crop(text: str, cols: int, cell: int) -> str:
    """Longest prefix of text that fits in cols columns; VS16 takes no column of its own."""
    out = []
    used = 0
    for ch in text:
        if ch == VS16:
            if out:
                out.append(ch)
            continue
        if used + cell > cols:
            break
        out.append(ch)
        used += cell
    return "".join(out)


class CursesRenderer:
    """Draws snapshots on a curses window, cropping whatever does not fit."""

    def __init__(self, stdscr):
        self.stdscr = stdscr

    def draw(self, snapshot: Snapshot) -> None:
        height, width = self.stdscr.getmaxyx()
        self.stdscr.erase()
        # the bottom-right cell cannot be written, keep one row and column free
        max_rows, max_cols = height - 1, width - 1
        for y, (text, attr, cell) in enumerate(frame_lines(snapshot)[:max_rows]):
            if text:
                self.stdscr.addstr(y, 0, crop(text, max_cols, cell), attr)
        self.stdscr.refresh()
