"""Terminal setup and teardown, and colour pairs for the playfield."""

from __future__ import annotations

import curses
from collections.abc import Iterator
from contextlib import contextmanager

from .tetris import BlockColor

_ORANGE_INDEX = 208

_PAIRS: dict[BlockColor, int] = {
    color: number
    for number, color in enumerate(
        (c for c in BlockColor if c is not BlockColor.EMPTY), start=1
    )
}


def color_pair(color: BlockColor) -> int:
    """Curses colour-pair number used to paint cells of this colour."""
    return _PAIRS.get(color, 0)


def _curses_color(color: BlockColor) -> int:
    if color is BlockColor.ORANGE:
        return _ORANGE_INDEX if curses.COLORS > _ORANGE_INDEX else curses.COLOR_YELLOW
    return {
        BlockColor.RED: curses.COLOR_RED,
        BlockColor.GREEN: curses.COLOR_GREEN,
        BlockColor.BLUE: curses.COLOR_BLUE,
        BlockColor.YELLOW: curses.COLOR_YELLOW,
        BlockColor.MAGENTA: curses.COLOR_MAGENTA,
        BlockColor.CYAN: curses.COLOR_CYAN,
    }[color]


@contextmanager
def terminal() -> Iterator[curses.window]:
    """Put the terminal into full-screen raw mode and restore it on exit."""
    screen = curses.initscr()
    try:
        curses.noecho()
        curses.cbreak()
        screen.keypad(True)
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        if curses.has_colors():
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error:
                pass
            for color, number in _PAIRS.items():
                value = _curses_color(color)
                curses.init_pair(number, value, value)
        yield screen
    finally:
        screen.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()