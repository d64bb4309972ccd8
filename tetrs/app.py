"""The game loop: gravity, locking, line clearing, input and drawing."""

from __future__ import annotations

import argparse
import curses
import locale
import time
from collections.abc import Callable

from .tetris import NUM_COLS, NUM_ROWS, BlockColor, BlockType, TetrisBlock, empty_grid
from .tui import color_pair, terminal

MOVE_INTERVAL = 1.0
POLL_MS = 50
SCORE_AREA_HEIGHT = 3
LINE_SCORES = {1: 100, 2: 300, 3: 500, 4: 800}

SPAWN_X = 4
FIRST_SPAWN_X = 1


def _box(height: int, width: int, corners: str, horizontal: str, vertical: str) -> list[str]:
    """Lines of a bordered box; corners given as top-left, top-right, bottom-left, bottom-right."""
    tl, tr, bl, br = corners
    if width < 2:
        return [horizontal * width] * height
    if height == 1:
        return [tl + horizontal * (width - 2) + tr]
    top = tl + horizontal * (width - 2) + tr
    middle = vertical + " " * (width - 2) + vertical
    bottom = bl + horizontal * (width - 2) + br
    return [top, *[middle] * (height - 2), bottom]


class App:
    """State of one game."""

    def __init__(
        self,
        now: float | None = None,
        spawn: Callable[[], BlockType] = BlockType.random,
    ) -> None:
        self.grid = empty_grid()
        self._spawn = spawn
        self.block = TetrisBlock(FIRST_SPAWN_X, 0, spawn())
        self.last_tick = time.monotonic() if now is None else now
        self.score = 0
        self.should_exit = False

    def update(self, now: float) -> None:
        """Apply gravity once per interval, locking the block when it lands."""
        if now - self.last_tick < MOVE_INTERVAL:
            return
        if not self.block.move_down(self.grid):
            self.lock_block()
        self.last_tick = now

    def lock_block(self) -> None:
        """Fix the falling block into the grid, clear lines and spawn a new one."""
        for x, y in self.block.cells:
            self.grid[y][x] = self.block.color
        self.clear_lines()
        self.block = TetrisBlock(SPAWN_X, 0, self._spawn())

    def clear_lines(self) -> int:
        """Remove full rows, add to the score and return how many were removed."""
        kept = [
            row for row in self.grid
            if any(cell is BlockColor.EMPTY for cell in row)
        ]
        cleared = NUM_ROWS - len(kept)
        self.grid = [[BlockColor.EMPTY] * NUM_COLS for _ in range(cleared)] + kept
        self.score += LINE_SCORES.get(cleared, 0)
        return cleared

    def handle_key(self, key: int | str) -> None:
        """React to one key press."""
        if isinstance(key, str):
            if len(key) != 1:
                return
            key = ord(key)
        if key == ord("q"):
            self.should_exit = True
        elif key == curses.KEY_LEFT:
            self.block.move_left(self.grid)
        elif key == curses.KEY_RIGHT:
            self.block.move_right(self.grid)
        elif key == curses.KEY_DOWN:
            self.block.move_down(self.grid)
        elif key == ord("z"):
            self.block.rotate_counter_clockwise(self.grid)
        elif key == ord("x"):
            self.block.rotate_clockwise(self.grid)

    def cell_color(self, x: int, y: int) -> BlockColor:
        """Colour shown at a cell: settled blocks first, then the falling one."""
        settled = self.grid[y][x]
        if settled is not BlockColor.EMPTY:
            return settled
        if (x, y) in self.block.cells:
            return self.block.color
        return BlockColor.EMPTY

    @staticmethod
    def _put(screen, y: int, x: int, text: str, attr: int = 0) -> None:
        height, width = screen.getmaxyx()
        if not (0 <= y < height and 0 <= x < width):
            return
        text = text[: width - x]
        if not text:
            return
        try:
            screen.addstr(y, x, text, attr)
        except curses.error:
            pass

    def render(self, screen) -> None:
        """Draw the score box and the playfield onto a curses window."""
        screen.erase()
        height, width = screen.getmaxyx()

        score_lines = _box(SCORE_AREA_HEIGHT, width, "┌┐└┘", "─", "│")
        for row, line in enumerate(score_lines):
            self._put(screen, row, 0, line)
        self._put(screen, 1, 1 if width > 1 else 0, f"Score: {self.score}")

        game_height = height - SCORE_AREA_HEIGHT
        cell = min(width // (NUM_COLS * 2), max(game_height, 0) // NUM_ROWS)
        if cell <= 0:
            self._put(screen, SCORE_AREA_HEIGHT, 0, "Terminal too small")
            screen.refresh()
            return

        total_width = cell * NUM_COLS * 2
        total_height = cell * NUM_ROWS
        start_x = (width - total_width) // 2
        start_y = SCORE_AREA_HEIGHT + (game_height - total_height) // 2
        cell_lines = _box(cell, cell * 2, "╔╗╚╝", "═", "║")

        for y in range(NUM_ROWS):
            for x in range(NUM_COLS):
                attr = curses.color_pair(color_pair(self.cell_color(x, y)))
                top = start_y + y * cell
                left = start_x + x * cell * 2
                for offset, line in enumerate(cell_lines):
                    self._put(screen, top + offset, left, line, attr)
        screen.refresh()

    def run(self, screen) -> None:
        """Play until the quit key is pressed."""
        screen.timeout(POLL_MS)
        while not self.should_exit:
            self.update(time.monotonic())
            self.render(screen)
            self.handle_key(screen.getch())


def main(argv: list[str] | None = None) -> int:
    """Start a game in the current terminal."""
    parser = argparse.ArgumentParser(
        prog="tetrs",
        description="Falling-block puzzle game. Arrows move, z/x rotate, q quits.",
    )
    parser.parse_args(argv)
    locale.setlocale(locale.LC_ALL, "")
    with terminal() as screen:
        App().run(screen)
    return 0