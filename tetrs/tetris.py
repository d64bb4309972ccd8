"""Playfield geometry, tetromino shapes and block movement."""

from __future__ import annotations

import random as _random
from enum import Enum

NUM_ROWS = 20
NUM_COLS = 10

Cell = tuple[int, int]


class BlockColor(Enum):
    """Colour of a playfield cell; EMPTY marks a free cell."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    MAGENTA = "magenta"
    CYAN = "cyan"
    ORANGE = "orange"
    EMPTY = "empty"


Grid = list[list[BlockColor]]


class BlockType(Enum):
    """The seven tetromino shapes."""

    I = "I"  # noqa: E741
    J = "J"
    L = "L"
    Z = "Z"
    T = "T"
    S = "S"
    O = "O"  # noqa: E741

    def offsets(self) -> tuple[Cell, ...]:
        """Cell offsets of the shape relative to its spawn point."""
        return _OFFSETS[self]

    @classmethod
    def random(cls) -> BlockType:
        """Pick a shape uniformly at random."""
        return _random.choice(list(cls))


_OFFSETS: dict[BlockType, tuple[Cell, ...]] = {
    BlockType.I: ((0, 0), (1, 0), (2, 0), (3, 0)),
    BlockType.L: ((0, 0), (0, 1), (0, 2), (1, 2)),
    BlockType.J: ((1, 0), (1, 1), (1, 2), (0, 2)),
    BlockType.Z: ((0, 0), (1, 0), (1, 1), (2, 1)),
    BlockType.S: ((0, 1), (1, 1), (1, 0), (2, 0)),
    BlockType.T: ((0, 1), (1, 1), (1, 0), (2, 1)),
    BlockType.O: ((0, 0), (0, 1), (1, 0), (1, 1)),
}

_COLORS: dict[BlockType, BlockColor] = {
    BlockType.I: BlockColor.BLUE,
    BlockType.J: BlockColor.GREEN,
    BlockType.L: BlockColor.ORANGE,
    BlockType.Z: BlockColor.RED,
    BlockType.S: BlockColor.MAGENTA,
    BlockType.T: BlockColor.CYAN,
    BlockType.O: BlockColor.YELLOW,
}


def empty_grid() -> Grid:
    """A playfield with every cell empty."""
    return [[BlockColor.EMPTY] * NUM_COLS for _ in range(NUM_ROWS)]


def _in_bounds(x: int, y: int) -> bool:
    return 0 <= x < NUM_COLS and 0 <= y < NUM_ROWS


class TetrisBlock:
    """The falling tetromino: its colour and the four cells it occupies."""

    def __init__(self, x: int, y: int, block_type: BlockType) -> None:
        self.block_type = block_type
        self.color = _COLORS[block_type]
        self.cells: tuple[Cell, ...] = tuple(
            (x + dx, y + dy) if _in_bounds(x + dx, y + dy) else (0, 0)
            for dx, dy in block_type.offsets()
        )

    def __repr__(self) -> str:
        return f"TetrisBlock({self.block_type.name}, cells={self.cells})"

    def _try_place(self, grid: Grid, candidates) -> bool:
        candidates = tuple(candidates)
        if any(self.is_colliding(grid, x, y) for x, y in candidates):
            return False
        self.cells = candidates
        return True

    def move_down(self, grid: Grid) -> bool:
        """Drop one row; return False if blocked."""
        return self._try_place(grid, ((x, y + 1) for x, y in self.cells))

    def move_left(self, grid: Grid) -> bool:
        """Shift one column left; return False if blocked."""
        return self._try_place(grid, ((x - 1, y) for x, y in self.cells))

    def move_right(self, grid: Grid) -> bool:
        """Shift one column right; return False if blocked."""
        return self._try_place(grid, ((x + 1, y) for x, y in self.cells))

    def _center(self) -> Cell:
        return (
            sum(x for x, _ in self.cells) // 4,
            sum(y for _, y in self.cells) // 4,
        )

    def rotate_clockwise(self, grid: Grid) -> bool:
        """Rotate a quarter turn clockwise; return False if blocked."""
        cx, cy = self._center()
        return self._try_place(
            grid, ((cx + (y - cy), cy - (x - cx)) for x, y in self.cells)
        )

    def rotate_counter_clockwise(self, grid: Grid) -> bool:
        """Rotate a quarter turn counter-clockwise; return False if blocked."""
        cx, cy = self._center()
        return self._try_place(
            grid, ((cx - (y - cy), cy + (x - cx)) for x, y in self.cells)
        )

    def is_colliding(self, grid: Grid, x: int, y: int) -> bool:
        """Whether the cell lies outside the field or is already filled."""
        if not _in_bounds(x, y):
            return True
        return grid[y][x] is not BlockColor.EMPTY