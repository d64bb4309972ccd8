# tetrs

A small falling-blocks puzzle game that runs in your terminal.

The playing field is 10 columns wide and 20 rows tall. A new piece appears at
the top, drops one row every second, and locks in place when it can fall no
further. Full rows are cleared and scored.

## Installing

```
pip install .
```

The game draws with the standard library's `curses` module, so it needs a
terminal that `curses` supports (Linux, macOS and other POSIX systems). Each
cell is drawn as a double-bordered box at least two columns wide, so the
terminal must have room for 20 columns of cells and 23 rows; otherwise the
game shows "Terminal too small" below the score.

## Playing

```
tetrs
```

`tetrs --help` prints a short summary of the controls.

| Key     | Action                     |
|---------|----------------------------|
| Left    | Move the piece left        |
| Right   | Move the piece right       |
| Down    | Move the piece down a row  |
| `z`     | Rotate counter-clockwise   |
| `x`     | Rotate clockwise           |
| `q`     | Quit                       |

A move or rotation that would take the piece off the field or into a settled
cell is ignored.

## Scoring

| Rows cleared at once | Points |
|----------------------|--------|
| 1                    | 100    |
| 2                    | 300    |
| 3                    | 500    |
| 4                    | 800    |

The running score is shown above the playing field.

## What the game does not do

There is no game-over: when the field fills up, new pieces keep appearing at
the top until you press `q`. There is no hard drop, no preview of the next
piece, no levels or speed-up, and scores are not saved.

## Using the game logic

The rules live in `tetrs.tetris` and have no terminal dependency:

```python
from tetrs.tetris import BlockType, TetrisBlock, empty_grid

grid = empty_grid()
block = TetrisBlock(4, 0, BlockType.random())
block.move_left(grid)
block.rotate_clockwise(grid)
while block.move_down(grid):
    pass
```

Each movement method returns `True` if the piece moved and `False` if it was
blocked. `block.cells` holds the four `(x, y)` cells the piece occupies and
`block.color` its `BlockColor`.

`tetrs.app.App` holds the game state (`grid`, `block`, `score`). Its
`handle_key`, `update`, `lock_block` and `clear_lines` methods drive a game
without a screen; `cell_color(x, y)` gives the colour shown at a cell.

## Running the tests

```
pip install .[test]
pytest
```