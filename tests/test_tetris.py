import pytest

from tetrs.tetris import (
    NUM_COLS,
    NUM_ROWS,
    BlockColor,
    BlockType,
    TetrisBlock,
    empty_grid,
)


def test_empty_grid_dimensions_and_contents():
    grid = empty_grid()
    assert len(grid) == NUM_ROWS
    assert all(len(row) == NUM_COLS for row in grid)
    assert all(cell is BlockColor.EMPTY for row in grid for cell in row)


def test_empty_grid_rows_are_independent():
    grid = empty_grid()
    grid[0][0] = BlockColor.RED
    assert grid[1][0] is BlockColor.EMPTY


def test_i_block_offsets():
    assert BlockType.I.offsets() == ((0, 0), (1, 0), (2, 0), (3, 0))


@pytest.mark.parametrize("block_type", list(BlockType))
def test_every_shape_has_four_distinct_cells(block_type):
    assert len(set(BlockType.offsets(block_type))) == 4
    block = TetrisBlock(4, 5, block_type)
    assert len(set(block.cells)) == 4
    assert all(0 <= x < NUM_COLS and 0 <= y < NUM_ROWS for x, y in block.cells)


def test_random_returns_a_member():
    seen = {BlockType.random() for _ in range(200)}
    assert seen <= set(BlockType)
    assert len(seen) > 1


@pytest.mark.parametrize(
    ("block_type", "color"),
    [
        (BlockType.I, BlockColor.BLUE),
        (BlockType.J, BlockColor.GREEN),
        (BlockType.L, BlockColor.ORANGE),
        (BlockType.Z, BlockColor.RED),
        (BlockType.S, BlockColor.MAGENTA),
        (BlockType.T, BlockColor.CYAN),
        (BlockType.O, BlockColor.YELLOW),
    ],
)
def test_block_colors(block_type, color):
    assert TetrisBlock(4, 0, block_type).color is color


def test_out_of_bounds_spawn_cells_fall_back_to_origin():
    block = TetrisBlock(8, 0, BlockType.I)
    assert block.cells == ((8, 0), (9, 0), (0, 0), (0, 0))


def test_move_down_shifts_every_cell_one_row():
    grid = empty_grid()
    block = TetrisBlock(4, 0, BlockType.T)
    before = block.cells
    assert block.move_down(grid) is True
    assert [x for x, _ in block.cells] == [x for x, _ in before]
    assert [y - 1 for _, y in block.cells] == [y for _, y in before]


def test_move_down_stops_at_floor():
    grid = empty_grid()
    block = TetrisBlock(4, 0, BlockType.L)
    while block.move_down(grid):
        pass
    assert max(y for _, y in block.cells) == NUM_ROWS - 1
    before = block.cells
    assert block.move_down(grid) is False
    assert block.cells == before


def test_move_down_blocked_by_filled_cell():
    grid = empty_grid()
    grid[1][4] = BlockColor.RED
    block = TetrisBlock(3, 0, BlockType.I)
    before = block.cells
    assert block.move_down(grid) is False
    assert block.cells == before


def test_move_left_until_wall():
    grid = empty_grid()
    block = TetrisBlock(4, 5, BlockType.O)
    while block.move_left(grid):
        pass
    assert min(x for x, _ in block.cells) == 0


def test_move_right_until_wall():
    grid = empty_grid()
    block = TetrisBlock(4, 5, BlockType.Z)
    while block.move_right(grid):
        pass
    assert max(x for x, _ in block.cells) == NUM_COLS - 1


def test_move_right_blocked_by_filled_cell_leaves_block():
    grid = empty_grid()
    block = TetrisBlock(3, 5, BlockType.I)
    grid[5][7] = BlockColor.GREEN
    before = block.cells
    assert block.move_right(grid) is False
    assert block.cells == before


def test_rotate_clockwise_blocked_at_top():
    grid = empty_grid()
    block = TetrisBlock(3, 0, BlockType.I)
    before = block.cells
    assert block.rotate_clockwise(grid) is False
    assert block.cells == before


@pytest.mark.parametrize(
    "rotate", [TetrisBlock.rotate_clockwise, TetrisBlock.rotate_counter_clockwise]
)
def test_rotating_horizontal_i_makes_it_vertical(rotate):
    grid = empty_grid()
    block = TetrisBlock(3, 10, BlockType.I)
    assert rotate(block, grid) is True
    assert len({x for x, _ in block.cells}) == 1
    assert len({y for _, y in block.cells}) == 4


@pytest.mark.parametrize("block_type", list(BlockType))
def test_rotation_keeps_four_distinct_in_bounds_cells(block_type):
    grid = empty_grid()
    block = TetrisBlock(4, 8, block_type)
    for _ in range(4):
        block.rotate_clockwise(grid)
        assert len(set(block.cells)) == 4
        assert all(not block.is_colliding(grid, x, y) for x, y in block.cells)


@pytest.mark.parametrize(
    ("x", "y"), [(-1, 0), (0, -1), (NUM_COLS, 0), (0, NUM_ROWS)]
)
def test_is_colliding_outside_field(x, y):
    block = TetrisBlock(4, 0, BlockType.O)
    assert block.is_colliding(empty_grid(), x, y) is True


def test_is_colliding_with_filled_cell_only():
    grid = empty_grid()
    grid[3][2] = BlockColor.CYAN
    block = TetrisBlock(4, 0, BlockType.O)
    assert block.is_colliding(grid, 2, 3) is True
    assert block.is_colliding(grid, 3, 3) is False