import random

import pytest

from brickfall import bricks
from brickfall.model import (
    BRICK_CHAR,
    BRICK_SETTLED,
    COLLISION_BLOCK_NUM,
    GAMEFIELD_HEIGHT,
    MAIN_WIN_WIDTH,
    Brick,
    BrickType,
    EngineContext,
    Point,
)

ROTATIONS = (0, 90, 180, 270)


def _count(ctx, char):
    return sum(row.count(char) for row in ctx.gamefield)


def _placed(brick_type, x, y, rotation=0):
    ctx = EngineContext()
    ctx.current_brick = Brick(x=x, y=y, rotation=rotation, type=brick_type)
    bricks.move(ctx, 0, 0)
    return ctx


def _expected_cells(brick):
    return {
        Point(brick.x + p.x, brick.y + p.y)
        for p in bricks.shape(brick.type, brick.rotation)
    }


@pytest.mark.parametrize("brick_type", list(BrickType))
@pytest.mark.parametrize("rotation", ROTATIONS)
def test_every_shape_has_four_distinct_cells_from_origin(brick_type, rotation):
    cells = bricks.shape(brick_type, rotation)
    assert len(cells) == COLLISION_BLOCK_NUM
    assert len(set(cells)) == COLLISION_BLOCK_NUM
    assert cells[0] == Point(0, 0)


def test_square_is_the_same_in_every_rotation():
    first = bricks.shape(BrickType.SQUARE, 0)
    assert all(bricks.shape(BrickType.SQUARE, r) == first for r in ROTATIONS)


def test_long_brick_orientations():
    assert bricks.shape(BrickType.LONG, 0) == bricks.shape(BrickType.LONG, 180)
    assert all(p.x == 0 for p in bricks.shape(BrickType.LONG, 90))
    assert all(p.y == 0 for p in bricks.shape(BrickType.LONG, 0))


@pytest.mark.parametrize("brick_type", list(BrickType))
def test_collision_data_is_starting_shape(brick_type):
    assert bricks.collision_data(brick_type) == bricks.shape(brick_type, 0)


@pytest.mark.parametrize("rotation", [45, 360, -90])
def test_invalid_rotation(rotation):
    with pytest.raises(ValueError):
        bricks.shape(BrickType.LONG, rotation)


def test_get_new_promotes_next_brick():
    ctx = EngineContext()
    ctx.next_brick = Brick(x=3, y=2, rotation=0, type=BrickType.L1)
    bricks.get_new(ctx, random.Random(1))
    assert ctx.current_brick.type is BrickType.L1
    assert (ctx.current_brick.x, ctx.current_brick.y) == (3, 2)
    assert set(ctx.current_brick.collision_blocks) == _expected_cells(ctx.current_brick)
    assert ctx.next_brick.x == MAIN_WIN_WIDTH // 2 - 2
    assert ctx.next_brick.y == 0
    assert ctx.next_brick.rotation == 0
    assert ctx.next_brick.type in BrickType


def test_get_new_is_deterministic_for_a_seed():
    first, second = EngineContext(), EngineContext()
    rng_a, rng_b = random.Random(42), random.Random(42)
    for _ in range(10):
        bricks.get_new(first, rng_a)
        bricks.get_new(second, rng_b)
        assert first.current_brick.type == second.current_brick.type
        assert first.next_brick.type == second.next_brick.type


def test_get_new_does_not_draw():
    ctx = EngineContext()
    bricks.get_new(ctx, random.Random(3))
    assert _count(ctx, BRICK_CHAR) == 0


def test_move_redraws_brick():
    ctx = _placed(BrickType.S1, 4, 1)
    bricks.move(ctx, 1, 0)
    assert ctx.current_brick.y == 2
    assert _count(ctx, BRICK_CHAR) == COLLISION_BLOCK_NUM
    drawn = {
        Point(x, y)
        for y, row in enumerate(ctx.gamefield)
        for x, cell in enumerate(row)
        if cell == BRICK_CHAR
    }
    assert drawn == set(ctx.current_brick.collision_blocks)


def test_move_sideways_keeps_four_cells():
    ctx = _placed(BrickType.L2, 5, 3)
    bricks.move(ctx, 0, -1)
    bricks.move(ctx, 0, -1)
    assert ctx.current_brick.x == 3
    assert _count(ctx, BRICK_CHAR) == COLLISION_BLOCK_NUM
    assert set(ctx.current_brick.collision_blocks) == _expected_cells(ctx.current_brick)


def test_settle_marks_cells_settled():
    ctx = _placed(BrickType.SQUARE, 4, 5)
    bricks.settle(ctx)
    assert _count(ctx, BRICK_SETTLED) == COLLISION_BLOCK_NUM
    assert _count(ctx, BRICK_CHAR) == 0
    for cell in ctx.current_brick.collision_blocks:
        assert ctx.gamefield[cell.y][cell.x] == BRICK_SETTLED


def test_rotate_in_open_space():
    ctx = _placed(BrickType.L1, 4, 3)
    assert bricks.rotate(ctx) is True
    assert ctx.current_brick.rotation == 90
    assert set(ctx.current_brick.collision_blocks) == _expected_cells(ctx.current_brick)
    assert _count(ctx, BRICK_CHAR) == COLLISION_BLOCK_NUM


def test_four_rotations_return_to_start():
    ctx = _placed(BrickType.S2, 4, 3)
    start = list(ctx.current_brick.collision_blocks)
    for _ in range(4):
        assert bricks.rotate(ctx)
    assert ctx.current_brick.rotation == 0
    assert ctx.current_brick.collision_blocks == start


def test_rotate_refused_near_floor():
    ctx = _placed(BrickType.LONG, 3, GAMEFIELD_HEIGHT - 2)
    before = list(ctx.current_brick.collision_blocks)
    assert bricks.rotate(ctx) is False
    assert ctx.current_brick.rotation == 0
    assert ctx.current_brick.collision_blocks == before
    assert _count(ctx, BRICK_CHAR) == COLLISION_BLOCK_NUM


def test_rotate_refused_at_left_wall():
    ctx = _placed(BrickType.SQUARE, 0, 3)
    assert bricks.rotate(ctx) is False
    assert ctx.current_brick.rotation == 0


def test_rotate_refused_next_to_settled_cell():
    ctx = _placed(BrickType.L1, 4, 3)
    for cell in bricks.shape(BrickType.L1, 90):
        ctx.gamefield[3 + cell.y + 1][4 + cell.x] = BRICK_SETTLED
    assert bricks.rotate(ctx) is False
    assert ctx.current_brick.rotation == 0