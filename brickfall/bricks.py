"""Brick shapes and the operations that move bricks around the game field."""

from __future__ import annotations

import random
from dataclasses import replace

from . import collision
from .collision import CollisionType
from .model import (
    BRICK_CHAR,
    BRICK_ERASE,
    BRICK_SETTLED,
    COLLISION_BLOCK_NUM,
    MAIN_WIN_WIDTH,
    Brick,
    BrickType,
    EngineContext,
    Point,
)

_ROTATION_STEP = 90
_ROTATIONS = (0, 90, 180, 270)

_RAW_SHAPES = (
    ((0, 0), (1, 0), (2, 0), (3, 0)),  # long 0
    ((0, 0), (0, 1), (0, 2), (0, 3)),  # long 90
    ((0, 0), (1, 0), (2, 0), (3, 0)),  # long 180
    ((0, 0), (0, 1), (0, 2), (0, 3)),  # long 270
    ((0, 0), (0, 1), (1, 0), (1, 1)),  # square
    ((0, 0), (0, 1), (1, 0), (1, 1)),
    ((0, 0), (0, 1), (1, 0), (1, 1)),
    ((0, 0), (0, 1), (1, 0), (1, 1)),
    ((0, 0), (-1, 1), (0, 1), (1, 1)),  # symmetrical 0
    ((0, 0), (0, 1), (0, 2), (1, 1)),  # symmetrical 90
    ((0, 0), (1, 0), (2, 0), (1, 1)),  # symmetrical 180
    ((0, 0), (0, 1), (0, 2), (-1, 1)),  # symmetrical 270
    ((0, 0), (1, 0), (-1, 1), (0, 1)),  # S1 0
    ((0, 0), (0, 1), (1, 1), (1, 2)),  # S1 90
    ((0, 0), (1, 0), (-1, 1), (0, 1)),  # S1 180
    ((0, 0), (0, 1), (1, 1), (1, 2)),  # S1 270
    ((0, 0), (1, 0), (1, 1), (2, 1)),  # S2 0
    ((0, 0), (0, 1), (-1, 1), (-1, 2)),  # S2 90
    ((0, 0), (1, 0), (1, 1), (2, 1)),  # S2 180
    ((0, 0), (0, 1), (-1, 1), (-1, 2)),  # S2 270
    ((0, 0), (0, 1), (1, 1), (2, 1)),  # L1 0
    ((0, 0), (0, 1), (0, 2), (-1, 2)),  # L1 90
    ((0, 0), (1, 0), (2, 0), (2, 1)),  # L1 180
    ((0, 0), (1, 0), (0, 1), (0, 2)),  # L1 270
    ((0, 0), (-2, 1), (-1, 1), (0, 1)),  # L2 0
    ((0, 0), (1, 0), (1, 1), (1, 2)),  # L2 90
    ((0, 0), (1, 0), (2, 0), (0, 1)),  # L2 180
    ((0, 0), (0, 1), (0, 2), (1, 2)),  # L2 270
)

_SHAPES: tuple[tuple[Point, ...], ...] = tuple(
    tuple(Point(x, y) for x, y in cells) for cells in _RAW_SHAPES
)


def shape(brick_type: BrickType, rotation: int) -> tuple[Point, ...]:
    """Return the cell offsets of a brick type at a rotation of 0, 90, 180 or 270."""
    if rotation not in _ROTATIONS:
        raise ValueError(f"rotation must be one of {_ROTATIONS}, got {rotation!r}")
    return _SHAPES[int(BrickType(brick_type)) * COLLISION_BLOCK_NUM + rotation // _ROTATION_STEP]


def collision_data(brick_type: BrickType) -> tuple[Point, ...]:
    """Return the cell offsets of a brick type in its starting orientation."""
    return shape(brick_type, 0)


def _cells(brick: Brick) -> list[Point]:
    return [Point(brick.x + p.x, brick.y + p.y) for p in shape(brick.type, brick.rotation)]


def _update_collision_bounds(brick: Brick) -> None:
    brick.collision_blocks = _cells(brick)


def _paint(ctx: EngineContext, char: str) -> None:
    with ctx.lock:
        for cell in _cells(ctx.current_brick):
            ctx.gamefield[cell.y][cell.x] = char
        _update_collision_bounds(ctx.current_brick)


def get_new(ctx: EngineContext, rng: random.Random) -> None:
    """Promote the next brick to the falling one and draw a fresh next brick."""
    upcoming = ctx.next_brick
    ctx.current_brick = Brick(
        x=upcoming.x, y=upcoming.y, rotation=upcoming.rotation, type=upcoming.type
    )
    ctx.next_brick = Brick(
        x=MAIN_WIN_WIDTH // 2 - 2,
        y=0,
        rotation=0,
        type=BrickType(rng.randrange(len(BrickType))),
    )
    _update_collision_bounds(ctx.current_brick)


def move(ctx: EngineContext, dy: int, dx: int) -> None:
    """Shift the falling brick by ``dy`` rows and ``dx`` columns and redraw it."""
    with ctx.lock:
        _paint(ctx, BRICK_ERASE)
        ctx.current_brick.x += dx
        ctx.current_brick.y += dy
        _update_collision_bounds(ctx.current_brick)
        _paint(ctx, BRICK_CHAR)


def _rotation_allowed(ctx: EngineContext, rotation: int) -> bool:
    candidate = replace(ctx.current_brick, rotation=rotation)
    _update_collision_bounds(candidate)
    probe = replace(ctx, current_brick=candidate)
    return all(
        collision.check(probe, kind) is CollisionType.NONE
        for kind in (CollisionType.BOTTOM, CollisionType.LEFT, CollisionType.RIGHT)
    )


def rotate(ctx: EngineContext) -> bool:
    """Turn the falling brick by a quarter if it stays clear; return whether it turned."""
    with ctx.lock:
        rotation = (ctx.current_brick.rotation + _ROTATION_STEP) % 360
        if not _rotation_allowed(ctx, rotation):
            return False
        _paint(ctx, BRICK_ERASE)
        ctx.current_brick.rotation = rotation
        _update_collision_bounds(ctx.current_brick)
        _paint(ctx, BRICK_CHAR)
        return True


def settle(ctx: EngineContext) -> None:
    """Fix the falling brick in place on the game field."""
    _paint(ctx, BRICK_SETTLED)