"""Detect whether the falling brick touches a wall, the floor or settled cells."""

from __future__ import annotations

from enum import Enum

from .model import BRICK_SETTLED, GAMEFIELD_HEIGHT, GAMEFIELD_WIDTH, EngineContext


class CollisionType(Enum):
    """Direction of a collision, or none."""

    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    NONE = "none"


def _blocked(gamefield: list[list[str]], x: int, y: int) -> bool:
    if 0 <= y < GAMEFIELD_HEIGHT and 0 <= x < GAMEFIELD_WIDTH:
        return gamefield[y][x] == BRICK_SETTLED
    return True


def _check_bottom(ctx: EngineContext) -> CollisionType:
    for block in ctx.current_brick.collision_blocks:
        y = block.y + 1
        if y >= GAMEFIELD_HEIGHT or _blocked(ctx.gamefield, block.x, y):
            return CollisionType.BOTTOM
    return CollisionType.NONE


def _check_left(ctx: EngineContext) -> CollisionType:
    for block in ctx.current_brick.collision_blocks:
        x = block.x - 1
        if x < 0 or _blocked(ctx.gamefield, x, block.y):
            return CollisionType.LEFT
    return CollisionType.NONE


def _check_right(ctx: EngineContext) -> CollisionType:
    for block in ctx.current_brick.collision_blocks:
        x = block.x + 1
        if x >= GAMEFIELD_WIDTH or _blocked(ctx.gamefield, x, block.y):
            return CollisionType.RIGHT
    return CollisionType.NONE


_CHECKS = {
    CollisionType.BOTTOM: _check_bottom,
    CollisionType.LEFT: _check_left,
    CollisionType.RIGHT: _check_right,
}


def check(ctx: EngineContext, kind: CollisionType) -> CollisionType:
    """Return ``kind`` if the current brick collides in that direction, else NONE."""
    handler = _CHECKS.get(kind)
    if handler is None:
        return CollisionType.NONE
    return handler(ctx)