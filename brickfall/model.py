"""Game state shared by the engine, the input handling and the display."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import IntEnum

MAIN_WIN_WIDTH = 12
MAIN_WIN_HEIGHT = 15
MAIN_WIN_BORDER = 1

BRICK_CHAR = "#"
BRICK_SETTLED = "="
BRICK_ERASE = " "

COLLISION_BLOCK_NUM = 4

LEVEL_UP_THRESHOLD = 500
SPEED_UP_PER_LEVEL_NS = 100 * 1000 * 1000

GAMEFIELD_WIDTH = MAIN_WIN_WIDTH - 2 * MAIN_WIN_BORDER
GAMEFIELD_HEIGHT = MAIN_WIN_HEIGHT - 2 * MAIN_WIN_BORDER


class BrickType(IntEnum):
    """The seven brick shapes."""

    LONG = 0
    SQUARE = 1
    SYMMETRICAL = 2
    S1 = 3
    S2 = 4
    L1 = 5
    L2 = 6


class GameStatus(IntEnum):
    """Lifecycle of a game."""

    INIT = 0
    RUNNING = 1
    PAUSED = 2
    GAME_OVER = 3


@dataclass(frozen=True)
class Point:
    """A cell position on the game field."""

    x: int
    y: int


def _empty_blocks() -> list[Point]:
    return [Point(0, 0) for _ in range(COLLISION_BLOCK_NUM)]


@dataclass
class Brick:
    """A brick: its anchor, rotation in degrees, shape and occupied cells."""

    x: int = 0
    y: int = 0
    rotation: int = 0
    type: BrickType = BrickType.LONG
    collision_blocks: list[Point] = field(default_factory=_empty_blocks)


def _empty_field() -> list[list[str]]:
    return [[BRICK_ERASE] * GAMEFIELD_WIDTH for _ in range(GAMEFIELD_HEIGHT)]


@dataclass
class EngineContext:
    """The falling brick, the next brick and the game field grid."""

    current_brick: Brick = field(default_factory=Brick)
    next_brick: Brick = field(default_factory=Brick)
    gamefield: list[list[str]] = field(default_factory=_empty_field)
    lock: "threading.RLock" = field(
        default_factory=threading.RLock, compare=False, repr=False
    )

    def clear(self) -> None:
        """Blank every cell of the game field."""
        with self.lock:
            for row in self.gamefield:
                row[:] = [BRICK_ERASE] * GAMEFIELD_WIDTH

    def row_text(self, row: int) -> str:
        """Return one row of the game field as a string."""
        with self.lock:
            return "".join(self.gamefield[row])


@dataclass
class GameContext:
    """Score, level and status of the current game."""

    score: int = 0
    level: int = 1
    status: GameStatus = GameStatus.INIT

    def reset(self) -> None:
        """Return to the state of a freshly started game."""
        self.score = 0
        self.level = 1
        self.status = GameStatus.INIT