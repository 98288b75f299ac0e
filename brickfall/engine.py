"""Game loop: gravity, settling, row clearing, scoring and levels."""

from __future__ import annotations

import random
import threading

from . import bricks, collision
from .collision import CollisionType
from .model import (
    BRICK_SETTLED,
    GAMEFIELD_HEIGHT,
    LEVEL_UP_THRESHOLD,
    SPEED_UP_PER_LEVEL_NS,
    EngineContext,
    GameContext,
    GameStatus,
)

TICK_NS = 1000 * 1000 * 999
ROW_SCORE = 100


class Engine:
    """Owns the game field and game state and advances them one tick at a time."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.ctx = EngineContext()
        self.game = GameContext()
        self.reset()

    def reset(self) -> None:
        """Clear the field, reset score and level, and bring in a new brick."""
        with self.ctx.lock:
            self.ctx.clear()
            self.game.reset()
            bricks.get_new(self.ctx, self.rng)

    def restart(self) -> None:
        """Start a new game."""
        self.reset()

    def step(self) -> None:
        """Advance a running game by one tick: drop or settle the falling brick."""
        with self.ctx.lock:
            if self.game.status is not GameStatus.RUNNING:
                return
            if collision.check(self.ctx, CollisionType.BOTTOM) is CollisionType.BOTTOM:
                bricks.settle(self.ctx)
                self._check_game_over()
                bricks.get_new(self.ctx, self.rng)
            else:
                bricks.move(self.ctx, 1, 0)
            self.check_full_rows()

    def tick_seconds(self) -> float:
        """Return the pause between ticks at the current level, never negative."""
        nanoseconds = TICK_NS - SPEED_UP_PER_LEVEL_NS * self.game.level
        return max(nanoseconds, 0) / 1_000_000_000

    def run(self, stop_event: threading.Event) -> None:
        """Keep stepping the game until ``stop_event`` is set."""
        while not stop_event.is_set():
            self.step()
            stop_event.wait(self.tick_seconds())

    def check_full_rows(self) -> int:
        """Clear completely settled rows, scoring each; return how many were cleared.

        Rows are scanned bottom-up once; the top row is never cleared, and a
        row shifted into an already scanned position waits for the next call.
        """
        cleared = 0
        with self.ctx.lock:
            for row in range(GAMEFIELD_HEIGHT - 1, 0, -1):
                if all(cell == BRICK_SETTLED for cell in self.ctx.gamefield[row]):
                    self.game.score += ROW_SCORE
                    self._check_level_up()
                    self._shift_down(row)
                    cleared += 1
        return cleared

    def _shift_down(self, row: int) -> None:
        field = self.ctx.gamefield
        for target in range(row, 0, -1):
            field[target][:] = field[target - 1]

    def _check_level_up(self) -> None:
        if self.game.score % LEVEL_UP_THRESHOLD == 0:
            self.game.level += 1

    def _check_game_over(self) -> bool:
        if self.ctx.current_brick.y <= 0:
            self.game.status = GameStatus.GAME_OVER
            return True
        return False