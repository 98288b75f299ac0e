"""Translate key presses into game actions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from . import bricks, collision, savefile
from .collision import CollisionType
from .engine import Engine
from .model import GameStatus

log = logging.getLogger(__name__)


def _exit() -> None:
    raise SystemExit(0)


class KeyMap:
    """Dispatches keys to the handlers that steer an :class:`Engine`."""

    def __init__(
        self,
        engine: Engine,
        shutdown: Callable[[], None] | None = None,
        save_path: str | Path = savefile.DEFAULT_SAVE_PATH,
    ) -> None:
        self.engine = engine
        self._shutdown = shutdown if shutdown is not None else _exit
        self.save_path = save_path
        mapping: dict[str, Callable[[], None]] = {}
        for key, handler in (
            ("a", self._left),
            ("d", self._right),
            ("s", self._down),
            ("p", self._pause),
            ("r", self._rotate),
        ):
            mapping[key] = handler
            mapping[key.upper()] = handler
        mapping.update(
            {".": self._exit, "1": self._start, "5": self._save, "9": self._load}
        )
        self._mapping = mapping

    def handle(self, key: str | int) -> bool:
        """Run the action bound to ``key``; return whether the key is bound."""
        if isinstance(key, int):
            if key < 0 or key > 0x10FFFF:
                return False
            key = chr(key)
        handler = self._mapping.get(key)
        if handler is None:
            return False
        with self.engine.ctx.lock:
            handler()
        return True

    @property
    def _running(self) -> bool:
        return self.engine.game.status is GameStatus.RUNNING

    def _left(self) -> None:
        if not self._running:
            return
        ctx = self.engine.ctx
        if collision.check(ctx, CollisionType.LEFT) is not CollisionType.LEFT:
            bricks.move(ctx, 0, -1)

    def _right(self) -> None:
        if not self._running:
            return
        ctx = self.engine.ctx
        if collision.check(ctx, CollisionType.RIGHT) is not CollisionType.RIGHT:
            bricks.move(ctx, 0, 1)

    def _down(self) -> None:
        if not self._running:
            return
        ctx = self.engine.ctx
        if collision.check(ctx, CollisionType.BOTTOM) is CollisionType.BOTTOM:
            bricks.settle(ctx)
            bricks.get_new(ctx, self.engine.rng)
        else:
            bricks.move(ctx, 1, 0)
        self.engine.check_full_rows()

    def _pause(self) -> None:
        game = self.engine.game
        if game.status is GameStatus.GAME_OVER:
            return
        if game.status is not GameStatus.PAUSED:
            game.status = GameStatus.PAUSED
        else:
            game.status = GameStatus.RUNNING

    def _rotate(self) -> None:
        if not self._running:
            return
        bricks.rotate(self.engine.ctx)

    def _exit(self) -> None:
        self._shutdown()

    def _start(self) -> None:
        if self.engine.game.status is GameStatus.INIT:
            self.engine.game.status = GameStatus.RUNNING
        else:
            self.engine.restart()

    def _save(self) -> None:
        try:
            savefile.save(self.engine.ctx, self.engine.game, self.save_path)
        except savefile.SaveError as exc:
            log.error("%s", exc)

    def _load(self) -> None:
        try:
            savefile.load(self.engine.ctx, self.engine.game, self.save_path)
        except savefile.SaveError as exc:
            log.error("%s", exc)