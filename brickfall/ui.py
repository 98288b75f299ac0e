"""Curses display of the game field, score, level, status, next brick and menu."""

from __future__ import annotations

import curses
from dataclasses import dataclass
from typing import Callable

from . import bricks
from .engine import Engine
from .model import BRICK_CHAR, GAMEFIELD_HEIGHT, MAIN_WIN_HEIGHT, MAIN_WIN_WIDTH, BrickType, GameStatus

_MAIN_X = 10
_MAIN_Y = 10
_SIDE_X = _MAIN_X + MAIN_WIN_WIDTH + 2
_SIDE_WIDTH = 14
_SCORE_HEIGHT = 3
_NEXT_Y = _MAIN_Y + _SCORE_HEIGHT
_NEXT_HEIGHT = 5
_MENU_Y = _NEXT_Y + _NEXT_HEIGHT
_MENU_HEIGHT = 7
_TOP_Y = _MAIN_Y - 3
_TOP_HEIGHT = 3
_CTRL_Y = _MAIN_Y + MAIN_WIN_HEIGHT
_CTRL_HEIGHT = 4

NEXT_WIDTH = _SIDE_WIDTH - 2
NEXT_ROWS = 2
_NEXT_OFFSET_X = NEXT_WIDTH // NEXT_ROWS - 2
_NEXT_OFFSET_Y = 2

_STATUS_TEXT = {
    GameStatus.PAUSED: "PAUSED",
    GameStatus.GAME_OVER: "GAME OVER",
}
_STATUS_BLANK = " " * 9

_MENU_LINES = ("[1] Start", "[P] Pause", "[5] Save", "[9] Load", "[.] Exit")


def render_next_brick(brick_type: BrickType) -> tuple[str, ...]:
    """Return the rows that preview a brick in the next-brick window."""
    rows = [[" "] * NEXT_WIDTH for _ in range(NEXT_ROWS)]
    for cell in bricks.collision_data(brick_type):
        rows[cell.y][cell.x + _NEXT_OFFSET_X] = BRICK_CHAR
    return tuple("".join(row) for row in rows)


def status_text(status: GameStatus) -> str:
    """Return the text shown in the status window for a game status."""
    return _STATUS_TEXT.get(status, _STATUS_BLANK)


@dataclass(frozen=True)
class _Layout:
    name: str
    x: int
    y: int
    width: int
    height: int


_LAYOUTS = (
    _Layout("main", _MAIN_X, _MAIN_Y, MAIN_WIN_WIDTH, MAIN_WIN_HEIGHT),
    _Layout("score", _SIDE_X, _MAIN_Y, _SIDE_WIDTH, _SCORE_HEIGHT),
    _Layout("next", _SIDE_X, _NEXT_Y, _SIDE_WIDTH, _NEXT_HEIGHT),
    _Layout("menu", _SIDE_X, _MENU_Y, _SIDE_WIDTH, _MENU_HEIGHT),
    _Layout("level", _MAIN_X, _TOP_Y, MAIN_WIN_WIDTH, _TOP_HEIGHT),
    _Layout("status", _SIDE_X, _TOP_Y, _SIDE_WIDTH, _TOP_HEIGHT),
    _Layout("ctrl", _MAIN_X, _CTRL_Y, MAIN_WIN_WIDTH, _CTRL_HEIGHT),
)


class Screen:
    """The set of curses windows that show an :class:`Engine`."""

    def __init__(self, stdscr, engine: Engine) -> None:
        self.stdscr = stdscr
        self.engine = engine
        stdscr.nodelay(True)
        stdscr.scrollok(True)
        self.windows = {
            layout.name: curses.newwin(layout.height, layout.width, layout.y, layout.x)
            for layout in _LAYOUTS
        }
        self._painters: dict[str, Callable[[object], None]] = {
            "main": self._draw_main,
            "score": self._draw_score,
            "next": self._draw_next,
            "menu": self._draw_menu,
            "level": self._draw_level,
            "status": self._draw_status,
            "ctrl": self._draw_ctrl,
        }

    def draw(self) -> None:
        """Redraw every window."""
        main = self.windows["main"]
        for row in range(GAMEFIELD_HEIGHT):
            main.addstr(row + 1, 1, self.engine.ctx.row_text(row))
        for layout in _LAYOUTS:
            window = self.windows[layout.name]
            self._painters[layout.name](window)
            window.refresh()

    def read_key(self) -> int | None:
        """Return the pending key code, or None when no key was pressed."""
        key = self.stdscr.getch()
        return None if key == -1 else key

    def log(self, message: str) -> None:
        """Write a line of text to the scrolling background screen."""
        self.stdscr.addstr(f"{message}\n")
        self.stdscr.refresh()

    def _draw_main(self, window) -> None:
        window.box()

    def _draw_score(self, window) -> None:
        window.box()
        window.addstr(0, 4, "Score")
        window.addstr(1, 2, str(self.engine.game.score))

    def _draw_next(self, window) -> None:
        window.box()
        window.addstr(0, 2, "Next brick")
        preview = render_next_brick(self.engine.ctx.next_brick.type)
        for offset, line in enumerate(preview):
            window.addstr(_NEXT_OFFSET_Y + offset, 1, line)

    def _draw_menu(self, window) -> None:
        window.box()
        window.addstr(0, 5, "Menu")
        for row, line in enumerate(_MENU_LINES, start=1):
            window.addstr(row, 1, line)

    def _draw_level(self, window) -> None:
        window.box()
        window.addstr(0, 3, "Level")
        window.addstr(1, 2, f"== {self.engine.game.level} ==")

    def _draw_status(self, window) -> None:
        window.box()
        window.addstr(0, 3, "Status")
        window.addstr(1, 2, status_text(self.engine.game.status))

    def _draw_ctrl(self, window) -> None:
        window.box()
        window.addstr(0, 2, "Controls")
        window.addstr(1, 1, "<-A S D->")
        window.addstr(2, 1, "    V    ")