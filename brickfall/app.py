"""Command that runs the game in the terminal."""

from __future__ import annotations

import argparse
import curses
import logging
import threading

from . import savefile
from .engine import Engine
from .keymap import KeyMap
from .ui import Screen

FRAME_SECONDS = 0.1


class _ScreenLogHandler(logging.Handler):
    def __init__(self, screen: Screen) -> None:
        super().__init__()
        self._screen = screen

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._screen.log(record.getMessage())
        except curses.error:
            self.handleError(record)


def _play(stdscr, args: argparse.Namespace) -> int:
    engine = Engine()
    screen = Screen(stdscr, engine)
    stop = threading.Event()

    package_log = logging.getLogger(__package__)
    handler = _ScreenLogHandler(screen)
    previous_level = package_log.level
    package_log.addHandler(handler)
    package_log.setLevel(logging.INFO)

    def shutdown() -> None:
        screen.log("Shutdown")
        stop.set()

    keymap = KeyMap(engine, shutdown=shutdown, save_path=args.save_file)
    worker = threading.Thread(target=engine.run, args=(stop,), daemon=True)
    worker.start()
    try:
        while not stop.is_set():
            screen.draw()
            key = screen.read_key()
            if key is not None:
                keymap.handle(key)
            stop.wait(FRAME_SECONDS)
    finally:
        stop.set()
        worker.join()
        package_log.removeHandler(handler)
        package_log.setLevel(previous_level)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Parse the command line and play until the exit key is pressed."""
    parser = argparse.ArgumentParser(prog="brickfall", description="Falling bricks puzzle game.")
    parser.add_argument(
        "--save-file",
        default=savefile.DEFAULT_SAVE_PATH,
        help="file used by the save and load keys",
    )
    args = parser.parse_args(argv)
    return curses.wrapper(_play, args)


if __name__ == "__main__":
    raise SystemExit(main())