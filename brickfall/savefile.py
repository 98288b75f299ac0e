"""Write the game state to a file and read it back."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .model import (
    GAMEFIELD_HEIGHT,
    GAMEFIELD_WIDTH,
    Brick,
    BrickType,
    EngineContext,
    GameContext,
    GameStatus,
    Point,
)

DEFAULT_SAVE_PATH = "save"
FORMAT_VERSION = 1

log = logging.getLogger(__name__)


class SaveError(Exception):
    """The game could not be saved or loaded."""


def _encode_brick(brick: Brick) -> dict:
    return {
        "x": brick.x,
        "y": brick.y,
        "rotation": brick.rotation,
        "type": int(brick.type),
        "collision_blocks": [[p.x, p.y] for p in brick.collision_blocks],
    }


def _decode_brick(data: dict) -> Brick:
    return Brick(
        x=int(data["x"]),
        y=int(data["y"]),
        rotation=int(data["rotation"]),
        type=BrickType(int(data["type"])),
        collision_blocks=[Point(int(x), int(y)) for x, y in data["collision_blocks"]],
    )


def _decode_field(rows: list) -> list[str]:
    if len(rows) != GAMEFIELD_HEIGHT:
        raise ValueError(f"expected {GAMEFIELD_HEIGHT} rows, got {len(rows)}")
    for text in rows:
        if not isinstance(text, str) or len(text) != GAMEFIELD_WIDTH:
            raise ValueError(f"each row must be a string of {GAMEFIELD_WIDTH} cells")
    return rows


def save(
    engine_ctx: EngineContext,
    game_ctx: GameContext,
    path: str | Path = DEFAULT_SAVE_PATH,
) -> None:
    """Write both contexts to ``path``."""
    log.info("Saving...")
    with engine_ctx.lock:
        document = {
            "format": FORMAT_VERSION,
            "engine": {
                "current_brick": _encode_brick(engine_ctx.current_brick),
                "next_brick": _encode_brick(engine_ctx.next_brick),
                "gamefield": ["".join(row) for row in engine_ctx.gamefield],
            },
            "game": {
                "score": game_ctx.score,
                "level": game_ctx.level,
                "status": int(game_ctx.status),
            },
        }
    try:
        Path(path).write_text(json.dumps(document, indent=2), encoding="utf-8")
    except OSError as exc:
        log.error("Save corrupted!")
        raise SaveError(f"cannot write {path}: {exc}") from exc
    log.info("Save successful!")


def load(
    engine_ctx: EngineContext,
    game_ctx: GameContext,
    path: str | Path = DEFAULT_SAVE_PATH,
) -> None:
    """Replace both contexts with the state stored in ``path``.

    Nothing is changed if the file cannot be read or is not a valid save.
    """
    log.info("Loading...")
    try:
        document = json.loads(Path(path).read_text(encoding="utf-8"))
        if document.get("format") != FORMAT_VERSION:
            raise ValueError("unsupported save format")
        engine_data = document["engine"]
        game_data = document["game"]
        current = _decode_brick(engine_data["current_brick"])
        upcoming = _decode_brick(engine_data["next_brick"])
        rows = _decode_field(engine_data["gamefield"])
        score = int(game_data["score"])
        level = int(game_data["level"])
        status = GameStatus(int(game_data["status"]))
    except (OSError, ValueError, KeyError, TypeError, AttributeError) as exc:
        log.error("Load failed!")
        raise SaveError(f"cannot load {path}: {exc}") from exc

    with engine_ctx.lock:
        engine_ctx.current_brick = current
        engine_ctx.next_brick = upcoming
        for row, text in zip(engine_ctx.gamefield, rows):
            row[:] = list(text)
        game_ctx.score = score
        game_ctx.level = level
        game_ctx.status = status
    log.info("Load successful!")