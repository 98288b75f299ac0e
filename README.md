# brickfall

A compact falling-bricks puzzle game that runs in your terminal.

Bricks drop into a 10 × 13 playing field one row per tick. Steer and rotate
them so they fill complete rows: each cleared row scores 100 points, and every
500 points raises the level. The pause between ticks starts just under a second
and shrinks by a tenth of a second per level. The game ends when a brick
settles at the very top of the field.

## Installing

```
pip install .
```

The game draws with the standard-library `curses` module, so it needs a
terminal that `curses` supports (any usual Linux or macOS terminal). There are
no other dependencies.

## Playing

```
brickfall
brickfall --save-file mygame.json
```

The screen shows the playing field with the current level above it, and beside
it the score, a preview of the next brick, the game status and a menu. Messages
such as "Saving..." or "Load failed!" are written to the background of the
terminal.

| Key          | Action                                              |
|--------------|-----------------------------------------------------|
| `1`          | Start the game; once it has begun, reset it to a new game (press `1` again to start it) |
| `A` / `a`    | Move the brick left                                 |
| `D` / `d`    | Move the brick right                                |
| `S` / `s`    | Drop the brick one row                              |
| `R` / `r`    | Rotate the brick by 90°, if it fits                 |
| `P` / `p`    | Pause or resume (no effect after game over)         |
| `5`          | Save the game                                       |
| `9`          | Load the saved game                                 |
| `.`          | Quit                                                |

Saving writes the playing field, the falling brick, the next brick, the score,
the level and the status as JSON to the file given by `--save-file` (by default
a file named `save` in the current directory). Loading reads that file back;
if it is missing or not a valid save, the game reports that loading failed and
play carries on unchanged.

## Using the engine from code

The game logic can be driven without a terminal:

```python
import random
from brickfall.engine import Engine
from brickfall.keymap import KeyMap

engine = Engine(random.Random(0))
keys = KeyMap(engine, shutdown=lambda: None, save_path="save")
keys.handle("1")        # start
engine.step()           # one tick: the brick falls a row or settles
keys.handle("a")        # move left
print(engine.game.score, engine.game.level, engine.game.status)
print(engine.ctx.row_text(0))
```

- `Engine.step()` advances a running game by one tick, `Engine.run(stop_event)`
  keeps stepping until a `threading.Event` is set, and `Engine.tick_seconds()`
  gives the current pause between ticks.
- `Engine.check_full_rows()` clears complete rows and returns how many it
  cleared.
- `KeyMap.handle(key)` accepts a character or a key code and returns whether
  the key is bound.
- `brickfall.bricks` holds the shapes (`shape`, `collision_data`) and the brick
  moves (`get_new`, `move`, `rotate`, `settle`); `brickfall.collision.check`
  tests for walls, floor and settled cells.
- `brickfall.savefile.save` and `brickfall.savefile.load` write and read save
  files, raising `brickfall.savefile.SaveError` when that fails.

## What it does not do

There is no high-score table and no way to change the controls or the size of
the playing field; saves hold a single game, and a new save overwrites it.