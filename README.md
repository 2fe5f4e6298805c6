# gridsnake

A small snake game on a square grid, drawn with pygame.

The board is 35 by 35 cells of 20 pixels each, framed by a gray border.
The snake starts as a single green head at a random spot, moving up.
Eight pieces of red food are on the board at all times. When the snake
eats one, it grows by a segment and a new piece appears elsewhere.
Moving into the border wraps the snake around to the opposite side.
Running into its own body starts a fresh game. The score, shown in the
top-left corner, is the length of the snake's body.

The game advances ten times a second.

## Installing

```
pip install .
```

## Playing

```
gridsnake
```

Options:

- `--title TITLE` sets the window title. The default is `snake`.
- `--font PATH` sets the TrueType font used for the score. Without it the
  game uses `assets/fonts/Segoe UI.ttf` if that file exists under the
  current directory. Otherwise it uses pygame's default font.

| Key                  | Action      |
|----------------------|-------------|
| Up arrow or `W`      | Turn up     |
| Down arrow or `S`    | Turn down   |
| Left arrow or `A`    | Turn left   |
| Right arrow or `D`   | Turn right  |

Pressing the direction opposite to the current one is ignored, so the
snake cannot turn straight back into itself. Close the window to quit.
If pygame cannot open the window or load the font, the command prints
the error and exits with status 1.

## Using the game logic

The game rules live in `gridsnake.game` and do not need a display, so
you can drive them directly:

```python
import random

from gridsnake.game import CellColor, Direction, SnakeGame

game = SnakeGame(random.Random(1))
game.turn(Direction.LEFT)
game.update()

print(game.score_text())                       # e.g. "Score: 0"
print(game.color_at(game.head) is CellColor.GREEN)  # True
```

`SnakeGame` has these members:

- `head`, `body` and `food`: positions on the board.
- `direction`: the current heading.
- `reset()`: starts a new round.
- `turn(direction)`: changes the heading.
- `update()`: advances the game by one tick.
- `test_body_collision()`: tells whether the head overlaps the body.
- `color_at(position)`: gives the colour of one cell. It raises
  `IndexError` outside the grid.
- `cells()`: yields every position with its `CellColor`.
- `score()` and `score_text()`: give the current score.

`gridsnake.app` also provides:

- `key_to_direction(key)`: maps a pygame key code to a `Direction`, or
  returns `None` for any other key.
- `render(surface, game, font=None)`: draws a game onto a pygame surface.

`gridsnake.vector.IVec2` is a frozen integer vector used for board
positions. It supports `+` and `-`. `random_position(max_x, max_y, rng=None)`
returns a position with `1 <= x <= max_x` and `1 <= y <= max_y`.

`gridsnake.clock.TickClock` takes a millisecond clock function, which
defaults to a monotonic clock. `should_tick(interval)` returns `True`
once enough time has built up for a tick.

## Running the tests

```
pip install .[test]
pytest
```