"""Grid-based snake game state and rules."""

from __future__ import annotations

import random
from enum import Enum
from typing import Iterator

from .vector import IVec2, RandomSource, random_position

WINDOW_WIDTH = 700
WINDOW_HEIGHT = 700
CELL_SIZE = 20
GRID_WIDTH = WINDOW_WIDTH // CELL_SIZE
GRID_HEIGHT = WINDOW_HEIGHT // CELL_SIZE
TICK_RATE = 10
TICK_INTERVAL = 1000 // TICK_RATE
FOOD_COUNT = 8


class Direction(Enum):
    """Heading of the snake, valued by its one-cell step."""

    UP = IVec2(0, -1)
    DOWN = IVec2(0, 1)
    LEFT = IVec2(-1, 0)
    RIGHT = IVec2(1, 0)

    @property
    def delta(self) -> IVec2:
        return self.value

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class CellColor(Enum):
    """Colour of a grid cell, valued by its RGB triple."""

    BLACK = (0, 0, 0)
    GRAY = (90, 90, 90)
    GREEN = (0, 255, 0)
    RED = (255, 0, 0)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return self.value


class SnakeGame:
    """The snake, its food and the coloured grid they live on.

    The outermost ring of cells is a grey border; moving into it wraps the
    head around to the opposite side of the playing field.
    """

    def __init__(self, rng: RandomSource | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._grid: list[list[CellColor]] = []
        self.head = IVec2(0, 0)
        self.previous_head = self.head
        self.previous_tail = self.head
        self.direction = Direction.UP
        self.food: list[IVec2] = []
        self.body: list[IVec2] = []
        self.reset()

    def reset(self) -> None:
        """Start a new round: fresh grid, a one-cell snake and new food."""
        last_x = GRID_WIDTH - 1
        last_y = GRID_HEIGHT - 1
        self._grid = [
            [
                CellColor.GRAY if x in (0, last_x) or y in (0, last_y) else CellColor.BLACK
                for y in range(GRID_HEIGHT)
            ]
            for x in range(GRID_WIDTH)
        ]

        self.head = self._random_empty_position()
        self._paint(self.head, CellColor.GREEN)
        self.previous_head = self.head
        self.previous_tail = self.head
        self.direction = Direction.UP

        self.food = []
        for _ in range(FOOD_COUNT):
            self._place_food()

        self.body = []

    def turn(self, direction: Direction) -> None:
        """Change heading unless it would reverse straight into the body."""
        if direction is not self.direction.opposite:
            self.direction = direction

    def update(self) -> None:
        """Advance the game by one tick."""
        self._move()

        if self.test_body_collision():
            self.reset()
            return

        if self._eat_food():
            segment = self.previous_tail if self.body else self.previous_head
            self.body.append(segment)

    def test_body_collision(self) -> bool:
        """Return True if the head overlaps any body segment."""
        return self.head in self.body

    def color_at(self, position: IVec2) -> CellColor:
        """Return the colour of the cell at ``position``."""
        if not (0 <= position.x < GRID_WIDTH and 0 <= position.y < GRID_HEIGHT):
            raise IndexError(f"position {position} is outside the grid")
        return self._grid[position.x][position.y]

    def cells(self) -> Iterator[tuple[IVec2, CellColor]]:
        """Yield every cell position with its colour, column by column."""
        for x, column in enumerate(self._grid):
            for y, color in enumerate(column):
                yield IVec2(x, y), color

    def score(self) -> int:
        return len(self.body)

    def score_text(self) -> str:
        return f"Score: {self.score()}"

    def _paint(self, position: IVec2, color: CellColor) -> None:
        self._grid[position.x][position.y] = color

    def _random_empty_position(self) -> IVec2:
        if not any(color is CellColor.BLACK for column in self._grid for color in column):
            raise RuntimeError("no empty cell left on the board")
        while True:
            position = random_position(GRID_WIDTH - 1, GRID_HEIGHT - 1, self._rng)
            if self._grid[position.x][position.y] is CellColor.BLACK:
                return position

    def _place_food(self) -> None:
        position = self._random_empty_position()
        self.food.append(position)
        self._paint(position, CellColor.RED)

    def _wrap(self, position: IVec2) -> IVec2:
        x, y = position.x, position.y
        if x == 0:
            x = GRID_WIDTH - 2
        if y == 0:
            y = GRID_HEIGHT - 2
        if x == GRID_WIDTH - 1:
            x = 1
        if y == GRID_HEIGHT - 1:
            y = 1
        return IVec2(x, y)

    def _move(self) -> None:
        self.previous_head = self.head
        self.head = self._wrap(self.head + self.direction.delta)
        self._paint(self.head, CellColor.GREEN)

        if not self.body:
            self._paint(self.previous_head, CellColor.BLACK)
            return

        # Each segment takes the place of the one ahead of it; the cell the
        # last segment leaves behind is cleared.
        follow = self.previous_head
        for index, segment in enumerate(self.body):
            self.previous_tail = segment
            self.body[index] = follow
            self._paint(follow, CellColor.GREEN)
            self._paint(segment, CellColor.BLACK)
            follow = segment

    def _eat_food(self) -> bool:
        try:
            index = self.food.index(self.head)
        except ValueError:
            return False
        del self.food[index]
        self._place_food()
        return True