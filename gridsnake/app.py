"""Window, input handling and main loop for the snake game."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Protocol, Sequence

import pygame

from .clock import TickClock
from .game import CELL_SIZE, TICK_INTERVAL, WINDOW_HEIGHT, WINDOW_WIDTH, Direction, SnakeGame

DEFAULT_TITLE = "snake"
DEFAULT_FONT_PATH = Path("assets/fonts/Segoe UI.ttf")
FONT_SIZE = 16
TEXT_COLOR = (255, 255, 255)
TEXT_POSITION = (10, 0)

_KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


class TextRenderer(Protocol):
    """Anything that renders text to a surface like :class:`pygame.font.Font`."""

    def render(self, text: str, antialias: bool, color: tuple[int, int, int]) -> pygame.Surface: ...


def key_to_direction(key: int) -> Direction | None:
    """Return the direction bound to a key code, or None for other keys."""
    return _KEY_DIRECTIONS.get(key)


def render(surface: pygame.Surface, game: SnakeGame, font: TextRenderer | None = None) -> None:
    """Draw the grid and, if a font is given, the score onto ``surface``."""
    surface.fill((0, 0, 0))
    for position, color in game.cells():
        rect = pygame.Rect(position.x * CELL_SIZE, position.y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
        surface.fill(color.rgb, rect)

    if font is not None:
        text = font.render(game.score_text(), True, TEXT_COLOR)
        surface.blit(text, TEXT_POSITION)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Play snake on a wrapping grid.")
    parser.add_argument("--title", default=DEFAULT_TITLE, help="window title")
    parser.add_argument("--font", type=Path, default=None, help="TrueType font for the score")
    return parser.parse_args(argv)


def _load_font(path: Path | None) -> pygame.font.Font:
    if path is not None:
        return pygame.font.Font(str(path), FONT_SIZE)
    if DEFAULT_FONT_PATH.is_file():
        return pygame.font.Font(str(DEFAULT_FONT_PATH), FONT_SIZE)
    return pygame.font.Font(None, FONT_SIZE)


def _handle_events(game: SnakeGame) -> bool:
    """Process pending events; return False once the window was closed."""
    running = True
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            running = False
        elif event.type == pygame.KEYDOWN:
            direction = key_to_direction(event.key)
            if direction is not None:
                game.turn(direction)
    return running


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    args = _parse_args(argv)

    pygame.init()
    try:
        surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(args.title)
        font = _load_font(args.font)

        game = SnakeGame()
        clock = TickClock()

        running = True
        while running:
            running = _handle_events(game)
            if clock.should_tick(TICK_INTERVAL):
                game.update()
            render(surface, game, font)
            pygame.display.flip()
    except (pygame.error, OSError) as exc:
        print(f"gridsnake: {exc}", file=sys.stderr)
        return 1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())