"""Interactive window for the Game of Life: setup prompts, controls and drawing."""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from itertools import product
from typing import Callable

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from lifegrid.game import (  # noqa: E402
    BLACK,
    BLUE,
    CYAN,
    GREEN,
    RED,
    WHITE,
    YELLOW,
    Color,
    GameOfLife,
)

Writer = Callable[[str], object]
Reader = Callable[[], str]

_COLORS: dict[int, Color] = {1: GREEN, 2: RED, 3: BLUE, 4: YELLOW, 5: CYAN}

_COLOR_KEYS: dict[int, Color] = {
    pygame.K_1: GREEN,
    pygame.K_2: RED,
    pygame.K_3: BLUE,
    pygame.K_4: YELLOW,
    pygame.K_5: CYAN,
}

_LEFT_BUTTON = 1
_RIGHT_BUTTON = 3

_COLOR_MENU = (
    "\nChoose initial cell color:\n"
    "1. Green (default)\n"
    "2. Red\n"
    "3. Blue\n"
    "4. Yellow\n"
    "5. Cyan\n"
    "Enter your choice (1-5): "
)

_CONTROLS = (
    "Controls:\n"
    "  Space: Start/Pause simulation\n"
    "  R: Randomize grid\n"
    "  C: Clear grid\n"
    "  S: Show statistics in console\n"
    "  Left Mouse Click: Toggle cell state\n"
    "  Right Mouse Click: Toggle immortality for a live cell\n"
    "  Up/Down arrows: Increase/Decrease simulation speed (interval ms)\n"
    "  Color selection:\n"
    "    1: Green\n"
    "    2: Red\n"
    "    3: Blue\n"
    "    4: Yellow\n"
    "    5: Cyan\n"
    "  Enter: Step forward (when paused)\n"
    "  Escape or Close window: Exit\n"
)


@dataclass(frozen=True)
class Settings:
    """Parameters chosen at start-up."""

    grid_width: int
    grid_height: int
    cell_size: int
    interval_ms: int
    color_choice: int = 1


def color_for_choice(choice: int) -> Color:
    """The cell colour for a menu choice from 1 to 5."""
    try:
        return _COLORS[choice]
    except KeyError:
        raise ValueError(f"color choice must be 1-5, got {choice}") from None


def _read_int(read: Reader) -> int:
    try:
        return int(read().strip())
    except (ValueError, EOFError):
        return 0


def prompt_settings(read: Reader, write: Writer) -> Settings:
    """Ask for the grid, cell size, interval and colour.

    Raises ValueError when a size or the interval is not a positive number.
    An out-of-range colour choice falls back to green.
    """
    write("Enter grid width (e.g., 100): ")
    width = _read_int(read)
    write("Enter grid height (e.g., 100): ")
    height = _read_int(read)
    write("Enter cell size in pixels (e.g., 8): ")
    cell_size = _read_int(read)
    write("Enter initial simulation interval in ms (e.g., 100): ")
    interval = _read_int(read)
    write(_COLOR_MENU)
    choice = _read_int(read)

    if min(width, height, cell_size, interval) <= 0:
        raise ValueError("Invalid parameters.")
    if choice not in _COLORS:
        write("Invalid color choice. Using default (Green).\n")
        choice = 1
    return Settings(width, height, cell_size, interval, choice)


def format_statistics(game: GameOfLife) -> str:
    return (
        f"Generation: {game.generation_count}\n"
        f"Live cells: {game.live_cell_count}\n"
        f"Dead cells: {game.dead_cell_count}\n"
        f"Live cell percentage: {game.live_cell_percentage:g}%\n"
    )


def draw_game(surface: pygame.Surface, game: GameOfLife, cell_size: int) -> None:
    """Draw live cells as squares one pixel smaller than a cell; immortal ones in white."""
    side = cell_size - 1
    width, height = game.grid_size
    for y, x in product(range(height), range(width)):
        if game.is_cell_alive(x, y):
            color = WHITE if game.is_immortal(x, y) else game.cell_color
            surface.fill(color, pygame.Rect(x * cell_size, y * cell_size, side, side))


class Controller:
    """Turns key presses, clicks and elapsed time into changes to a game."""

    def __init__(
        self,
        game: GameOfLife,
        cell_size: int,
        interval_ms: int,
        write: Writer = sys.stdout.write,
    ) -> None:
        self.game = game
        self.cell_size = cell_size
        self.interval_ms = interval_ms
        self.write = write
        self.is_running = False
        self.step_requested = False
        self.closed = False
        self._elapsed_ms = 0

    def handle_key(self, key: int) -> None:
        if key == pygame.K_SPACE:
            self.is_running = not self.is_running
        elif key == pygame.K_r:
            self.game.randomize()
        elif key == pygame.K_c:
            self.game.clear()
        elif key == pygame.K_s:
            self.write(format_statistics(self.game))
        elif key == pygame.K_UP:
            self.interval_ms = max(1, self.interval_ms - 10)
            self.write(f"Interval: {self.interval_ms} ms\n")
        elif key == pygame.K_DOWN:
            self.interval_ms += 10
            self.write(f"Interval: {self.interval_ms} ms\n")
        elif key == pygame.K_ESCAPE:
            self.closed = True
        elif key in _COLOR_KEYS:
            self.game.cell_color = _COLOR_KEYS[key]
        elif key == pygame.K_RETURN:
            self.step_requested = True

    def handle_click(self, button: int, position: tuple[int, int]) -> None:
        x = position[0] // self.cell_size
        y = position[1] // self.cell_size
        if button == _LEFT_BUTTON:
            self.game.toggle_cell(x, y)
        elif button == _RIGHT_BUTTON:
            self.game.toggle_immortal(x, y)

    def tick(self, elapsed_ms: int) -> bool:
        """Account for elapsed time; return True when the game advanced a generation."""
        if self.is_running:
            self._elapsed_ms += elapsed_ms
            if self._elapsed_ms >= self.interval_ms:
                self.game.update()
                self._elapsed_ms = 0
                return True
            return False
        self._elapsed_ms = 0
        if self.step_requested:
            self.step_requested = False
            self.game.update()
            return True
        return False


def run(settings: Settings) -> None:
    """Open the window and run the simulation until it is closed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (settings.grid_width * settings.cell_size, settings.grid_height * settings.cell_size)
        )
        pygame.display.set_caption("Game of Life")
        game = GameOfLife(settings.grid_width, settings.grid_height)
        game.cell_color = color_for_choice(settings.color_choice)
        controller = Controller(game, settings.cell_size, settings.interval_ms)
        sys.stdout.write(_CONTROLS)

        clock = pygame.time.Clock()
        while not controller.closed:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    controller.closed = True
                elif event.type == pygame.KEYDOWN:
                    controller.handle_key(event.key)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    controller.handle_click(event.button, event.pos)
            controller.tick(clock.tick())
            screen.fill(BLACK)
            draw_game(screen, game, settings.cell_size)
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lifegrid", description="Interactive Conway's Game of Life."
    )
    parser.parse_args(argv)

    sys.stdout.write("Conway's Game of Life\n")
    try:
        settings = prompt_settings(input, _write_flush)
    except ValueError:
        sys.stderr.write("Invalid parameters. Exiting.\n")
        return 1
    run(settings)
    return 0


def _write_flush(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


if __name__ == "__main__":
    sys.exit(main())