"""Conway's Game of Life on a bounded grid, with optional immortal cells."""

from __future__ import annotations

import random
from itertools import product
from typing import Iterator

Color = tuple[int, int, int]

GREEN: Color = (0, 255, 0)
RED: Color = (255, 0, 0)
BLUE: Color = (0, 0, 255)
YELLOW: Color = (255, 255, 0)
CYAN: Color = (0, 255, 255)
WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)

_NEIGHBOR_OFFSETS = tuple(
    (dx, dy) for dy, dx in product((-1, 0, 1), repeat=2) if (dx, dy) != (0, 0)
)


class GameOfLife:
    """A grid of cells evolving by Conway's rules.

    Cells outside the grid count as dead; the grid does not wrap around.
    A live cell may be marked immortal, in which case it is always alive
    in the next generation.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.cell_color: Color = GREEN
        self._alive: set[tuple[int, int]] = set()
        self._immortal: set[tuple[int, int]] = set()
        self._generation = 0

    def _cells(self) -> Iterator[tuple[int, int]]:
        for y, x in product(range(self.height), range(self.width)):
            yield x, y

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def randomize(self, rng: random.Random | None = None) -> None:
        """Give every cell an even chance of being alive and drop all immortality."""
        rng = rng if rng is not None else random.Random()
        self._alive = {cell for cell in self._cells() if rng.getrandbits(1)}
        self._immortal.clear()

    def clear(self) -> None:
        """Kill every cell and drop all immortality."""
        self._alive.clear()
        self._immortal.clear()

    def toggle_cell(self, x: int, y: int) -> None:
        """Flip the state of a cell; positions outside the grid are ignored."""
        if self._in_bounds(x, y):
            self._alive ^= {(x, y)}

    def toggle_immortal(self, x: int, y: int) -> None:
        """Flip the immortality of a live cell; dead cells are left untouched."""
        if (x, y) in self._alive:
            self._immortal ^= {(x, y)}

    def is_immortal(self, x: int, y: int) -> bool:
        return (x, y) in self._immortal

    def is_cell_alive(self, x: int, y: int) -> bool:
        return (x, y) in self._alive

    def count_live_neighbors(self, x: int, y: int) -> int:
        """Number of live cells among the up to eight neighbours inside the grid."""
        return sum((x + dx, y + dy) in self._alive for dx, dy in _NEIGHBOR_OFFSETS)

    def _lives_on(self, cell: tuple[int, int]) -> bool:
        if cell in self._immortal:
            return True
        neighbors = self.count_live_neighbors(*cell)
        if cell in self._alive:
            return neighbors in (2, 3)
        return neighbors == 3

    def update(self) -> None:
        """Advance the grid by one generation."""
        self._alive = {cell for cell in self._cells() if self._lives_on(cell)}
        self._generation += 1

    def reset_generation_count(self) -> None:
        self._generation = 0

    @property
    def grid_size(self) -> tuple[int, int]:
        """The grid's (width, height) in cells."""
        return self.width, self.height

    @property
    def generation_count(self) -> int:
        """Number of updates since creation or the last reset."""
        return self._generation

    @property
    def live_cell_count(self) -> int:
        return len(self._alive)

    @property
    def dead_cell_count(self) -> int:
        return self.width * self.height - self.live_cell_count

    @property
    def live_cell_percentage(self) -> float:
        """Share of live cells, from 0.0 to 100.0; 0.0 for an empty grid."""
        total = self.width * self.height
        if total == 0:
            return 0.0
        return self.live_cell_count / total * 100.0