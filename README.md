# lifegrid

Conway's Game of Life on a bounded grid. You can draw cells with the mouse and
mark some of them as immortal. It runs in a pygame window.

## Rules

- A dead cell becomes alive when it has exactly 3 live neighbours.
- A live cell survives when it has 2 or 3 live neighbours.
- Every other cell dies.
- An immortal cell stays alive whatever its neighbours are.

The grid does not wrap around. Cells outside its edges count as dead.

## Installation

```
pip install .
```

## Running

```
lifegrid
```

The program first asks for five values: the grid width and height, the cell
size in pixels, the starting update interval in milliseconds, and a cell colour
from 1 to 5 (green, red, blue, yellow or cyan). If a size or the interval is not
a positive number, it prints `Invalid parameters. Exiting.` and exits with
status 1. An unknown colour choice falls back to green.

### Controls

| Input              | Action                                          |
|--------------------|-------------------------------------------------|
| Space              | Start or pause the simulation                   |
| Enter              | Advance one generation while paused             |
| R                  | Fill the grid at random                         |
| C                  | Clear the grid                                  |
| S                  | Print statistics to the console                 |
| Up / Down          | Shorten / lengthen the interval by 10 ms (min 1)|
| 1–5                | Change the cell colour                          |
| Left click         | Toggle a cell alive or dead                     |
| Right click        | Toggle immortality of a live cell (drawn white) |
| Escape / close     | Quit                                            |

The statistics are the generation number, the live and dead cell counts, and
the percentage of live cells.

## Using the engine

`lifegrid.game.GameOfLife` holds the grid and has no dependency on pygame:

```python
from lifegrid.game import GameOfLife

game = GameOfLife(3, 3)
for x in range(3):
    game.toggle_cell(x, 1)      # a horizontal blinker
game.update()
print(game.is_cell_alive(1, 0), game.is_cell_alive(1, 2))  # True True
print(game.generation_count, game.live_cell_count, game.live_cell_percentage)
```

- `toggle_cell(x, y)` flips a cell. Coordinates outside the grid are ignored,
  and `is_cell_alive` reads them as dead.
- `toggle_immortal(x, y)` marks a live cell as immortal. A second call removes
  the mark. Dead cells are left alone.
- `clear()` kills every cell. `randomize(rng=None)` gives each cell an even
  chance of being alive, using the given `random.Random` if there is one. Both
  remove every immortal mark.
- `count_live_neighbors(x, y)` counts the live cells among the neighbours that
  lie inside the grid.
- `grid_size`, `generation_count`, `live_cell_count`, `dead_cell_count` and
  `live_cell_percentage` are read-only properties. `reset_generation_count()`
  sets the generation count back to zero.
- `cell_color` is an RGB tuple. The drawing code uses it for cells that are not
  immortal.

`lifegrid.app` has the interactive parts:

- `prompt_settings(read, write)` asks the start-up questions and returns a
  `Settings`.
- `Controller` turns key codes, mouse clicks and elapsed milliseconds into
  changes to a game.
- `draw_game(surface, game, cell_size)` draws the grid onto a pygame surface.
- `run(settings)` opens the window.

## Limitations

Patterns cannot be saved or loaded, and the grid size is fixed once the window
is open.

## Tests

```
pip install .[test]
pytest
```