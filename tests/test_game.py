import random
from itertools import product

import pytest

from lifegrid.game import GREEN, GameOfLife


def test_constructor_and_grid_size():
    game = GameOfLife(10, 20)
    assert game.grid_size == (10, 20)


def test_new_grid_starts_dead_with_green_cells():
    game = GameOfLife(4, 4)
    assert game.live_cell_count == 0
    assert game.cell_color == GREEN


def test_clear():
    game = GameOfLife(5, 5)
    game.randomize()
    game.clear()
    for x, y in product(range(5), range(5)):
        assert not game.is_cell_alive(x, y)


def test_toggle_cell():
    game = GameOfLife(3, 3)
    assert not game.is_cell_alive(0, 0)
    game.toggle_cell(0, 0)
    assert game.is_cell_alive(0, 0)
    game.toggle_cell(0, 0)
    assert not game.is_cell_alive(0, 0)

    game.toggle_cell(-1, -1)
    assert not game.is_cell_alive(-1, -1)
    game.toggle_cell(100, 100)
    assert not game.is_cell_alive(100, 100)
    assert game.live_cell_count == 0


def test_update_lonely_cell_dies():
    game = GameOfLife(3, 3)
    game.toggle_cell(1, 1)
    game.update()
    assert not game.is_cell_alive(1, 1)


def test_update_cell_born():
    game = GameOfLife(3, 3)
    game.toggle_cell(0, 0)
    game.toggle_cell(0, 1)
    game.toggle_cell(0, 2)
    game.update()
    assert game.is_cell_alive(1, 1)


def test_update_cell_survives():
    game = GameOfLife(3, 3)
    game.toggle_cell(0, 1)
    game.toggle_cell(1, 1)
    game.toggle_cell(2, 1)
    game.update()
    assert game.is_cell_alive(1, 1)


def test_blinker_oscillates_with_period_two():
    game = GameOfLife(5, 5)
    for x in (1, 2, 3):
        game.toggle_cell(x, 2)
    game.update()
    assert {(x, y) for x, y in product(range(5), range(5)) if game.is_cell_alive(x, y)} == {
        (2, 1),
        (2, 2),
        (2, 3),
    }
    game.update()
    assert {(x, y) for x, y in product(range(5), range(5)) if game.is_cell_alive(x, y)} == {
        (1, 2),
        (2, 2),
        (3, 2),
    }


def test_edges_do_not_wrap():
    game = GameOfLife(3, 3)
    game.toggle_cell(0, 0)
    game.toggle_cell(0, 2)
    assert game.count_live_neighbors(2, 0) == 0
    assert game.count_live_neighbors(0, 1) == 2


def test_count_live_neighbors_excludes_self():
    game = GameOfLife(3, 3)
    for x, y in product(range(3), range(3)):
        game.toggle_cell(x, y)
    assert game.count_live_neighbors(1, 1) == 8
    assert game.count_live_neighbors(0, 0) == 3


def test_generation_count():
    game = GameOfLife(3, 3)
    assert game.generation_count == 0
    game.update()
    assert game.generation_count == 1
    game.update()
    assert game.generation_count == 2
    game.reset_generation_count()
    assert game.generation_count == 0


def test_live_cell_count():
    game = GameOfLife(3, 3)
    assert game.live_cell_count == 0
    game.toggle_cell(0, 0)
    assert game.live_cell_count == 1
    game.toggle_cell(1, 1)
    assert game.live_cell_count == 2


def test_dead_cell_count():
    game = GameOfLife(2, 2)
    assert game.dead_cell_count == 4
    game.toggle_cell(0, 0)
    assert game.dead_cell_count == 3
    game.toggle_cell(1, 1)
    assert game.dead_cell_count == 2


def test_live_cell_percentage():
    game = GameOfLife(2, 2)
    assert game.live_cell_percentage == pytest.approx(0.0)
    game.toggle_cell(0, 0)
    assert game.live_cell_percentage == pytest.approx(25.0)
    game.toggle_cell(1, 1)
    assert game.live_cell_percentage == pytest.approx(50.0)


def test_live_cell_percentage_of_empty_grid_is_zero():
    assert GameOfLife(0, 0).live_cell_percentage == 0.0


def test_immortal_toggle_and_query():
    game = GameOfLife(3, 3)
    game.toggle_cell(1, 1)
    assert not game.is_immortal(1, 1)
    game.toggle_immortal(1, 1)
    assert game.is_immortal(1, 1)
    game.toggle_immortal(1, 1)
    assert not game.is_immortal(1, 1)


def test_immortal_cell_never_dies():
    game = GameOfLife(3, 3)
    game.toggle_cell(1, 1)
    game.toggle_immortal(1, 1)
    game.update()
    assert game.is_cell_alive(1, 1)
    assert game.is_immortal(1, 1)
    game.toggle_immortal(1, 1)
    game.update()
    assert not game.is_cell_alive(1, 1)


def test_immortal_not_set_on_dead_cell():
    game = GameOfLife(3, 3)
    assert not game.is_cell_alive(1, 1)
    game.toggle_immortal(1, 1)
    assert not game.is_immortal(1, 1)


def test_immortal_reset_on_clear_and_randomize():
    game = GameOfLife(3, 3)
    game.toggle_cell(1, 1)
    game.toggle_immortal(1, 1)
    assert game.is_immortal(1, 1)
    game.clear()
    assert not game.is_immortal(1, 1)
    game.toggle_cell(1, 1)
    game.toggle_immortal(1, 1)
    assert game.is_immortal(1, 1)
    game.randomize()
    assert not game.is_immortal(1, 1)


def test_immortal_out_of_bounds_is_false():
    game = GameOfLife(3, 3)
    assert not game.is_immortal(-1, 5)


def test_randomize_is_reproducible_with_seeded_rng():
    first = GameOfLife(8, 6)
    second = GameOfLife(8, 6)
    first.randomize(random.Random(42))
    second.randomize(random.Random(42))
    cells = list(product(range(8), range(6)))
    assert [first.is_cell_alive(*c) for c in cells] == [second.is_cell_alive(*c) for c in cells]
    assert first.live_cell_count + first.dead_cell_count == 48


def test_randomize_keeps_cells_inside_grid():
    game = GameOfLife(4, 3)
    game.randomize(random.Random(7))
    inside = sum(game.is_cell_alive(x, y) for x, y in product(range(4), range(3)))
    assert inside == game.live_cell_count