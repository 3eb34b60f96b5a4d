import random

import pytest

from gridsnake.errors import NoFreeCellError
from gridsnake.food import FoodSpawner, grid_bounds


def test_grid_bounds_default():
    xs, ys = grid_bounds(30, 20)
    assert (xs.start, xs.stop) == (-15, 15)
    assert (ys.start, ys.stop) == (-10, 10)


def test_spawn_avoids_snake_on_center_row():
    occupied = {(0, 0), (-1, 0), (-2, 0)}
    rng = random.Random(7)
    xs, ys = grid_bounds(30, 20)
    for _ in range(2000):
        spawner = FoodSpawner(30, 20, rng)
        cell = spawner.maybe_spawn(occupied)
        assert cell not in occupied
        assert cell[0] in xs and cell[1] in ys


def test_spawn_is_noop_while_food_exists():
    spawner = FoodSpawner(30, 20, random.Random(1))
    first = spawner.maybe_spawn(set())
    assert first is not None
    assert spawner.maybe_spawn(set()) is None
    assert spawner.food == first


def test_spawn_then_consume():
    spawner = FoodSpawner(30, 20, random.Random(2))
    cell = spawner.maybe_spawn({(0, 0)})
    assert spawner.consume_if_hit(cell) == cell
    assert not spawner.has_food
    assert spawner.consume_if_hit(cell) is None


def test_consume_misses_other_cells():
    spawner = FoodSpawner(4, 4, random.Random(3))
    spawner.food = (1, 1)
    assert spawner.consume_if_hit((1, 0)) is None
    assert spawner.food == (1, 1)


def test_last_free_cell_is_found():
    xs, ys = grid_bounds(3, 3)
    occupied = {(x, y) for x in xs for y in ys} - {(1, -1)}
    spawner = FoodSpawner(3, 3, random.Random(4))
    assert spawner.maybe_spawn(occupied) == (1, -1)


def test_full_grid_raises():
    xs, ys = grid_bounds(2, 2)
    occupied = {(x, y) for x in xs for y in ys}
    spawner = FoodSpawner(2, 2, random.Random(5))
    with pytest.raises(NoFreeCellError):
        spawner.maybe_spawn(occupied)
    assert spawner.food is None


def test_off_grid_cells_do_not_count_as_occupied():
    xs, ys = grid_bounds(1, 1)
    spawner = FoodSpawner(1, 1, random.Random(6))
    assert spawner.maybe_spawn({(5, 5), (-3, 0)}) == (0, 0)


class _StuckRandom(random.Random):
    # Always samples the same cell so rejection sampling never succeeds.
    def choice(self, seq):
        if isinstance(seq, range):
            return seq[0]
        return super().choice(seq)


def test_fallback_scan_when_sampling_exhausted(caplog):
    xs, ys = grid_bounds(4, 4)
    spawner = FoodSpawner(4, 4, _StuckRandom(0))
    with caplog.at_level("WARNING", logger="gridsnake.food"):
        cell = spawner.maybe_spawn({(xs[0], ys[0])})
    assert cell != (xs[0], ys[0])
    assert "scanning free cells" in caplog.text
