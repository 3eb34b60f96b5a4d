from __future__ import annotations

import logging
import random

from . import config
from .errors import NoFreeCellError
from .state import Cell

logger = logging.getLogger(__name__)


def grid_bounds(width: int, height: int) -> tuple[range, range]:
    """Cell ranges for a grid centered on the origin: [-w/2, w/2) x [-h/2, h/2)."""
    x_min = -(width // 2)
    y_min = -(height // 2)
    return range(x_min, x_min + width), range(y_min, y_min + height)


class FoodSpawner:
    """Keeps at most one food cell on the grid."""

    def __init__(self, width: int = config.GRID_WIDTH, height: int = config.GRID_HEIGHT, rng: random.Random | None = None):
        self.width = width
        self.height = height
        self.xs, self.ys = grid_bounds(width, height)
        self.rng = rng or random.Random()
        self.food: Cell | None = None

    @property
    def has_food(self) -> bool:
        return self.food is not None

    def _random_cell(self) -> Cell:
        return (self.rng.choice(self.xs), self.rng.choice(self.ys))

    def _free_cells(self, occupied) -> list[Cell]:
        return [(x, y) for y in self.ys for x in self.xs if (x, y) not in occupied]

    def maybe_spawn(self, occupied) -> Cell | None:
        if self.food is not None:
            return None

        occupied = set(occupied)
        capacity = self.width * self.height
        in_grid = sum(1 for x, y in occupied if x in self.xs and y in self.ys)
        if in_grid >= capacity:
            raise NoFreeCellError(self.width, self.height, in_grid)

        for _ in range(capacity * config.SPAWN_ATTEMPTS_PER_CELL):
            cell = self._random_cell()
            if cell not in occupied:
                break
        else:
            logger.warning("rejection sampling exhausted on a %dx%d grid, scanning free cells", self.width, self.height)
            cell = self.rng.choice(self._free_cells(occupied))

        self.food = cell
        logger.debug("food spawned at %s", cell)
        return cell

    def consume_if_hit(self, head: Cell) -> Cell | None:
        if self.food is None or self.food != tuple(head):
            return None
        eaten, self.food = self.food, None
        return eaten
