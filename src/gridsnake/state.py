from __future__ import annotations

from enum import Enum

from .errors import EmptySnakeError

Cell = tuple[int, int]


def add_vectors(a: Cell, b: Cell) -> Cell:
    return (a[0] + b[0], a[1] + b[1])


class Heading(Enum):
    # +y is up, matching the centered presentation space.
    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def vector(self) -> Cell:
        return self.value

    def opposite(self) -> Heading:
        return _OPPOSITES[self]

    @classmethod
    def parse(cls, name: str) -> Heading:
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown heading: {name!r}") from None


_OPPOSITES = {
    Heading.UP: Heading.DOWN,
    Heading.DOWN: Heading.UP,
    Heading.LEFT: Heading.RIGHT,
    Heading.RIGHT: Heading.LEFT,
}


class SnakeState:
    """Ordered body chain, head first, plus the current heading.

    Segments are plain cells; a segment is identified only by its index.
    """

    def __init__(self, cells, heading: Heading = Heading.RIGHT):
        self._cells: list[Cell] = [tuple(c) for c in cells]
        if not self._cells:
            raise EmptySnakeError("a snake needs at least one segment")
        self.heading = heading

    @classmethod
    def spawn(cls, center: Cell, length: int, heading: Heading) -> SnakeState:
        """Lay out `length` cells from `center`, trailing away from `heading`."""
        if length < 1:
            raise EmptySnakeError(f"initial length must be at least 1, got {length}")
        bx, by = heading.opposite().vector
        cells = [(center[0] + bx * i, center[1] + by * i) for i in range(length)]
        return cls(cells, heading)

    @property
    def cells(self) -> tuple[Cell, ...]:
        return tuple(self._cells)

    @property
    def head(self) -> Cell:
        return self._cells[0]

    @property
    def tail(self) -> Cell:
        return self._cells[-1]

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"SnakeState({self._cells!r}, {self.heading})"

    def set_heading(self, requested: Heading) -> bool:
        # Exact reversals are dropped silently.
        if requested == self.heading.opposite():
            return False
        self.heading = requested
        return True

    def step(self) -> Cell:
        """Advance one cell along the heading and return the pre-step tail cell."""
        if not self._cells:
            raise EmptySnakeError("snake has no segments left")
        # Every write below reads from the snapshot, never from updated cells.
        snapshot = tuple(self._cells)
        self._cells[0] = add_vectors(snapshot[0], self.heading.vector)
        for i in range(1, len(snapshot)):
            self._cells[i] = snapshot[i - 1]
        return snapshot[-1]

    def grow(self, at: Cell) -> None:
        self._cells.append(tuple(at))
