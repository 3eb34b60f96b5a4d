from __future__ import annotations

from dataclasses import dataclass

from .state import Heading

TITLE = "Snake"

GRID_SIZE = 20.0  # pixels per cell
GRID_WIDTH = 30  # cells
GRID_HEIGHT = 20

TICK_INTERVAL = 0.15  # seconds between steps
INITIAL_LENGTH = 3
INITIAL_HEADING = Heading.RIGHT

FPS = 60

SNAKE_COLOR = (57, 255, 20)
FOOD_COLOR = (255, 191, 0)
BG_COLOR = (25, 25, 25)
GRID_LINE_COLOR = (255, 255, 255, 26)
SPRITE_INSET = 2.0

# Rejection-sampling tries per grid cell before scanning for free cells.
SPAWN_ATTEMPTS_PER_CELL = 4


@dataclass(frozen=True)
class Settings:
    grid_size: float = GRID_SIZE
    grid_width: int = GRID_WIDTH
    grid_height: int = GRID_HEIGHT
    tick_interval: float = TICK_INTERVAL
    initial_length: int = INITIAL_LENGTH
    initial_heading: Heading = INITIAL_HEADING
    fps: int = FPS

    def __post_init__(self):
        if self.grid_width < 1 or self.grid_height < 1:
            raise ValueError(f"grid must be at least 1x1, got {self.grid_width}x{self.grid_height}")
        if self.grid_size <= 0:
            raise ValueError(f"grid size must be positive, got {self.grid_size}")
        if self.tick_interval <= 0:
            raise ValueError(f"tick interval must be positive, got {self.tick_interval}")
        if self.initial_length < 1:
            raise ValueError(f"initial length must be at least 1, got {self.initial_length}")
        span = self.grid_width if self.initial_heading in (Heading.LEFT, Heading.RIGHT) else self.grid_height
        # The body trails from the center cell and must stay on the grid.
        if self.initial_length > (span + 1) // 2:
            raise ValueError(f"initial length {self.initial_length} does not fit a {span}-cell row from center")

    @property
    def window_size(self) -> tuple[int, int]:
        return (int(self.grid_size * self.grid_width), int(self.grid_size * self.grid_height))
