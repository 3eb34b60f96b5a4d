from __future__ import annotations

import logging
import random
from collections import namedtuple

from .config import Settings
from .errors import EmptySnakeError
from .food import FoodSpawner
from .state import Cell, Heading, SnakeState

logger = logging.getLogger(__name__)

TickOutcome = namedtuple("TickOutcome", ["stepped", "last_tail", "eaten", "spawned", "snake", "food"])
# stepped: bool, True when the move timer fired this tick
# last_tail: (x, y) | None, tail cell before the step
# eaten: (x, y) | None
# spawned: (x, y) | None, food placed this tick
# snake: tuple[(x, y), ...], head first
# food: (x, y) | None


class MoveTimer:
    """Repeating timer; reports at most one expiry per tick."""

    def __init__(self, interval: float):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.interval = interval
        self.elapsed = 0.0

    def tick(self, dt: float) -> bool:
        self.elapsed += dt
        if self.elapsed < self.interval:
            return False
        self.elapsed %= self.interval
        return True


class SimulationState:
    def __init__(self, snake: SnakeState, spawner: FoodSpawner, timer: MoveTimer):
        self.snake = snake
        self.spawner = spawner
        self.timer = timer
        self.pending_heading = snake.heading
        self.last_tail: Cell | None = None

    @classmethod
    def new(cls, settings: Settings | None = None, rng: random.Random | None = None) -> SimulationState:
        settings = settings or Settings()
        snake = SnakeState.spawn((0, 0), settings.initial_length, settings.initial_heading)
        spawner = FoodSpawner(settings.grid_width, settings.grid_height, rng)
        state = cls(snake, spawner, MoveTimer(settings.tick_interval))
        spawner.maybe_spawn(snake.cells)
        return state

    @property
    def food(self) -> Cell | None:
        return self.spawner.food


def request_heading(state: SimulationState, heading: Heading) -> bool:
    # Gate against the realized heading so two quick turns cannot reverse.
    if heading == state.snake.heading.opposite():
        return False
    state.pending_heading = heading
    return True


def step_once(state: SimulationState) -> tuple[Cell, Cell | None]:
    """Move, then eat and grow. Returns (last_tail, eaten)."""
    snake = state.snake
    snake.set_heading(state.pending_heading)
    state.last_tail = snake.step()
    state.pending_heading = snake.heading

    eaten = state.spawner.consume_if_hit(snake.head)
    if eaten is not None:
        snake.grow(state.last_tail)
        logger.info("food eaten at %s, length %d", eaten, len(snake))

    if len(snake) == 0:
        raise EmptySnakeError("snake lost every segment during a step")
    logger.debug("step -> head %s heading %s", snake.head, snake.heading.name)
    return state.last_tail, eaten


def tick(state: SimulationState, requests, dt: float) -> TickOutcome:
    for heading in requests:
        request_heading(state, heading)

    stepped = state.timer.tick(dt)
    last_tail = eaten = None
    if stepped:
        last_tail, eaten = step_once(state)

    spawned = state.spawner.maybe_spawn(state.snake.cells)
    return TickOutcome(stepped, last_tail, eaten, spawned, state.snake.cells, state.food)


def run_headless(settings: Settings, steps: int, rng: random.Random | None = None) -> SimulationState:
    """Drive `steps` clock expiries without a window; food respawns between steps."""
    state = SimulationState.new(settings, rng)
    for _ in range(steps):
        step_once(state)
        state.spawner.maybe_spawn(state.snake.cells)
    return state
