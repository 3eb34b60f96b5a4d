from .errors import EmptySnakeError, NoFreeCellError, SimulationError
from .food import FoodSpawner
from .logic import MoveTimer, SimulationState, TickOutcome, request_heading, step_once, tick
from .state import Heading, SnakeState

__all__ = [
    "EmptySnakeError",
    "FoodSpawner",
    "Heading",
    "MoveTimer",
    "NoFreeCellError",
    "SimulationError",
    "SimulationState",
    "SnakeState",
    "TickOutcome",
    "request_heading",
    "step_once",
    "tick",
]
