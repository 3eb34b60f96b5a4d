from __future__ import annotations


class SimulationError(RuntimeError):
    """Raised when the simulation reaches a state that correct play never produces."""


class EmptySnakeError(SimulationError):
    pass


class NoFreeCellError(SimulationError):
    def __init__(self, width: int, height: int, occupied: int):
        super().__init__(f"no free cell for food on a {width}x{height} grid ({occupied} cells occupied)")
        self.width = width
        self.height = height
        self.occupied = occupied
