from __future__ import annotations

import logging
from enum import Enum, auto

import pygame

from .state import Heading

logger = logging.getLogger(__name__)

KEY_HEADINGS = {
    pygame.K_w: Heading.UP,
    pygame.K_s: Heading.DOWN,
    pygame.K_a: Heading.LEFT,
    pygame.K_d: Heading.RIGHT,
    pygame.K_UP: Heading.UP,
    pygame.K_DOWN: Heading.DOWN,
    pygame.K_LEFT: Heading.LEFT,
    pygame.K_RIGHT: Heading.RIGHT,
}

# Cmd on macOS, Ctrl elsewhere.
TOGGLE_MODS = pygame.KMOD_META | pygame.KMOD_CTRL


class ControlEvent(Enum):
    TOGGLE_GRID = auto()
    QUIT = auto()


class GridConfig:
    def __init__(self, show_grid: bool = False):
        self.show_grid = show_grid


def read_events(events) -> tuple[list[Heading], list[ControlEvent]]:
    """Split pygame events into heading requests and control events, in arrival order."""
    headings: list[Heading] = []
    controls: list[ControlEvent] = []
    for event in events:
        if event.type == pygame.QUIT:
            controls.append(ControlEvent.QUIT)
        elif event.type != pygame.KEYDOWN:
            continue
        elif event.key == pygame.K_g and event.mod & TOGGLE_MODS:
            controls.append(ControlEvent.TOGGLE_GRID)
        elif event.key in (pygame.K_ESCAPE, pygame.K_q):
            controls.append(ControlEvent.QUIT)
        elif event.key in KEY_HEADINGS:
            headings.append(KEY_HEADINGS[event.key])
    return headings, controls


def on_control_event(event: ControlEvent, grid_config: GridConfig) -> None:
    if event is ControlEvent.TOGGLE_GRID:
        grid_config.show_grid = not grid_config.show_grid
        logger.info("Grid toggled: %s", grid_config.show_grid)
