from __future__ import annotations

import random

import pygame

from . import config
from .config import Settings
from .controls import ControlEvent, GridConfig, on_control_event, read_events
from .logic import SimulationState, tick
from .render import draw_state


def main(settings: Settings | None = None, rng: random.Random | None = None) -> None:
    settings = settings or Settings()

    pygame.init()
    screen = pygame.display.set_mode(settings.window_size)
    pygame.display.set_caption(config.TITLE)
    clock = pygame.time.Clock()

    state = SimulationState.new(settings, rng)
    grid_config = GridConfig()
    running = True

    while running:
        dt = clock.tick(settings.fps) / 1000.0
        headings, controls = read_events(pygame.event.get())
        for event in controls:
            if event is ControlEvent.QUIT:
                running = False
            else:
                on_control_event(event, grid_config)

        outcome = tick(state, headings, dt)
        draw_state(screen, outcome.snake, outcome.food, settings, grid_config.show_grid)

    pygame.quit()
    print("Final length:", len(state.snake))
