from __future__ import annotations

import pygame

from . import config
from .config import Settings
from .state import Cell


def cell_to_screen(cell: Cell, settings: Settings) -> tuple[float, float]:
    """Pixel center of a cell; world origin sits at window center with +y up."""
    w, h = settings.window_size
    return (w / 2 + cell[0] * settings.grid_size, h / 2 - cell[1] * settings.grid_size)


def cell_rect(cell: Cell, settings: Settings) -> pygame.Rect:
    cx, cy = cell_to_screen(cell, settings)
    size = settings.grid_size - config.SPRITE_INSET
    rect = pygame.Rect(0, 0, round(size), round(size))
    rect.center = (round(cx), round(cy))
    return rect


def draw_grid(screen: pygame.Surface, settings: Settings) -> None:
    w, h = settings.window_size
    overlay = pygame.Surface((w, h), pygame.SRCALPHA)
    for i in range(settings.grid_width + 1):
        x = round(i * settings.grid_size)
        pygame.draw.line(overlay, config.GRID_LINE_COLOR, (x, 0), (x, h))
    for i in range(settings.grid_height + 1):
        y = round(i * settings.grid_size)
        pygame.draw.line(overlay, config.GRID_LINE_COLOR, (0, y), (w, y))
    screen.blit(overlay, (0, 0))


def draw_state(screen: pygame.Surface, snake, food: Cell | None, settings: Settings, show_grid: bool = False) -> None:
    screen.fill(config.BG_COLOR)

    if show_grid:
        draw_grid(screen, settings)

    if food is not None:
        pygame.draw.rect(screen, config.FOOD_COLOR, cell_rect(food, settings))

    for cell in snake:
        pygame.draw.rect(screen, config.SNAKE_COLOR, cell_rect(cell, settings))

    pygame.display.flip()
