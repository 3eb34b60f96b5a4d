import pygame
import pytest

from gridsnake import config
from gridsnake.__main__ import main
from gridsnake.config import Settings
from gridsnake.controls import ControlEvent, GridConfig, on_control_event, read_events
from gridsnake.render import cell_rect, cell_to_screen, draw_state
from gridsnake.state import Heading


def key(k, mod=0):
    return pygame.event.Event(pygame.KEYDOWN, key=k, mod=mod)


def test_read_events_maps_keys_in_order():
    events = [key(pygame.K_w), key(pygame.K_LEFT), pygame.event.Event(pygame.KEYUP, key=pygame.K_d, mod=0)]
    headings, controls = read_events(events)
    assert headings == [Heading.UP, Heading.LEFT]
    assert controls == []


def test_read_events_controls():
    events = [key(pygame.K_g, pygame.KMOD_LMETA), key(pygame.K_g), key(pygame.K_ESCAPE)]
    headings, controls = read_events(events)
    assert headings == []
    assert controls == [ControlEvent.TOGGLE_GRID, ControlEvent.QUIT]


def test_toggle_grid_logs(caplog):
    grid = GridConfig()
    with caplog.at_level("INFO", logger="gridsnake.controls"):
        on_control_event(ControlEvent.TOGGLE_GRID, grid)
    assert grid.show_grid
    assert "Grid toggled: True" in caplog.text
    on_control_event(ControlEvent.TOGGLE_GRID, grid)
    assert not grid.show_grid


def test_cell_to_screen_centers_origin_with_y_up():
    settings = Settings()
    assert cell_to_screen((0, 0), settings) == (300.0, 200.0)
    assert cell_to_screen((1, 1), settings) == (320.0, 180.0)


def test_cell_rect_is_inset():
    rect = cell_rect((0, 0), Settings())
    assert rect.size == (18, 18)
    assert rect.center == (300, 200)


@pytest.fixture
def screen():
    pygame.display.init()
    surface = pygame.display.set_mode(Settings().window_size)
    yield surface
    pygame.display.quit()


def test_draw_state_paints_snake_and_food(screen):
    settings = Settings()
    draw_state(screen, [(0, 0), (-1, 0)], (3, 2), settings, show_grid=True)
    assert screen.get_at((300, 200))[:3] == config.SNAKE_COLOR
    assert screen.get_at((360, 160))[:3] == config.FOOD_COLOR
    assert screen.get_at((5, 5))[:3] == config.BG_COLOR


def test_cli_headless_prints_state(capsys):
    assert main(["--headless-ticks", "2", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "snake: [(2, 0), (1, 0), (0, 0)" in out
    assert "heading: right" in out


def test_cli_rejects_bad_settings(capsys):
    assert main(["--headless-ticks", "1", "--width", "0"]) == 2
    assert "error:" in capsys.readouterr().err


def test_cli_reports_full_grid():
    assert main(["--headless-ticks", "1", "--width", "1", "--height", "1", "--length", "1"]) == 1
