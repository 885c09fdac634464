"""
Window input and drawing, on SDL's dummy video driver.
"""
from collections import defaultdict

import pygame
import pytest

from gameoflife.config import LifeConfig
from gameoflife.engine import LifeEngine
from gameoflife.grid import empty_grid
from gameoflife.visual import GameOfLife

NO_BUTTONS = (False, False, False)


def held(*keys):
    pressed = defaultdict(bool)
    for key in keys:
        pressed[key] = True
    return pressed


@pytest.fixture
def game():
    config = LifeConfig(window_width=200, window_height=100, cell_size=10)
    app = GameOfLife(config, LifeEngine(empty_grid(config.rows, config.cols), workers=4))
    yield app
    pygame.quit()


def test_screen_to_grid(game):
    assert game.screen_to_grid(0, 0) == (0, 0)
    assert game.screen_to_grid(25, 93) == (9, 2)


def test_left_button_paints_and_right_erases(game):
    game.apply_held_input(held(), (True, False, False), (35, 15))
    assert game.engine.grid[1, 3] == 1
    game.apply_held_input(held(), (False, False, True), (35, 15))
    assert game.engine.grid[1, 3] == 0


def test_paint_outside_grid_is_ignored(game):
    game.apply_held_input(held(), (True, False, False), (500, 500))
    assert game.engine.population == 0


def test_held_arrows_change_delay_within_limits(game):
    for _ in range(10):
        game.apply_held_input(held(pygame.K_UP), NO_BUTTONS, (0, 0))
    assert game.frame_delay_ms == 10

    game.apply_held_input(held(pygame.K_DOWN), NO_BUTTONS, (0, 0))
    assert game.frame_delay_ms == 20

    for _ in range(200):
        game.apply_held_input(held(pygame.K_DOWN), NO_BUTTONS, (0, 0))
    assert game.frame_delay_ms == 1000


def test_keys(game):
    assert game.handle_key(pygame.K_SPACE, (0, 0))
    assert not game.running

    game.handle_key(pygame.K_g, (50, 30))
    assert game.engine.population == 5

    game.handle_key(pygame.K_c, (0, 0))
    assert game.engine.population == 0

    assert not game.handle_key(pygame.K_ESCAPE, (0, 0))


def test_tick_steps_only_when_running(game):
    game.frame_delay_ms = 10
    assert game.tick()
    assert game.engine.generation == 1
    game.running = False
    assert game.tick()
    assert game.engine.generation == 1


def test_quit_event_stops_loop(game):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert not game.tick()


def test_draw_fills_live_cells(game):
    game.engine.paint(2, 3)
    game.draw()
    assert tuple(game.screen.get_at((3 * 10 + 5, 2 * 10 + 5)))[:3] == (0, 255, 100)
    assert tuple(game.screen.get_at((5 * 10 + 5, 5 * 10 + 5)))[:3] == (0, 0, 0)
