import pygame
import pytest
from pygame.math import Vector2

from arachisya.dynamic_screen import DynamicScreen


@pytest.fixture
def screen():
    texture = pygame.Surface((DynamicScreen.max_frames * 2, DynamicScreen.max_tile_lines * 2))
    texture.fill((10, 200, 30))
    return DynamicScreen(texture)


def test_frame_size_divides_sheet(screen):
    assert screen.width * screen.max_frames == screen.texture.get_width()
    assert screen.height * screen.max_tile_lines == screen.texture.get_height()


def test_short_tick_does_not_advance(screen):
    screen.tick(screen.update_time / 2)
    assert screen.frame_row == 0
    assert screen.running_time == pytest.approx(screen.update_time / 2)


def test_tick_advances_row(screen):
    screen.tick(screen.update_time)
    assert screen.frame_row == 1
    assert screen.running_time == 0.0


def test_end_of_row_moves_to_next_line(screen):
    for _ in range(screen.max_frames):
        screen.tick(screen.update_time)
    assert (screen.frame_row, screen.frame_line) == (0, 1)


def test_full_cycle_returns_to_start(screen):
    for _ in range(screen.max_frames * screen.max_tile_lines):
        screen.tick(screen.update_time)
    assert (screen.frame_row, screen.frame_line) == (0, 0)


def test_draw_paints_globe_frame(screen):
    surface = pygame.Surface((682, 576))
    screen.draw(surface, Vector2(0, 0))
    assert surface.get_at((95, 30))[:3] == (10, 200, 30)
    assert surface.get_at((0, 0))[:3] == (0, 0, 0)