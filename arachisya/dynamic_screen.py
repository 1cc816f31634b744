"""Animated title screen shown before the game starts."""

from __future__ import annotations

import pygame
from pygame.math import Vector2

from arachisya.base_character import _blit_region

START_PROMPT = "Press Enter To Start"


class DynamicScreen:
    """Plays a spinning globe sprite sheet laid out in rows of frames."""

    max_frames = 40
    max_tile_lines = 4
    update_time = 1.0 / 18.0
    draw_scale = 1.7

    def __init__(self, texture: pygame.Surface) -> None:
        self.texture = texture
        self.running_time = 0.0
        self.frame_row = 0
        self.frame_line = 0
        self.width = float(texture.get_width() // self.max_frames)
        self.height = float(texture.get_height() // self.max_tile_lines)
        self._font: pygame.font.Font | None = None

    def tick(self, delta_time: float) -> None:
        """Advance the animation clock."""
        self.running_time += delta_time
        if self.running_time >= self.update_time:
            self.frame_row += 1
            if self.frame_row >= self.max_frames:
                self.frame_row = 0
                self.frame_line += 1
                if self.frame_line >= self.max_tile_lines:
                    self.frame_line = 0
            self.running_time = 0.0

    def draw(self, surface: pygame.Surface, map_pos: Vector2) -> None:
        """Draw the current frame and the start prompt."""
        _blit_region(
            surface,
            self.texture,
            (
                self.frame_row * self.width,
                self.frame_line * self.height,
                self.width,
                self.height,
            ),
            (self.width * self.draw_scale, self.height * self.draw_scale),
            (map_pos[0] + 95, map_pos[1] + 30),
        )
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 33)
        text = self._font.render(START_PROMPT, True, (255, 255, 255))
        surface.blit(text, (160, 180))