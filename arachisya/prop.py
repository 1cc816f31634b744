"""Static scenery that blocks movement."""

from __future__ import annotations

import pygame
from pygame.math import Vector2

from arachisya.base_character import Rectangle, _blit_region


class Prop:
    """A scaled texture fixed at a world position."""

    def __init__(self, pos: Vector2, texture: pygame.Surface, scale: float) -> None:
        self.world_pos = Vector2(pos)
        self.texture = texture
        self.scale = scale

    def _screen_pos(self, knight_pos: Vector2) -> Vector2:
        return self.world_pos - Vector2(knight_pos)

    def render(self, surface: pygame.Surface, knight_pos: Vector2) -> None:
        pos = self._screen_pos(knight_pos)
        width, height = self.texture.get_size()
        _blit_region(
            surface,
            self.texture,
            (0, 0, width, height),
            (width * self.scale, height * self.scale),
            (pos.x, pos.y),
        )

    def collision_rec(self, knight_pos: Vector2) -> Rectangle:
        pos = self._screen_pos(knight_pos)
        return Rectangle(
            pos.x,
            pos.y,
            self.texture.get_width() * self.scale,
            self.texture.get_height() * self.scale,
        )