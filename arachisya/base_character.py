"""Shared movement, animation and health logic for every creature on the map."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

import pygame
from pygame.math import Vector2


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle in screen coordinates."""

    x: float
    y: float
    width: float
    height: float

    def collides(self, other: Rectangle) -> bool:
        """Return True when the two rectangles overlap (touching edges do not count)."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


def _blit_region(
    surface: pygame.Surface,
    texture: pygame.Surface,
    area: Sequence[float],
    size: Sequence[float],
    position: Sequence[float],
    flip_x: bool = False,
) -> None:
    """Copy part of a texture, optionally mirrored and scaled, onto a surface."""
    x, y, w, h = (int(v) for v in area)
    clip = pygame.Rect(x, y, w, h).clip(texture.get_rect())
    if clip.width <= 0 or clip.height <= 0:
        return
    width, height = (max(0, int(v)) for v in size)
    if width == 0 or height == 0:
        return
    image = texture.subsurface(clip)
    if flip_x:
        image = pygame.transform.flip(image, True, False)
    image = pygame.transform.scale(image, (width, height))
    surface.blit(image, (round(position[0]), round(position[1])))


class BaseCharacter(ABC):
    """A sprite-sheet animated creature that moves through the world."""

    max_frames = 6
    update_time = 1.0 / 12.0
    scale = 4.0

    def __init__(self, idle: pygame.Surface, run: pygame.Surface) -> None:
        self.idle = idle
        self.run = run
        self.texture = idle
        self.world_pos = Vector2()
        self.world_pos_last_frame = Vector2()
        # 1 when facing right, -1 when facing left
        self.right_left = 1.0
        self.running_time = 0.0
        self.frame = 0
        self.speed = 4.0
        self.width = float(idle.get_width() // self.max_frames)
        self.height = float(idle.get_height())
        self.velocity = Vector2()
        self.was_moving = False
        self.health = 100.0
        self.alive = True

    @abstractmethod
    def screen_pos(self) -> Vector2:
        """Where the top-left corner of the sprite is drawn."""

    def undo_movement(self) -> None:
        """Return to the position held before the last tick."""
        self.world_pos = Vector2(self.world_pos_last_frame)

    def collision_rec(self) -> Rectangle:
        pos = self.screen_pos()
        return Rectangle(
            pos.x,
            pos.y,
            self.width * self.scale,
            self.texture.get_height() * self.scale,
        )

    def _advance_frame(self) -> None:
        self.frame += 1
        self.running_time = 0.0
        if self.frame >= self.max_frames:
            self.frame = 0

    def tick(self, delta_time: float) -> None:
        """Move along the current velocity and advance the animation."""
        self.world_pos_last_frame = Vector2(self.world_pos)
        is_moving = self.velocity.length() != 0.0
        self.running_time += delta_time

        if is_moving:
            self.world_pos = self.world_pos + self.velocity.normalize() * self.speed
            self.right_left = -1.0 if self.velocity.x < 0.0 else 1.0
            self.texture = self.run
            if not self.was_moving:
                self.frame = 0
                self.running_time = 0.0
            if self.running_time >= self.update_time:
                self._advance_frame()
        else:
            self.texture = self.idle
            if self.was_moving:
                self.frame = 0
                self.running_time = 0.0
            # idle animation runs three times slower
            if self.running_time >= self.update_time * 3.0:
                self._advance_frame()

        self.was_moving = is_moving
        self.velocity = Vector2()
        if not 0 <= self.frame < self.max_frames:
            self.frame = 0

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the current animation frame."""
        pos = self.screen_pos()
        _blit_region(
            surface,
            self.texture,
            (self.frame * self.width, 0.0, self.width, self.height),
            (self.scale * self.width, self.scale * self.height),
            (pos.x, pos.y),
            flip_x=self.right_left < 0.0,
        )

    def take_damage(self, damage: float) -> None:
        """Lose health; dying at zero."""
        self.health -= damage
        if self.health <= 0.0:
            self.health = 0.0
            self.alive = False