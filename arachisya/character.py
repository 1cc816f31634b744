"""The player-controlled knight."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

import pygame
from pygame.math import Vector2

from arachisya.base_character import BaseCharacter, Rectangle, _blit_region


class _Sound(Protocol):
    def set_volume(self, value: float) -> None: ...
    def get_num_channels(self) -> int: ...
    def play(self) -> Any: ...


def _play_if_idle(sound: _Sound | None) -> None:
    if sound is not None and sound.get_num_channels() == 0:
        sound.play()


@dataclass(frozen=True)
class Controls:
    """The player's input for one frame."""

    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    attack: bool = False

    @classmethod
    def from_pressed(cls, pressed: Any) -> Controls:
        """Build from a key-state mapping such as ``pygame.key.get_pressed()``."""
        return cls(
            left=bool(pressed[pygame.K_a]),
            right=bool(pressed[pygame.K_d]),
            up=bool(pressed[pygame.K_w]),
            down=bool(pressed[pygame.K_s]),
            attack=bool(pressed[pygame.K_SPACE]),
        )

    @property
    def moving(self) -> bool:
        return self.left or self.right or self.up or self.down


class Character(BaseCharacter):
    """The knight: always drawn at the centre of the window, carrying a sword."""

    weapon_draw_scale = 3.0
    swing_angle = 35.0

    def __init__(
        self,
        window_width: int,
        window_height: int,
        idle: pygame.Surface,
        run: pygame.Surface,
        weapon: pygame.Surface,
        stride_sound: _Sound | None = None,
        attack_sound: _Sound | None = None,
    ) -> None:
        super().__init__(idle, run)
        self.window_width = window_width
        self.window_height = window_height
        self.weapon = weapon
        self.weapon_collision_rec = Rectangle(0.0, 0.0, 0.0, 0.0)
        self.weapon_origin = Vector2()
        self.weapon_offset = Vector2()
        self.weapon_rotation = 0.0
        self.stride_sound = stride_sound
        self.attack_sound = attack_sound
        if stride_sound is not None:
            stride_sound.set_volume(0.8)
        if attack_sound is not None:
            attack_sound.set_volume(0.65)

    def screen_pos(self) -> Vector2:
        return Vector2(
            self.window_width / 2.0 - self.scale * (0.5 * self.width),
            self.window_height / 2.0 - self.scale * (0.5 * self.height),
        )

    def tick(self, delta_time: float, controls: Controls = Controls()) -> None:
        """Apply the player's input, move, and place the sword."""
        if not self.alive:
            return

        if controls.left:
            self.velocity.x -= 1.0
        if controls.right:
            self.velocity.x += 1.0
        if controls.up:
            self.velocity.y -= 1.0
        if controls.down:
            self.velocity.y += 1.0
        if controls.moving:
            _play_if_idle(self.stride_sound)

        super().tick(delta_time)

        pos = self.screen_pos()
        weapon_w = self.weapon.get_width() * self.scale
        weapon_h = self.weapon.get_height() * self.scale
        if self.right_left > 0.0:
            self.weapon_origin = Vector2(0.0, weapon_h)
            self.weapon_offset = Vector2(45.0, 70.0)
            self.weapon_collision_rec = Rectangle(
                pos.x + self.weapon_offset.x,
                pos.y + self.weapon_offset.y - weapon_h,
                weapon_w,
                weapon_h,
            )
            self.weapon_rotation = self.swing_angle if controls.attack else 0.0
        else:
            self.weapon_origin = Vector2(weapon_w, weapon_h)
            self.weapon_offset = Vector2(35.0, 70.0)
            self.weapon_collision_rec = Rectangle(
                pos.x + self.weapon_offset.x - weapon_w,
                pos.y + self.weapon_offset.y - weapon_h,
                weapon_w,
                weapon_h,
            )
            self.weapon_rotation = -self.swing_angle if controls.attack else 0.0

        if controls.attack:
            _play_if_idle(self.attack_sound)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the knight and its sword, rotated about the grip."""
        super().draw(surface)
        if not self.alive:
            return
        width, height = self.weapon.get_size()
        size = (
            max(1, int(width * self.weapon_draw_scale)),
            max(1, int(height * self.weapon_draw_scale)),
        )
        image = pygame.transform.scale(self.weapon, size)
        if self.right_left < 0.0:
            image = pygame.transform.flip(image, True, False)
        pivot = self.screen_pos() + self.weapon_offset
        to_center = Vector2(size[0] / 2.0, size[1] / 2.0) - self.weapon_origin
        rotated = pygame.transform.rotate(image, -self.weapon_rotation)
        center = pivot + to_center.rotate(self.weapon_rotation)
        surface.blit(rotated, rotated.get_rect(center=(round(center.x), round(center.y))))