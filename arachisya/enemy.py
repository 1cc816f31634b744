"""Monsters that chase the knight and hurt it on contact."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

import pygame
from pygame.math import Vector2

from arachisya.base_character import BaseCharacter
from arachisya.character import _play_if_idle, _Sound

if TYPE_CHECKING:
    from arachisya.character import Character


class EnemyType(Enum):
    """The kinds of monster, in spawn-table order."""

    GOBLIN = 0
    SLIME = 1
    INTELLECT_DEVOURER = 2
    ELITE_GOBLIN = 3
    SLIME_KING = 4


@dataclass(frozen=True)
class EnemyStats:
    """Fixed characteristics of one kind of monster."""

    max_health: float
    damage_per_sec: float
    radius: float


_STATS = {
    EnemyType.GOBLIN: EnemyStats(max_health=100.0, damage_per_sec=12.0, radius=25.0),
    EnemyType.SLIME: EnemyStats(max_health=60.0, damage_per_sec=8.0, radius=20.0),
    EnemyType.INTELLECT_DEVOURER: EnemyStats(
        max_health=180.0, damage_per_sec=20.0, radius=35.0
    ),
    EnemyType.ELITE_GOBLIN: EnemyStats(max_health=150.0, damage_per_sec=18.0, radius=30.0),
    EnemyType.SLIME_KING: EnemyStats(max_health=120.0, damage_per_sec=15.0, radius=28.0),
}


def stats_for(enemy_type: EnemyType) -> EnemyStats:
    """Return the stats of a kind of monster."""
    return _STATS[EnemyType(enemy_type)]


class Enemy(BaseCharacter):
    """A monster positioned in world space that walks toward its target."""

    def __init__(
        self,
        pos: Vector2,
        idle: pygame.Surface,
        run: pygame.Surface,
        speed: float,
        enemy_type: EnemyType = EnemyType.GOBLIN,
        target: Character | None = None,
        killed_sound: _Sound | None = None,
    ) -> None:
        super().__init__(idle, run)
        self.world_pos = Vector2(pos)
        self.speed = speed
        self.enemy_type = EnemyType(enemy_type)
        self.target = target
        self.killed_sound = killed_sound
        self.killed = False
        stats = stats_for(self.enemy_type)
        self.max_health = stats.max_health
        self.health = stats.max_health
        self.damage_per_sec = stats.damage_per_sec
        self.radius = stats.radius

    def _require_target(self) -> Character:
        if self.target is None:
            raise RuntimeError("enemy has no target")
        return self.target

    def screen_pos(self) -> Vector2:
        return self.world_pos - self._require_target().world_pos

    def _steer(self, distance: float) -> None:
        kind = self.enemy_type
        if kind in (EnemyType.SLIME, EnemyType.SLIME_KING):
            # slimes keep a cautious distance
            if distance < self.radius * 1.2:
                self.velocity = Vector2()
        elif kind is EnemyType.INTELLECT_DEVOURER:
            if distance < self.radius * 0.8:
                self.velocity = Vector2()
        elif kind is EnemyType.ELITE_GOBLIN:
            if self.radius < distance < self.radius * 1.5:
                # circle around the target
                perpendicular = Vector2(-self.velocity.y, self.velocity.x)
                self.velocity = self.velocity + perpendicular * 0.3
            elif distance < self.radius:
                self.velocity = Vector2()
        elif distance < self.radius:
            self.velocity = Vector2()

    def tick(self, delta_time: float) -> None:
        """Chase the target and damage it while touching it."""
        if not self.alive:
            if not self.killed:
                _play_if_idle(self.killed_sound)
            self.killed = True
            return

        target = self._require_target()
        self.velocity = target.screen_pos() - self.screen_pos()
        self._steer(self.velocity.length())

        super().tick(delta_time)

        if target.collision_rec().collides(self.collision_rec()):
            target.take_damage(self.damage_per_sec * delta_time)