import random

import pytest
import pygame
from pygame.math import Vector2

from arachisya.character import Controls
from arachisya.enemy import Enemy, EnemyType
from arachisya.game import (
    ENEMY_SPAWN_INTERVAL,
    IMAGE_FILES,
    LIME,
    MAROON,
    YELLOW,
    Game,
    GameState,
    health_color,
    health_text,
    load_assets,
    Assets,
)


class FakeSound:
    def __init__(self):
        self.plays = 0

    def set_volume(self, value):
        self.volume = value

    def get_num_channels(self):
        return 0

    def play(self):
        self.plays += 1


def make_assets(**sounds):
    sheet = lambda: pygame.Surface((96, 16))  # noqa: E731
    game_map = pygame.Surface((300, 300))
    game_map.fill((10, 20, 30))
    return Assets(
        goblin_idle=sheet(),
        goblin_run=sheet(),
        slime_idle=sheet(),
        slime_run=sheet(),
        intellect_idle=sheet(),
        knight_idle=sheet(),
        knight_run=sheet(),
        weapon=pygame.Surface((8, 16)),
        rock=pygame.Surface((16, 16)),
        sign=pygame.Surface((16, 16)),
        log=pygame.Surface((16, 16)),
        map=game_map,
        open_screen_background=pygame.Surface((10, 10)),
        start_screen_tile=pygame.Surface((400, 40)),
        **sounds,
    )


def make_game(seed=1, **sounds):
    return Game(make_assets(**sounds), random.Random(seed))


def lone_enemy(game, world_pos, kind=EnemyType.GOBLIN):
    enemy = Enemy(
        Vector2(world_pos),
        pygame.Surface((96, 16)),
        pygame.Surface((96, 16)),
        3.0,
        kind,
        game.knight,
    )
    game.enemies = [enemy]
    return enemy


def test_initial_world():
    game = make_game()
    assert len(game.enemies) == 21
    assert game.enemies[0].world_pos == Vector2(1250.0, 350.0)
    assert all(enemy.target is game.knight for enemy in game.enemies)
    assert game.state is GameState.PLAYING


def test_spawned_enemy_is_in_range():
    game = make_game()
    enemy = game.spawn_random_enemy()
    assert game.enemies[-1] is enemy
    assert 1200.0 <= enemy.world_pos.x <= 3300.0
    assert 1000.0 <= enemy.world_pos.y <= 3000.0
    assert 1.5 <= enemy.speed <= 5.0
    assert enemy.target is game.knight


def test_spawns_are_reproducible_with_same_seed():
    first = make_game(seed=7).spawn_random_enemy()
    second = make_game(seed=7).spawn_random_enemy()
    assert first.enemy_type is second.enemy_type
    assert first.world_pos == second.world_pos
    assert first.speed == second.speed


def test_intellect_devourer_uses_idle_sheet_for_running():
    game = make_game()
    enemy = game._make_enemy(Vector2(), 2.0, EnemyType.INTELLECT_DEVOURER)
    assert enemy.run is game.assets.intellect_idle


def test_update_spawns_after_interval():
    game = make_game()
    count = len(game.enemies)
    game.update(ENEMY_SPAWN_INTERVAL / 2)
    assert len(game.enemies) == count
    game.update(ENEMY_SPAWN_INTERVAL / 2)
    assert len(game.enemies) == count + 1
    assert game.spawn_timer == 0.0


def test_game_over_freezes_world_and_plays_defeat_once():
    defeat = FakeSound()
    game = make_game(defeat=defeat)
    game.knight.take_damage(500.0)
    positions = [Vector2(enemy.world_pos) for enemy in game.enemies]
    game.update(10.0)
    game.update(10.0)
    assert game.state is GameState.GAME_OVER
    assert [enemy.world_pos for enemy in game.enemies] == positions
    assert game.spawn_timer == 0.0
    assert defeat.plays == 1


def test_victory_when_no_enemies():
    game = make_game()
    game.enemies = []
    game.update(10.0)
    assert game.state is GameState.VICTORY
    assert game.enemies == []


def test_attack_removes_enemy_under_sword():
    game = make_game()
    rec = None
    game.knight.tick(0.0, Controls())
    rec = game.knight.weapon_collision_rec
    enemy = lone_enemy(game, (rec.x, rec.y))
    game.update(0.01, Controls(attack=True), attack_pressed=True)
    assert game.enemies == []
    assert enemy.alive is False
    assert game.state is GameState.VICTORY


def test_enemy_survives_without_attack():
    game = make_game()
    game.knight.tick(0.0, Controls())
    rec = game.knight.weapon_collision_rec
    enemy = lone_enemy(game, (rec.x, rec.y))
    game.update(0.01, Controls(), attack_pressed=False)
    assert game.enemies == [enemy]
    assert enemy.alive is True


def test_knight_cannot_leave_left_edge():
    game = make_game()
    game.enemies = [game.enemies[0]]
    game.knight.world_pos = Vector2(-128.0, 0.0)
    game.update(0.01, Controls(left=True))
    assert game.knight.world_pos.x == pytest.approx(-128.0)


def test_knight_moves_freely_inside_map():
    game = make_game()
    game.enemies = [game.enemies[0]]
    game.update(0.01, Controls(right=True))
    assert game.knight.world_pos.x == pytest.approx(game.knight.speed)


def test_health_text_keeps_five_characters():
    assert health_text(100.0) == "Health: 100.0"
    assert health_text(75.5) == "Health: 75.50"


@pytest.mark.parametrize(
    "health, color",
    [(100.0, LIME), (75.0, LIME), (74.9, YELLOW), (45.0, YELLOW), (44.9, MAROON), (0.0, MAROON)],
)
def test_health_color_thresholds(health, color):
    assert health_color(health) == color


def test_draw_places_map_at_origin():
    game = make_game()
    surface = pygame.Surface((682, 576))
    game.draw(surface)
    assert tuple(surface.get_at((0, 0)))[:3] == (10, 20, 30)


def test_load_assets_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_assets(tmp_path)


def test_load_assets_reads_images(tmp_path):
    for name, relative in IMAGE_FILES.items():
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        size = (48, 24) if name == "map" else (96, 16)
        pygame.image.save(pygame.Surface(size), str(path))
    assets = load_assets(tmp_path)
    assert assets.map.get_size() == (48, 24)
    assert assets.knight_idle.get_size() == (96, 16)
    assert assets.game_music is None