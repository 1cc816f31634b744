"""Game setup, per-frame rules and the window loop."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

import pygame
from pygame.math import Vector2

from arachisya.character import Character, Controls, _play_if_idle, _Sound
from arachisya.dynamic_screen import DynamicScreen
from arachisya.enemy import Enemy, EnemyType
from arachisya.prop import Prop

WINDOW_WIDTH = 682
WINDOW_HEIGHT = 576
TITLE = "Arachisya"
MAP_SCALE = 4.0
ENEMY_SPAWN_INTERVAL = 7.5
FPS = 60

SKY_BLUE = (125, 210, 255)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
LIME = (0, 158, 47)
YELLOW = (253, 249, 0)
MAROON = (190, 33, 55)
RED = (230, 41, 55)
GOLD = (255, 203, 0)

IMAGE_FILES = {
    "goblin_idle": "characters/goblin_idle_spritesheet.png",
    "goblin_run": "characters/goblin_run_spritesheet.png",
    "slime_idle": "characters/slime_idle_spritesheet.png",
    "slime_run": "characters/slime_run_spritesheet.png",
    "intellect_idle": "characters/IntellectDevourerIdleSide_spritesheet.png",
    "knight_idle": "characters/knight_idle_spritesheet.png",
    "knight_run": "characters/knight_run_spritesheet.png",
    "weapon": "characters/weapon_laser_sword.png",
    "rock": "nature_tileset/Rock.png",
    "sign": "nature_tileset/Sign.png",
    "log": "nature_tileset/Log.png",
    "map": "nature_tileset/DesertWorldMap_2_24x24.png",
    "open_screen_background": "nature_tileset/Space_Background_fit.png",
    "start_screen_tile": "nature_tileset/dune_globe.png",
}

SOUND_FILES = {
    "game_music": "nature_tileset/Desecrated Cave ver.1.wav",
    "opening_music": "nature_tileset/A town without hope (no loop).wav",
    "defeat": "nature_tileset/gameover_loud.mp3",
    "stride": "nature_tileset/16_human_walk_stone_3.wav",
    "attack": "nature_tileset/07_human_atk_sword_2.wav",
    "enemy_killed": "nature_tileset/21_orc_damage_3.wav",
}

_PROPS = (
    (800.0, 1200.0, "rock", 7.0),
    (1450.0, 950.0, "sign", 4.0),
    (1800.0, 1650.0, "rock", 10.0),
    (600.0, 700.0, "log", 6.0),
    (1500.0, 300.0, "log", 5.0),
    (2100.0, 500.0, "rock", 6.5),
)

_INITIAL_ENEMIES = (
    (1250.0, 350.0, 3.0, EnemyType.GOBLIN),
    (2700.0, 2500.0, 3.9, EnemyType.GOBLIN),
    (3200.0, 250.0, 2.8, EnemyType.GOBLIN),
    (3600.0, 2900.0, 3.2, EnemyType.GOBLIN),
    (1800.0, 600.0, 2.5, EnemyType.GOBLIN),
    (2200.0, 1200.0, 4.5, EnemyType.GOBLIN),
    (1900.0, 3000.0, 1.7, EnemyType.SLIME),
    (1330.0, 2330.0, 2.9, EnemyType.SLIME),
    (500.0, 800.0, 1.2, EnemyType.SLIME),
    (3000.0, 3500.0, 3.8, EnemyType.SLIME),
    (900.0, 2800.0, 1.5, EnemyType.SLIME),
    (2500.0, 1800.0, 2.1, EnemyType.SLIME),
    (1600.0, 1000.0, 1.9, EnemyType.SLIME),
    (2670.0, 2900.0, 2.2, EnemyType.INTELLECT_DEVOURER),
    (4000.0, 1500.0, 4.1, EnemyType.INTELLECT_DEVOURER),
    (700.0, 1800.0, 1.8, EnemyType.INTELLECT_DEVOURER),
    (3800.0, 3200.0, 3.5, EnemyType.INTELLECT_DEVOURER),
    (4200.0, 800.0, 5.2, EnemyType.ELITE_GOBLIN),
    (200.0, 3800.0, 4.8, EnemyType.ELITE_GOBLIN),
    (4500.0, 2000.0, 2.5, EnemyType.SLIME_KING),
    (300.0, 2200.0, 2.8, EnemyType.SLIME_KING),
)


@dataclass
class Assets:
    """Every texture and sound the game uses."""

    goblin_idle: pygame.Surface
    goblin_run: pygame.Surface
    slime_idle: pygame.Surface
    slime_run: pygame.Surface
    intellect_idle: pygame.Surface
    knight_idle: pygame.Surface
    knight_run: pygame.Surface
    weapon: pygame.Surface
    rock: pygame.Surface
    sign: pygame.Surface
    log: pygame.Surface
    map: pygame.Surface
    open_screen_background: pygame.Surface
    start_screen_tile: pygame.Surface
    game_music: _Sound | None = None
    opening_music: _Sound | None = None
    defeat: _Sound | None = None
    stride: _Sound | None = None
    attack: _Sound | None = None
    enemy_killed: _Sound | None = None


def _existing(base_dir: Path, relative: str) -> Path:
    path = base_dir / relative
    if not path.is_file():
        raise FileNotFoundError(f"missing asset: {path}")
    return path


def load_assets(base_dir: str | Path) -> Assets:
    """Load textures, and sounds when the mixer is running, from an asset directory."""
    base = Path(base_dir)
    images = {
        name: pygame.image.load(str(_existing(base, relative)))
        for name, relative in IMAGE_FILES.items()
    }
    sounds: dict[str, pygame.mixer.Sound] = {}
    if pygame.mixer.get_init():
        sounds = {
            name: pygame.mixer.Sound(str(_existing(base, relative)))
            for name, relative in SOUND_FILES.items()
        }
        sounds["defeat"].set_volume(0.2)
    return Assets(**images, **sounds)


def health_text(health: float) -> str:
    """The HUD health label: at most five characters of the value."""
    return "Health: " + f"{health:f}"[:5]


def health_color(health: float) -> tuple[int, int, int]:
    """Green when healthy, yellow when hurt, maroon when close to death."""
    if health >= 75.0:
        return LIME
    if health >= 45.0:
        return YELLOW
    return MAROON


class GameState(Enum):
    PLAYING = auto()
    GAME_OVER = auto()
    VICTORY = auto()


class Game:
    """The world: the knight, the scenery and the monsters."""

    def __init__(self, assets: Assets, rng: random.Random | None = None) -> None:
        self.assets = assets
        self.rng = rng if rng is not None else random.Random()
        self.knight = Character(
            WINDOW_WIDTH,
            WINDOW_HEIGHT,
            assets.knight_idle,
            assets.knight_run,
            assets.weapon,
            assets.stride,
            assets.attack,
        )
        self.props = [
            Prop(Vector2(x, y), getattr(assets, texture), scale)
            for x, y, texture, scale in _PROPS
        ]
        self.enemies: list[Enemy] = [
            self._make_enemy(Vector2(x, y), speed, kind)
            for x, y, speed, kind in _INITIAL_ENEMIES
        ]
        self.spawn_timer = 0.0
        self._defeat_played = False
        self._scaled_map: pygame.Surface | None = None
        self._fonts: dict[int, pygame.font.Font] = {}

    def _textures_for(self, kind: EnemyType) -> tuple[pygame.Surface, pygame.Surface]:
        if kind in (EnemyType.GOBLIN, EnemyType.ELITE_GOBLIN):
            return self.assets.goblin_idle, self.assets.goblin_run
        if kind in (EnemyType.SLIME, EnemyType.SLIME_KING):
            return self.assets.slime_idle, self.assets.slime_run
        return self.assets.intellect_idle, self.assets.intellect_idle

    def _make_enemy(self, pos: Vector2, speed: float, kind: EnemyType) -> Enemy:
        idle, run = self._textures_for(kind)
        return Enemy(pos, idle, run, speed, kind, self.knight, self.assets.enemy_killed)

    @property
    def state(self) -> GameState:
        if not self.knight.alive:
            return GameState.GAME_OVER
        if not self.enemies:
            return GameState.VICTORY
        return GameState.PLAYING

    @property
    def map_pos(self) -> Vector2:
        return self.knight.world_pos * -1.0

    def spawn_random_enemy(self) -> Enemy:
        """Add a monster of random kind, place and speed near the map centre."""
        kind = list(EnemyType)[self.rng.randint(0, 4)]
        pos = Vector2(self.rng.uniform(1200.0, 3300.0), self.rng.uniform(1000.0, 3000.0))
        speed = self.rng.uniform(1.5, 5.0)
        enemy = self._make_enemy(pos, speed, kind)
        self.enemies.append(enemy)
        return enemy

    def _keep_knight_on_map(self) -> None:
        pos = self.knight.world_pos
        map_width = self.assets.map.get_width() * MAP_SCALE
        map_height = self.assets.map.get_height() * MAP_SCALE
        if (
            pos.x < -130.0
            or pos.y < -100.0
            or (pos.x + WINDOW_HEIGHT) * 0.99 > map_width
            or (pos.y + WINDOW_HEIGHT) * 0.99 > map_height
        ):
            self.knight.undo_movement()

    def _resolve_prop_collisions(self) -> None:
        for prop in self.props:
            if prop.collision_rec(self.knight.world_pos).collides(self.knight.collision_rec()):
                self.knight.undo_movement()
            for enemy in self.enemies:
                if prop.collision_rec(self.knight.world_pos).collides(enemy.collision_rec()):
                    enemy.undo_movement()

    def update(
        self,
        delta_time: float,
        controls: Controls = Controls(),
        attack_pressed: bool = False,
    ) -> None:
        """Advance the world by one frame."""
        state = self.state
        if state is GameState.GAME_OVER:
            if not self._defeat_played:
                _play_if_idle(self.assets.defeat)
                self._defeat_played = True
            return
        if state is GameState.VICTORY:
            return

        self.spawn_timer += delta_time
        if self.spawn_timer >= ENEMY_SPAWN_INTERVAL:
            self.spawn_random_enemy()
            self.spawn_timer = 0.0

        self.knight.tick(delta_time, controls)
        self._keep_knight_on_map()
        self._resolve_prop_collisions()

        for enemy in self.enemies:
            enemy.tick(delta_time)
            if enemy.collision_rec().collides(self.knight.collision_rec()):
                enemy.undo_movement()

        if attack_pressed:
            weapon = self.knight.weapon_collision_rec
            survivors = []
            for enemy in self.enemies:
                if enemy.collision_rec().collides(weapon):
                    enemy.alive = False
                else:
                    survivors.append(enemy)
            self.enemies = survivors

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _text(self, surface: pygame.Surface, text: str, pos, size: int, color) -> None:
        surface.blit(self._font(size).render(text, True, color), (round(pos[0]), round(pos[1])))

    def draw(self, surface: pygame.Surface) -> None:
        """Render the current frame."""
        surface.fill(SKY_BLUE)
        if self._scaled_map is None:
            width, height = self.assets.map.get_size()
            self._scaled_map = pygame.transform.scale(
                self.assets.map, (int(width * MAP_SCALE), int(height * MAP_SCALE))
            )
        map_pos = self.map_pos
        surface.blit(self._scaled_map, (round(map_pos.x), round(map_pos.y)))

        for prop in self.props:
            prop.render(surface, self.knight.world_pos)

        state = self.state
        if state is GameState.GAME_OVER:
            self._text(surface, "Game Over!", (220, WINDOW_HEIGHT / 2.3), 48, RED)
            return
        if state is GameState.VICTORY:
            self._text(surface, "VICTORY!", (240, WINDOW_HEIGHT / 2.3), 48, GOLD)
            self._text(
                surface, "All enemies defeated!", (180, WINDOW_HEIGHT / 2.3 + 60), 32, LIME
            )
            return

        health = self.knight.health
        self._text(surface, health_text(health), (55, 45), 36, health_color(health))
        self._text(surface, f"Enemies: {len(self.enemies)}", (55, 90), 24, WHITE)

        self.knight.draw(surface)
        for enemy in self.enemies:
            if enemy.alive:
                enemy.draw(surface)


def _run_title_screen(screen: pygame.Surface, assets: Assets, clock: pygame.time.Clock) -> bool:
    title = DynamicScreen(assets.start_screen_tile)
    _play_if_idle(assets.opening_music)
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN:
                return True
        delta_time = clock.tick(FPS) / 1000.0
        screen.fill(BLACK)
        screen.blit(assets.open_screen_background, (0, 0))
        title.tick(delta_time)
        title.draw(screen, Vector2())
        _play_if_idle(assets.opening_music)
        pygame.display.flip()


def main(argv: list[str] | None = None) -> int:
    """Open the window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="arachisya", description=TITLE)
    parser.add_argument(
        "--assets",
        type=Path,
        default=Path.cwd(),
        help="directory holding the characters/ and nature_tileset/ folders",
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(TITLE)
        try:
            pygame.mixer.init()
        except pygame.error:
            pass
        assets = load_assets(args.assets)
        clock = pygame.time.Clock()

        if not _run_title_screen(screen, assets, clock):
            return 0
        if assets.opening_music is not None:
            assets.opening_music.stop()

        game = Game(assets, random.Random())
        _play_if_idle(assets.game_music)
        while True:
            attack_pressed = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    if assets.game_music is not None:
                        assets.game_music.stop()
                    return 0
                if event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                    attack_pressed = True
            delta_time = clock.tick(FPS) / 1000.0
            controls = Controls.from_pressed(pygame.key.get_pressed())
            game.update(delta_time, controls, attack_pressed)
            game.draw(screen)
            if game.state is GameState.PLAYING:
                _play_if_idle(assets.game_music)
            pygame.display.flip()
    finally:
        pygame.quit()