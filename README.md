# arachisya

A small top-down action game. You play a knight on a desert world map that is
full of enemies. Walk around, swing your laser sword, and clear the map before
the enemies wear your health down.

## Installing

```
pip install .
```

The game uses `pygame` to draw, and pip installs it as a dependency.

## Running

```
arachisya
```

The game reads its sprites and sounds from a base directory that holds two
folders, `characters/` and `nature_tileset/`. By default this is the current
directory. To use a different directory, pass `--assets`:

```
arachisya --assets path/to/assets
```

If a texture or sound file is missing, loading stops with a
`FileNotFoundError` that names the file. Sounds are only loaded when the audio
mixer starts. If it cannot start, the game runs without sound.

## Playing

The game opens on a title screen with an animated globe. Press **Enter** to
start.

| Key          | Action                          |
|--------------|---------------------------------|
| W A S D      | Move                            |
| Space        | Swing the sword                 |
| Close window | Quit (also on the title screen) |

- The knight starts with 100 health. The health readout is green at 75 or
  more, yellow at 45 or more, and maroon below that. The number of enemies
  left is shown under it.
- There are five kinds of enemy: goblins, slimes, intellect devourers, elite
  goblins and slime kings. They differ in how much damage they do each second
  while touching you, and in how close they come before they stop. Elite
  goblins circle around you as they close in.
- Pressing Space kills every enemy that the sword's reach overlaps.
- A new random enemy appears near the middle of the map every 7.5 seconds.
- Rocks, logs and signs block you and your enemies. The edges of the map hold
  you in.
- Kill every enemy to win. If your health runs out, the game is over. Either
  screen stays up until you close the window.

## Using it as a library

The game logic is kept apart from the window loop, so you can drive it from
code:

- `arachisya.game.load_assets(base_dir)` loads every texture, and every sound
  when the mixer is running, into an `Assets` bundle.
- `arachisya.game.Game(assets, rng)` builds the world. Pass a
  `random.Random` to make enemy spawning reproducible.
- `Game.update(delta_time, controls, attack_pressed)` advances the world by
  one frame. `Game.state` reports `GameState.PLAYING`, `GAME_OVER` or
  `VICTORY`.
- `Game.draw(surface)` draws the current frame onto a pygame surface.
- `Game.spawn_random_enemy()` adds one random enemy and returns it.
- `arachisya.character.Controls` holds one frame of input.
  `Controls.from_pressed(pygame.key.get_pressed())` builds it from pygame's
  key state.
- `arachisya.enemy.stats_for(enemy_type)` returns the health, damage per
  second and stopping radius of an `EnemyType`.
- `arachisya.base_character.Rectangle.collides(other)` is the overlap test
  that every collision in the game uses.

## Limitations

- The game does not save progress or keep scores, and has no pause or
  restart. To play again, start it again.
- Sounds play at their set volume. Their pitch is not changed.

## Running the tests

```
pip install .[test]
pytest
```