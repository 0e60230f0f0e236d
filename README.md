# slingbird

A small arcade game about flinging a bird from a slingshot into towers of
blocks. Drag the bird back, let go, and knock out enough blocks to reach each
level's target score before your three attempts run out.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

Start the game with:

```
slingbird
```

Images are looked up in `graphics/` and `resources/` under the current
directory. To load them from somewhere else, pass the directory that holds
those two folders:

```
slingbird --assets path/to/game-data
```

Any image that is missing or cannot be read is replaced by plain shapes:
labelled blue buttons on the menus, a coloured circle for the bird, a drawn
**SPLIT** box for the power-up button, and a grey playing field with a
"Failed to load background texture!" note.

The game opens at the main menu. **Start** leads to the level selection
screen and **Exit** quits; closing the window quits too. Pick one of the four
levels:

1. **Starter Tower**: a stepped pyramid of blocks (target score 100)
2. **Fortified Castle**: walls, battlements and a central keep (target 150)
3. **Stronghold**: nested hollow squares (target 250)
4. **Ultimate Challenge**: two tall towers joined by a bridge (target 250)

Each block knocked out is worth 10 points. When a level's target is reached,
the next level loads after two seconds; finishing the fourth level shows a
congratulation message. If the last of the three attempts ends without
reaching the target, the level is failed and "NO ATTEMPTS LEFT!" is shown
until it is reset.

### Controls

- **Left mouse button**: grab the bird, drag it back (up to 100 pixels from
  the slingshot) and release to launch. While aiming, a line previews the
  flight path.
- **Left click during flight**: once the total score across all levels
  reaches 50, split the bird into three smaller birds, the two new ones
  turned 30 degrees either side of its heading.
- **1, 2, 3, 4**: jump straight to a level.
- **Space** or **right mouse button**: reset the current level and its
  attempts.
- **Esc**: go back to the level selection screen.

## Using the pieces

The game logic in `slingbird.world` works without a window, so it can be
scripted or tested:

```python
from slingbird.world import GameWorld, InputState

world = GameWorld()
world.set_level(2)
world.update(InputState(), 1 / 60)
print(world.current_level.name, world.total_score())
```

- `slingbird.geometry`: `Vec2`, `Rect`, `to_radians`, `to_degrees` and
  `point_in_circle`.
- `slingbird.entities`: `Obstacle` and `Ball`, with its collision probes
  (`probe_position`, `collides_with`), `split` and `trajectory`.
- `slingbird.levels`: the `Level` base class, the four level classes
  (`StarterTower`, `FortifiedCastle`, `Stronghold`, `UltimateChallenge`),
  `LevelState`, and `create_levels(ground_y)`, which builds all four for a
  given ground line.
- `slingbird.world`: `GameWorld`, driven one frame at a time by
  `update(inputs, dt)` with an `InputState`.
- `slingbird.app`: the pygame window, menus and drawing (`Button`,
  `draw_world`, `draw_cloud`, `load_assets`) and the `main` entry point.

## What it does not do

There is no sound, and nothing is saved: scores and level progress last only
while the game is running.