# polybow

polybow is a small top-down arcade shooter. You are a triangle armed with a bow. Polygon enemies keep appearing around you. Shoot them, dodge them, and pick up the experience orbs they drop.

## Installing

```
pip install .
```

This needs Python 3.10 or newer and pulls in `pygame`.

## Playing

```
polybow
```

The command takes these options:

| Option          | Default | Meaning                  |
|-----------------|---------|--------------------------|
| `--width N`     | 1280    | Window width in pixels   |
| `--height N`    | 720     | Window height in pixels  |
| `--fps N`       | 60      | Frame rate limit         |
| `--seed N`      | none    | Random seed for the game |

| Input             | Action                              |
|-------------------|-------------------------------------|
| `W` `A` `S` `D`   | Accelerate up / left / down / right |
| Mouse             | Aim the bow                         |
| Left mouse button | Shoot an arrow (once every 0.5 s)   |
| `Esc`             | Quit                                |

The game also ends when the window is closed or your health runs out.

### How it works

- **Enemies**
  - Triangles chase you directly.
  - Squares aim at the point where you are heading.
  - Each enemy takes 4 arrow hits and has a red bar above it.
  - New enemies spawn around you, more slowly as the number alive grows.
- **Contact damage:** touching an enemy costs one point of health and destroys that enemy.
- **Health**
  - Your health is shown as segments of 10 points at the bottom of the screen. You start with 4 segments and 36 points.
  - A segment you lose completely is gone for good.
  - After 3 seconds without taking damage, health slowly regenerates.
- **Experience**
  - Killed enemies burst into four orbs worth 5 experience in total; the orbs are pulled towards you.
  - Collecting enough fills the yellow bar and raises your level, shown under the bar.
  - Level 0 needs 50 experience, and each level needs twice as much as the one before.
- **Screen shake:** hits, kills and collisions shake the camera, which follows you smoothly.

## Using the pieces

The game logic does not depend on the display, so it can be driven from code. The module `polybow.world` holds it: `World` and `Controls`. Call `World.update(dt, elapsed, controls)` to advance the world by one frame.

```python
from polybow.physics import Vec2
from polybow.world import Controls, World

world = World()
world.update(1 / 60, 1 / 60, Controls(right=True, shooting=True, aim=Vec2(100.0, 0.0)))
```

The helpers in `polybow.physics`, `polybow.player` and `polybow.enemy` can also be used on their own. Examples are `Vec2`, `ScreenShake`, `PlayerHealth`, `XPBar`, `intercept_direction` and `split_sum`. `polybow.game` has `world_to_screen` and `screen_to_world` for converting between world and window coordinates.

## What it does not do

The game draws plain shapes and lines: there are no images, sounds or particle effects. There is no menu, pause, restart or saved score; when your health runs out the window closes.

## Running the tests

```
pip install .[test]
pytest
```