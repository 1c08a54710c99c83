# pacmaze

A small maze-chase arcade game drawn with pygame. You steer the maze runner
around a grid of walls, eat the dots, and keep away from four coloured
ghosts.

## Installing

```
pip install .
```

pygame is installed as a dependency.

## Playing

```
pacmaze
```

The window (672 × 864) opens on a title screen. Press Space, or Start on a
pad, to begin.

- Arrow keys or the pad's D-pad: move. A turn pressed while it cannot be
  taken yet is remembered and tried again at the next marked panel of the
  stage.
- P or Start: pause and resume; "P A U S E" is shown while paused.
- Releasing Escape or the pad's Back button, or closing the window: quit.

The round starts again from scratch when 246 dots have been eaten or when
the player's dying animation has finished.

Eating a power dot frightens the red ghost for 8 seconds. Touching it while
it is frightened sends it into its "home" state, where only its eyes are
drawn. Touching any ghost that is not frightened while not powered up kills
the player.

## What the game does not do

- The ghosts do not chase the player. Each walks in a straight line and
  reverses when it hits a wall.
- Only the red ghost reacts to power dots; the blue, pink and yellow ghosts
  are never frightened, and a ghost in its home state does not return.
- There is no score, lives counter or high-score table. A `ResultScene`
  exists but no scene leads to it, and it shows nothing of its own.

## Resources

The game reads its stage and artwork from a `Resource` directory relative to
the working directory:

- `Resource/Map/StageMap.csv`: one entry per line. `#,x_size,y_size,x,y`
  places a run of walls (1-based tile positions); `G` lines mark gates and
  `B,x,y` lines mark branch panels in the stage grid; `P`, `r`, `p`, `b`,
  `y` lines give the start tiles of the player and the red, pink, blue and
  yellow ghosts.
- `Resource/Map/StageMapFoods.csv`: one character per tile, `.` for a dot,
  `P` for a power dot, a space for an empty tile, a newline for the next row.
- `Resource/Images/` (`map.png`, `pacman.png`, `dying.png`, `monster.png`,
  `eyes.png`, `dot.png`, `big_dot.png`) and
  `Resource/Sounds/start-music.mp3`.

A missing file ends the game with an error logged on the `pacmaze` logger
and exit status -1.

## Using the pieces as a library

- `pacmaze.vector2d.Vector2D`: an immutable 2-D vector. `Vector2D(s)` is
  `(s, s)`; dividing by a (near) zero scalar or component gives the zero
  vector. `Vector2D.distance` returns the *squared* distance.
- `pacmaze.collision`: `CircleCollision`, `CapsuleCollision` (with
  `is_hit_target` and `translated`), `circles_collide`,
  `capsule_circle_collide`, `capsules_collide`, `check_collision` for any
  pair of the two shapes, and `nearest_point`.
- `pacmaze.stage_data`: `parse_stage` turns stage lines into a 31 × 28 grid
  of `PanelID` values; `StageData.from_file` reads a file;
  `StageData.panel_at` and `StageData.adjacent_panels` query it by pixel
  location; `to_index` converts a location to `(row, column)`.
- `pacmaze.input_manager.InputManager`: feed it the held key codes and a
  `PadState` each frame with `update`, then ask `get_key`, `get_key_down`,
  `get_key_up`, the matching `get_button*` methods, the triggers and sticks.
- `pacmaze.resources.ResourceManager`: caches images and sounds by path and
  splits sprite sheets into cells; the loaders can be replaced.
- `pacmaze.scene_base.SceneBase`: a scene that keeps its objects ordered by
  z-layer, adds created objects and removes destroyed ones between frames,
  and checks every movable object against every other.
- `pacmaze.config.FrameTimer`: frame times capped at one display refresh.

## Tests

```
pip install .[test]
pytest
```