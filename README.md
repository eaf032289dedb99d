# cubecaster

A small first-person maze explorer. It reads a `.cub` scene file describing
wall textures, floor and ceiling colours and a grid map, then renders the
maze with textured raycasting in a pygame window.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Running

```
cubecaster path/to/level.cub
```

The program takes exactly one argument, and its name must end in `.cub`.
Any problem with the arguments or the file is written to standard error as
`Error` followed by the reason, and the program exits with status 1.

### Controls

| Key          | Action             |
|--------------|--------------------|
| W / S        | move forward/back  |
| A / D        | strafe left/right  |
| Left / Right | turn               |
| Esc          | quit               |

Closing the window also quits. A step is refused when it would bring the
player closer than a little over one step length to a wall.

## Scene files

A scene file starts with six graphics entries, in any order, with blank
lines allowed between them:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

`NO`, `SO`, `WE` and `EA` name XPM textures; walls are sampled as 64×64
textures. `F` and `C` give the floor and ceiling colours as three
comma-separated values from 0 to 255. Each entry must appear exactly once.

The map follows, made of `1` (wall), `0` (floor), spaces (outside the map)
and exactly one of `N`, `S`, `E`, `W` marking the player's start and the
direction faced:

```
111111
100001
10N001
111111
```

The map must be closed: every row starts with a wall after any leading
spaces, the first and last rows hold only walls and spaces, and every space
(including the padding added to short rows) may touch only spaces or walls.

XPM textures may define colours with `#RRGGBB` or with X11 colour names
(`c red`, `c light grey`, ...); `None` is treated as transparent, and
unknown names give black.

## Using it as a library

The parsing and rendering pieces work without a window:

```python
from cubecaster.scene import parse_scene_file
from cubecaster.raycast import cast_ray
from cubecaster.app import Game
from cubecaster.config import Key

scene = parse_scene_file("level.cub")
ray = cast_ray(scene.state, scene.grid.padded(), 0.0)
print(ray.wall_dist)

game = Game(scene)          # renders the first frame
game.handle_key(Key.W)      # moves and re-renders
print(game.frame.get(170, 90))
```

Other entry points:

- `cubecaster.textutil.to_rgb("255,128,0")` converts a colour string to a
  packed `0xRRGGBB` integer.
- `cubecaster.xpm.load_xpm(path)` and `cubecaster.xpm.parse_xpm(text)` read
  an XPM image into a `cubecaster.render.Texture`.
- `cubecaster.scene.parse_scene(stream, loader)` parses a scene from any
  iterable of lines; `loader` turns each texture path into a texture.
- `cubecaster.level.read_map`, `validate_map` and `find_player` work on the
  map alone; `cubecaster.player.move` and `rotate` update a `PlayerState`.
- `cubecaster.render.draw_scene` draws a full view into a `Frame`.

Parsing and validation problems are raised as `cubecaster.config.CubError`
(XPM problems as its subclass `cubecaster.xpm.XpmError`).

## What it does not do

There are no sprites, doors, minimap, mouse look or sound, and the window
size is fixed at 340×180 pixels.