# raycube

`raycube` is a set of building blocks for a software raycaster on tile
maps. It draws into plain RGBA pixel buffers held in memory, casts rays
across a grid of walls, renders textured wall columns and billboarded
sprites, and carries the small pieces of game logic around them: blinking
wall textures, doors that open and close with a frame counter, and an
enemy that steps towards the player.

Nothing here opens a window; every drawing function writes into an
`Image`, which you can hand to any display layer you like.

## Installing

Install the package with your usual Python packaging tool. Its only
runtime dependency is Pillow, which is used to decode PNG textures.
The tests use pytest, available through the `test` extra.

## Maps

A map is a sequence of strings, one per row (the door functions also
accept rows given as lists of characters). The characters that matter:

| Character | Meaning                                              |
|-----------|------------------------------------------------------|
| `1`       | wall                                                 |
| `0`       | floor                                                |
| `N S E W` | the player's start and facing direction              |
| `D`       | closed door                                          |
| `d`       | door in the middle of opening or closing             |
| `o`       | open door                                            |
| `A`       | the enemy                                            |
| `X`       | the exit                                             |

Rays pass through `0`, `o`, `A`, `X` and the player's marker and stop at
anything else. The enemy is blocked by `1`, `D` and `d`.

## Modules

### `raycube.errors`

`ErrorCode` is an `IntEnum` of the image layer's failures, `strerror(code)`
returns the English description of one, and `MlxError` is the exception
raised by the image, canvas and XPM42 functions; its `code` attribute
holds the `ErrorCode`.

### `raycube.image`

- `Texture(width, height, pixels)` – a decoded RGBA picture; the pixel
  buffer must hold exactly `width * height * 4` bytes.
- `Image(width, height)` – a mutable RGBA buffer. Sizes must be in
  1..32767, otherwise `MlxError(INVDIM)` is raised.
  - `put_pixel(x, y, color)` / `get_pixel(x, y)` read and write
    `0xRRGGBBAA` colours; out-of-range coordinates raise
    `MlxError(INVPOS)`.
  - `resize(width, height)` rescales with nearest-neighbour sampling.
  - `add_instance(x, y, z)` records a placement (`Instance`) and returns
    its index.
- `texture_to_image(texture)` copies a texture into a new image.
- `load_png(path)` decodes a PNG file into a `Texture`; anything that is
  not a readable PNG raises `MlxError(INVPNG)`.
- `encode_pixel(color)`, `fnv_hash(data)` (64-bit FNV-1a) and
  `rgba_to_mono(color)` are the helpers the other modules share.

### `raycube.canvas`

`Canvas` owns images and a render queue. `new_image(width, height)`
creates an image, `image_to_window(image, x, y)` places it above
everything placed so far and returns the instance index,
`set_instance_depth(instance, depth)` moves a placement, and
`delete_image(image)` drops the image and all its placements.
`render_queue()` returns the `DrawCall` entries ordered from the lowest
depth to the highest; each has `image`, `instance_id`, `instance` and
`visible`.

### `raycube.xpm42`

Reader for the XPM42 text format: a `!XPM42` line, a header line
`width height colours chars_per_pixel mode` (mode `c` for colour or `m`
for monochrome), one `key #RRGGBBAA` line per colour, then one line of
pixel keys per row. `parse_xpm42(lines)` decodes lines of text or bytes
and `load_xpm42(path)` reads a file; both return an `Xpm` with the
`texture`, `color_count`, `cpp` and `mode`. A path without `.xpm42`
raises `MlxError(INVEXT)`, an unopenable file `INVFILE`, and malformed
content `INVXPM`.

### `raycube.drawline`

Bresenham lines: `line_points(start_x, start_y, end_x, end_y)` returns
the pixels from the start point up to, but not including, the end point,
and `draw_line(image, start_x, start_y, end_x, end_y, color)` paints them.

### `raycube.raycast`

`initial_rotation(player_char)` gives the starting view angle for `N`,
`S`, `E` or `W` (other characters raise `ValueError`),
`normalize_rotation(rot)` brings an angle back by one full turn once it
reaches ±2π, `cast_ray(grid, p_x, p_y, angle, player_char)` steps one ray
cell by cell and returns a `Ray` (`angle`, `hyp`, `x`, `y`, `door`), and
`cast_rays(grid, p_x, p_y, rot, player_char)` casts rays evenly across a
66° field of view centred on `rot`.

### `raycube.walls`

`WallTextures` holds the north, south, east and west images plus optional
door frames and the current door frame. `wall_face(ray, p_x, p_y)` says
which face a ray hit (or `None` at a corner), `select_texture(...)`
returns `(side, texture)`, `draw_column(...)` paints ceiling, wall slice
and floor for one screen column, and `draw_walls(...)` draws one column
per ray across the image and returns the number of columns drawn; the
first ray of the sequence only primes the walk.

### `raycube.sprites`

`Billboard` is a flat sprite at a map position. `update(p_x, p_y, fov,
ray_count)` recomputes its distance, bearing and screen extent,
`covers(ray)` says whether a ray passes through it before hitting a wall,
and `draw_column(layer, ray, x, frame)` draws its slice for one column.
`EnemyAnimation(frames)` cycles through frames 0, 1, 2, 1, 0 with
`advance()`. `find_char(grid, char)` returns the centre of the last cell
holding a character, and `clear_column(layer, x)` makes a column
transparent.

### `raycube.enemy`

`move_enemy(grid, e_x, e_y, angle)` steps the enemy a tenth of a cell
opposite to `angle` (the bearing from the player to the enemy) unless
`enemy_can_move` forbids it, which it does for blocking cells and for
cutting corners. `is_blocking(cell)` tells walls and doors apart;
`is_caught(distance)` is true within one cell of the enemy and
`has_escaped(distance)` within half a cell of the exit.

### `raycube.blink`

`Blink.step(roll=None)` advances a wall face's blink by one tick and
returns the frame index (0–3) to show. A blink starts when `roll` is a
multiple of 100; without a roll a random one is drawn.

### `raycube.doors`

`open_door(grid, p_x, p_y)` turns the first closed door (`D`) next to the
player into `d`, and `close_door(grid, p_x, p_y, player_char)` does the
same for the first open door (`o`); both return whether a door was found.
`DoorAnimation` keeps the frame counter: `start_opening()` counts up from
0, `start_closing()` counts down from 23, and `step()` returns
`(opening finished, closing finished)`. `DoorPhase` names its states.

## Example

```python
from raycube.canvas import Canvas
from raycube.drawline import draw_line, line_points
from raycube.raycast import cast_rays, initial_rotation

grid = [
    "11111",
    "10001",
    "10N01",
    "10001",
    "11111",
]

rot = initial_rotation("N")
rays = cast_rays(grid, 2.5, 2.5, rot, "N")
print(len(rays), rays[0])

canvas = Canvas()
image = canvas.new_image(32, 32)
draw_line(image, 0, 0, 20, 10, 0xFF0000FF)
print(line_points(0, 0, 4, 2))
```

Colours are 32-bit RGBA integers (`0xRRGGBBAA`), stored in images as four
bytes in that order.

## What the package does not do

`raycube` is a library of parts, not a playable game. It has no window
or input handling, no frame loop tying the parts together, no player
movement, stamina or view bobbing, no fog overlay, no minimap, and no
reader for map description files: building the grid, calling the
functions each frame and showing the resulting images is up to the
caller.