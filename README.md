# cubcaster

`cubcaster` reads `.cub` scene files and checks them strictly. A scene file
names four wall textures, gives a floor colour and a ceiling colour, and holds
a grid map. The package also has a small ray-casting viewer that draws a map
in first person.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The `.cub` format

The file is read line by line. A `:` character also ends a line. A line that
holds only spaces counts as blank.

1. The first four non-blank lines are texture lines. Each one is a key, then
   spaces, then a path. The keys are `NO`, `SO`, `WE` and `EA`. Each key may
   appear only once and must have a value.
2. The next two non-blank lines are colour lines. Each one is `C` (ceiling) or
   `F` (floor), then three comma-separated numbers from 0 to 255. If both
   lines use the same key, the second one wins and the other colour stays
   black (`0,0,0`).
3. The map starts at the seventh non-blank line and runs to the end of the
   file. It may use these characters:
   - `1` for a wall,
   - `0` for open floor,
   - a space for nothing,
   - exactly one of `N`, `S`, `E`, `W` for the player's start and facing.

   The map must be closed:
   - The first row and the last row hold only walls and spaces.
   - Every row starts and ends with a wall.
   - No floor cell or player cell may touch a space or the edge of the map,
     above, below, left or right.
   - An empty line inside the map is an error.

   One more newline is added to the last line when the file is read. A file
   that ends with a newline therefore ends in an empty map row and is
   rejected. End the last map row without a newline.

Example (no newline after the last row):

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

1111111
1101111
1000001
100N011
1111111
```

## Commands

### `cubcaster`: check a scene file

```
cubcaster maps/level.cub
```

The command takes exactly one argument, and its last dot-separated part must
be `cub`. For a valid scene it prints these, in order:

1. the texture paths, in the order east, west, south, north;
2. the red, green and blue components of the ceiling colour, then of the
   floor colour;
3. the player's start position, which is the centre of its cell (for
   example `Pos x player 3.500000`);
4. the map rows.

When something is wrong, the command writes `Error` and a message to
standard error and exits with status 1. This happens for a bad argument, a
file that cannot be read, an empty file, missing parts, and an invalid path,
colour or map.

### `cubcaster-view`: open the ray-casting viewer

```
cubcaster-view
cubcaster-view maps/level.cub
```

With no argument, the viewer opens a built-in demo map. With a scene file, it
checks the file as `cubcaster` does. It then draws that file's map with the
player at the start position and facing the direction given in the map.

The window is 1080×800. Walls are drawn as white columns on black, and a
minimap appears in the top-left corner.

| Key | Action |
| --- | --- |
| `W` / Up | move forward |
| `S` / Down | move backward |
| `A` | strafe left |
| `D` | strafe right |
| Left / Right | turn |
| Esc | quit |

A move is refused if it would leave the 1080×800 area or end inside a wall.
Cells outside the map count as walls.

## Using it from Python

```python
from cubcaster.cubfile import CubError, load_parts
from cubcaster.scene import parse_scene

try:
    scene = parse_scene(load_parts("maps/level.cub"))
except CubError as exc:
    print(exc)
else:
    print(scene.textures.north, scene.ceiling, scene.x, scene.y, scene.facing)
```

- `cubcaster.cubfile`:
  - `check_arguments` checks the argument list,
  - `read_lines` reads the file's lines,
  - `split_parts` and `load_parts` split the lines into a `FileParts`
    (`paths`, `colors`, `map_lines`).

  Every problem raises `CubError`.
- `cubcaster.scene`:
  - `parse_paths`, `parse_colors`, `parse_color_line` and `parse_map` check
    one part each,
  - `parse_scene` builds a `Scene` with `Textures`, two `Color` values, the
    map rows and the player start.
- `cubcaster.cli`:
  - `load_scene(argv)` runs all the checks,
  - `describe(scene)` returns the report that `cubcaster` prints.
- `cubcaster.raycast`:
  - `Game`, `Player` and `Frame` drive the viewer,
  - `Game.cast_ray(angle)` returns the distance to the first wall,
  - `Game.render()` draws into the frame's pixel buffer,
  - `Game.handle_key(key)` takes a `Key` code,
  - `player_from_scene(x, y, facing)` places a player from scene
    coordinates.

`cubcaster.textutil` holds the string helpers the parser uses.

## What it does not do

The viewer does not use the scene's textures or colours. The texture paths
are checked for their format only; the files are never opened or loaded.
Walls are always plain white, and the floor and ceiling are black. There are
no sprites, doors or sound.