# cubcaster

cubcaster opens an 800×600 window with a first-person view of a maze. It
draws the view by raycasting over a grid level read from a `.cub` scene
file.

## Installation

```
pip install .
```

The window is drawn with pygame, which is installed as a dependency. To run
the tests, install the `test` extra (`pip install .[test]`) and run `pytest`.

## Usage

```
cubcaster path/to/scene.cub
```

`python -m cubcaster.app path/to/scene.cub` does the same thing.

The command needs exactly one argument, and the name must end in `.cub`.
If the scene is invalid, the error is printed to standard error and the
command exits with status 1. Otherwise it prints the player's starting
position and angle, then opens the window. Press Escape or close the window
to quit.

## Scene file format

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

111111
100101
1000N1
111111
```

- Lines that start with `NO`, `SO`, `WE` and `EA` give the texture paths.
  The path is the text after the two-letter key and one separator
  character. All four keys must be present. If a key appears more than
  once, the last line wins.
- The first line that starts with `F` gives the floor colour, and the first
  line that starts with `C` gives the ceiling colour. Each holds up to three
  comma-separated values, and each value must lie from 0 to 255. A missing
  `F` or `C` line is an error.
- The level starts at the first line of the file that contains a `1`. From
  there on, every line made only of `1`, `0`, spaces and `N`, `S`, `E`, `W`
  is a row of the grid. Other lines are skipped.
  `1` is a wall. The letter marks the player's start tile and the direction
  the player faces, with `N` facing up the grid and `S` facing down. If
  several start letters appear, the last one wins. If there is none, the
  player stays at the origin facing east.

## What it does not do

- The view is static. The player cannot move or turn, and the only key
  handled is Escape.
- Texture paths are read and stored, but no images are loaded. Walls are
  drawn in flat colours chosen by the side of the wall that the ray hits.
- The floor and ceiling colours are checked and stored, but the sky and
  ground are always drawn in the same fixed colours.

## Using it as a library

```python
from cubcaster.model import Game
from cubcaster.parsing import load_map, find_player_start
from cubcaster.raycast import FrameBuffer, cast_rays

game = Game()
load_map(game, "scene.cub")
find_player_start(game)   # returns False if the level has no start tile
game.reset_view()

frame = FrameBuffer()     # 800x600 by default
cast_rays(game, frame)
print(hex(frame.pixel(400, 300)))
```

The modules are:

- `cubcaster.model` holds the game state: `Game`, `View`, `MapData`,
  `Player`, `Ray`, the window and tile constants, and `CubError`.
- `cubcaster.textutil` has the text helpers `atoi`, `split` and
  `read_lines`.
- `cubcaster.parsing` checks and reads scene files. It provides
  `check_extension`, `read_textures`, `read_color`, `is_level_line`,
  `extract_level`, `player_angle`, `find_player_start`, `load_map` and
  `check_input`.
- `cubcaster.raycast` casts rays and draws wall columns. It provides
  `FrameBuffer`, `normalize_angle`, `rgba_to_int`, `wall_hit`,
  `horizontal_distance`, `vertical_distance`, `wall_color`, `render_wall`
  and `cast_rays`. Per-ray details are logged at DEBUG level.
- `cubcaster.app` holds the window loop (`run`), the command (`main`),
  `should_quit` and `frame_to_surface`.

Invalid scenes and command lines raise `cubcaster.model.CubError`. This
includes a file that cannot be opened.