"""Reading and validating a scene (.cub) file into a Game."""

from __future__ import annotations

import math
from collections.abc import Sequence
from os import PathLike

from .model import TILE_SIZE, CubError, Game
from .textutil import atoi, read_lines, split

_TEXTURE_KEYS = ("NO", "SO", "WE", "EA")
_LEVEL_CHARS = frozenset("10 \nNESW")
_DIRECTIONS = "NSWE"


def check_extension(file_name: str, extension: str) -> None:
    """Raise CubError unless ``file_name`` ends with ``extension``."""
    if not file_name.endswith(extension):
        raise CubError(f"Error: Wrong Datatype! Datatype must be {extension}")


def _texture_key(line: str) -> str | None:
    prefix = line[:2]
    return prefix if prefix in _TEXTURE_KEYS else None


def read_textures(game: Game, lines: Sequence[str]) -> None:
    """Store the NO, SO, WE and EA texture paths; all four must be present.

    The path is what follows the two-letter key and one separator. When a
    key appears more than once, the last line wins.
    """
    found = {key for key in map(_texture_key, lines) if key}
    if len(found) != len(_TEXTURE_KEYS):
        raise CubError("Error: One mapfile is missing!")
    textures = game.map
    for line in lines:
        key = _texture_key(line)
        value = line[3:]
        if key == "NO":
            textures.north_texture = value.split("\n", 1)[0]
        elif key == "SO":
            textures.south_texture = value
        elif key == "WE":
            textures.west_texture = value
        elif key == "EA":
            textures.east_texture = value


def read_color(game: Game, lines: Sequence[str], identifier: str) -> list[int]:
    """Parse the first line starting with ``identifier`` as an R,G,B colour.

    Values for 'F' go to the floor colour and values for 'C' to the ceiling
    colour; at most three components are read. Returns the parsed values.
    """
    line = next((ln for ln in lines if ln[:1] == identifier), None)
    if line is None:
        raise CubError(f"Error: No colour line for identifier {identifier!r}.")
    if identifier == "F":
        target: list[int] | None = game.map.floor_color
    elif identifier == "C":
        target = game.map.ceiling_color
    else:
        target = None
    values: list[int] = []
    for index, piece in enumerate(split(line[2:], ",")[:3]):
        value = atoi(piece)
        if not 0 <= value <= 255:
            raise CubError("RGB value is out of range (0-255)!")
        if target is not None:
            target[index] = value
        values.append(value)
    return values


def is_level_line(line: str) -> bool:
    """Tell whether a line is a row of the level grid."""
    body = line.lstrip(" \t")
    if not body or body[0] == "\n":
        return False
    return all(ch in _LEVEL_CHARS for ch in body)


def extract_level(lines: Sequence[str]) -> list[str]:
    """Return the level rows: grid lines from the first line holding a '1'."""
    start = next((i for i, line in enumerate(lines) if "1" in line), None)
    if start is None:
        raise CubError("Error: No map found in map file.")
    return [line for line in lines[start:] if is_level_line(line)]


def player_angle(direction: str) -> float:
    """Facing angle in radians for a compass letter; y grows downwards."""
    angles = {
        "N": 3 * math.pi / 2,
        "S": math.pi / 2,
        "W": math.pi,
        "E": 0.0,
    }
    try:
        return angles[direction]
    except KeyError:
        raise CubError(f"Invalid player direction {direction!r}") from None


def find_player_start(game: Game) -> bool:
    """Place the player at the centre of its start tile and set its angle.

    If several start tiles exist the last one wins. Returns whether a start
    tile was found; without one the player is left unchanged.
    """
    found = False
    for row, line in enumerate(game.map.level):
        for col, cell in enumerate(line):
            if cell in _DIRECTIONS:
                game.player.x = float(col * TILE_SIZE + TILE_SIZE // 2)
                game.player.y = float(row * TILE_SIZE + TILE_SIZE // 2)
                game.player.angle = player_angle(cell)
                found = True
    return found


def load_map(game: Game, path: str | PathLike[str]) -> None:
    """Read a scene file and store its textures, colours and level in ``game``."""
    try:
        lines = read_lines(path)
    except OSError as exc:
        raise CubError(f"FD open failed: {exc}") from exc
    data = game.map
    data.lines = lines
    read_textures(game, lines)
    read_color(game, lines, "F")
    read_color(game, lines, "C")
    data.level = extract_level(lines)
    data.level_height = len(data.level)
    data.level_width = max((len(row) for row in data.level), default=0)


def check_input(argv: Sequence[str], game: Game) -> None:
    """Validate the command line (program name and one .cub path) and load it."""
    if len(argv) != 2:
        raise CubError(f"[{len(argv)}] = Invalid number of arguments!")
    check_extension(argv[1], ".cub")
    load_map(game, argv[1])
    find_player_start(game)