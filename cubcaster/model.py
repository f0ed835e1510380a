"""Game state shared by the parser, the ray caster and the window loop."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

ESC = 65307
KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100
KEY_LEFT = 37
KEY_RIGHT = 39
KEY_SHIFT = 16

TILE_SIZE = 64
ROTATION_SPEED = 0.045
PLAYER_SPEED = 4
WIN_WIDTH = 800
WIN_HEIGHT = 600
SKY_COLOR = 0x87CEEB
GROUND_COLOR = 0x800111

DEFAULT_FOV = 60 * (math.pi / 180.0)


class CubError(Exception):
    """Raised when the scene file or the game setup is invalid."""


@dataclass
class View:
    """The camera: field of view and the window it renders into."""

    fov: float = DEFAULT_FOV
    x: float = 0.0
    y: float = 0.0
    height: int = WIN_HEIGHT
    width: int = WIN_WIDTH
    zoom: float = 1.0


def _unset_color() -> list[int]:
    return [-1, -1, -1]


@dataclass
class MapData:
    """Everything read from a scene file."""

    lines: list[str] = field(default_factory=list)
    north_texture: str | None = None
    south_texture: str | None = None
    west_texture: str | None = None
    east_texture: str | None = None
    floor_color: list[int] = field(default_factory=_unset_color)
    ceiling_color: list[int] = field(default_factory=_unset_color)
    level: list[str] = field(default_factory=list)
    level_height: int = 0
    level_width: int = 0


@dataclass
class Player:
    """Position in world units and facing angle in radians."""

    player_id: int = 0
    x: float = 0.0
    y: float = 0.0
    angle: float = 0.0
    move_speed: float = PLAYER_SPEED
    rotation_speed: float = ROTATION_SPEED


@dataclass
class Ray:
    """State of the ray currently being cast."""

    angle: float = 0.0
    wall_dist: float = 0.0
    hor_x: float = 0.0
    hor_y: float = 0.0
    vert_x: float = 0.0
    vert_y: float = 0.0
    horizontal: bool = False


@dataclass
class Game:
    """The whole game state."""

    view: View = field(default_factory=View)
    map: MapData = field(default_factory=MapData)
    player: Player = field(default_factory=Player)
    ray: Ray = field(default_factory=Ray)

    def reset_view(self) -> None:
        """Put the camera back at the origin with the window's size and no zoom."""
        self.view.x = 0.0
        self.view.y = 0.0
        self.view.height = WIN_HEIGHT
        self.view.width = WIN_WIDTH
        self.view.zoom = 1.0