"""Ray casting: distances to the nearest walls and wall columns in a frame."""

from __future__ import annotations

import logging
import math

from .model import GROUND_COLOR, SKY_COLOR, TILE_SIZE, WIN_HEIGHT, WIN_WIDTH, Game

log = logging.getLogger(__name__)

TWO_PI = 2 * math.pi
_TAN_CAP = 1e6


class FrameBuffer:
    """A row-major grid of 32-bit colours the renderer draws into."""

    def __init__(self, width: int = WIN_WIDTH, height: int = WIN_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"frame size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = [0] * (width * height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the frame are ignored."""
        if self._inside(x, y):
            self.pixels[y * self.width + x] = color & 0xFFFFFFFF

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at (x, y)."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the frame")
        return self.pixels[y * self.width + x]

    def _fill_column(self, x: int, start: int, stop: int, color: int) -> None:
        """Paint rows ``start`` up to ``stop`` of column ``x``, clipped to the frame."""
        start = max(start, 0)
        stop = min(stop, self.height)
        if not 0 <= x < self.width or start >= stop:
            return
        width = self.width
        self.pixels[start * width + x:stop * width + x:width] = (
            [color & 0xFFFFFFFF] * (stop - start)
        )


def normalize_angle(angle: float) -> float:
    """Bring an angle that is at most one turn out of range into [0, 2*pi]."""
    if angle < 0:
        angle += TWO_PI
    if angle > TWO_PI:
        angle -= TWO_PI
    return angle


def rgba_to_int(r: int, g: int, b: int, a: int) -> int:
    """Pack colour channels as 0xAARRGGBB."""
    return ((a << 24) | (r << 16) | (g << 8) | b) & 0xFFFFFFFF


def _divide(numerator: float, denominator: float) -> float:
    """Floating division where a zero denominator gives a signed infinity."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0:
        return 0.0
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _capped_tan(angle: float) -> float:
    value = math.tan(angle)
    if abs(value) > _TAN_CAP:
        value = _TAN_CAP if value > 0 else -_TAN_CAP
    return value


def wall_hit(game: Game, x: float, y: float) -> bool:
    """Tell whether a ray reaching (x, y) stops there.

    A ray stops on a wall cell ('1'), at negative coordinates and beyond the
    level's height or width.
    """
    if x < 0 or y < 0 or not (math.isfinite(x) and math.isfinite(y)):
        return True
    x_map = math.floor(x / TILE_SIZE)
    y_map = math.floor(y / TILE_SIZE)
    level = game.map
    if y_map >= level.level_height or x_map >= level.level_width:
        return True
    if y_map < len(level.level):
        row = level.level[y_map]
        if x_map < len(row) and row[x_map] == "1":
            return True
    return False


def horizontal_distance(game: Game, angle: float) -> float:
    """Distance from the player to the first wall met on a horizontal grid line."""
    px, py = game.player.x, game.player.y
    tan = math.tan(angle)
    x_step = _divide(TILE_SIZE, tan)
    y_step = float(TILE_SIZE)
    facing_down = 0 < angle < math.pi

    hor_y = math.floor(py / TILE_SIZE) * TILE_SIZE
    if facing_down:
        hor_y += TILE_SIZE
    hor_x = px + _divide(hor_y - py, tan)
    if facing_down:
        hor_y += TILE_SIZE
        pixel = -1
    else:
        y_step = -y_step
        pixel = 1

    facing_left = math.pi / 2 < angle < 3 * math.pi / 2
    if (facing_left and x_step > 0) or (not facing_left and x_step < 0):
        x_step = -x_step

    while not wall_hit(game, hor_x, hor_y - pixel):
        hor_x += x_step
        hor_y += y_step
    log.debug("horizontal hit x=%f y=%f step=(%f, %f)", hor_x, hor_y, x_step, y_step)
    game.ray.hor_x, game.ray.hor_y = hor_x, hor_y
    return math.hypot(hor_x - px, hor_y - py)


def vertical_distance(game: Game, angle: float) -> float:
    """Distance from the player to the first wall met on a vertical grid line."""
    px, py = game.player.x, game.player.y
    x_step = float(TILE_SIZE)
    y_step = TILE_SIZE * _capped_tan(angle)

    ver_x = math.floor(px / TILE_SIZE) * TILE_SIZE
    if not math.pi / 2 < angle < 3 * math.pi / 2:
        ver_x += TILE_SIZE
        pixel = -1
    else:
        x_step = -x_step
        pixel = 1

    if angle in (math.pi / 2, 3 * math.pi / 2):
        ver_y = py
    else:
        ver_y = py + (ver_x - px) * math.tan(angle)

    facing_down = 0 < angle < math.pi
    if (facing_down and y_step < 0) or (not facing_down and y_step > 0):
        y_step = -y_step

    while not wall_hit(game, ver_x - pixel, ver_y):
        ver_x += x_step
        ver_y += y_step
    log.debug("vertical hit x=%f y=%f step=(%f, %f)", ver_x, ver_y, x_step, y_step)
    game.ray.vert_x, game.ray.vert_y = ver_x, ver_y
    return math.hypot(ver_x - px, ver_y - py)


def wall_color(angle: float, horizontal: bool) -> int:
    """Colour of a wall face, chosen by the ray's direction and the side hit."""
    angle = normalize_angle(angle)
    if not horizontal:
        if math.pi / 2 < angle < 3 * (math.pi / 2):
            return rgba_to_int(234, 182, 118, 255)  # west
        return rgba_to_int(238, 238, 228, 255)  # east
    if 0 < angle < math.pi:
        return rgba_to_int(25, 118, 162, 255)  # south
    return rgba_to_int(128, 57, 30, 255)  # north


def render_wall(game: Game, frame: FrameBuffer, ray: int) -> tuple[int, int]:
    """Draw sky, wall and ground for one screen column.

    Uses the distance and angle in ``game.ray``; the distance is corrected
    for the fisheye effect in place. Returns the wall's top and bottom rows.
    """
    state = game.ray
    state.wall_dist *= math.cos(normalize_angle(state.angle - game.player.angle))
    projection = (frame.width // 2) / math.tan(game.view.fov / 2)
    if state.wall_dist == 0:
        wall_h = math.inf
    else:
        wall_h = (TILE_SIZE / state.wall_dist) * projection
    half = frame.height // 2
    bottom = min(half + wall_h / 2, frame.height)
    top = max(half - wall_h / 2, 0)
    log.debug("ray %d top=%f bottom=%f height=%f", ray, top, bottom, wall_h)
    top_pix, bottom_pix = int(top), int(bottom)

    frame._fill_column(ray, 0, top_pix, SKY_COLOR)
    frame._fill_column(ray, bottom_pix, frame.height, GROUND_COLOR)
    state.angle = normalize_angle(state.angle)
    frame._fill_column(ray, top_pix, bottom_pix, wall_color(state.angle, state.horizontal))
    return top_pix, bottom_pix


def cast_rays(game: Game, frame: FrameBuffer) -> None:
    """Cast one ray per column across the field of view and draw the frame."""
    state = game.ray
    state.angle = game.player.angle - game.view.fov / 2
    step = normalize_angle(game.view.fov / frame.width)
    for column in range(frame.width):
        angle = normalize_angle(state.angle)
        h_dist = horizontal_distance(game, angle)
        v_dist = vertical_distance(game, angle)
        if v_dist <= h_dist:
            state.wall_dist = v_dist
            state.horizontal = False
        else:
            state.wall_dist = h_dist
            state.horizontal = True
        render_wall(game, frame, column)
        state.angle += step