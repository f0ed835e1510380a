import math

import pytest

from cubcaster.model import TILE_SIZE, CubError, Game
from cubcaster.parsing import (
    check_extension,
    check_input,
    extract_level,
    find_player_start,
    is_level_line,
    load_map,
    player_angle,
    read_color,
    read_textures,
)

SCENE = [
    "NO ./textures/north.xpm\n",
    "SO ./textures/south.xpm\n",
    "WE ./textures/west.xpm\n",
    "EA ./textures/east.xpm\n",
    "\n",
    "F 220,100,0\n",
    "C 225,30,0\n",
    "\n",
    "111111\n",
    "100001\n",
    "10N001\n",
    "111111\n",
]


@pytest.fixture
def scene_file(tmp_path):
    path = tmp_path / "level.cub"
    path.write_text("".join(SCENE))
    return path


@pytest.mark.parametrize("name", ["maps/level.cub", "a.cub", ".cub"])
def test_check_extension_accepts(name):
    assert check_extension(name, ".cub") is None


@pytest.mark.parametrize("name", ["level.txt", "level.cub.bak", "ub", "levelcub"])
def test_check_extension_rejects(name):
    with pytest.raises(CubError, match="Wrong Datatype"):
        check_extension(name, ".cub")


def test_read_textures_stores_paths():
    game = Game()
    read_textures(game, SCENE)
    assert game.map.north_texture == "./textures/north.xpm"
    assert game.map.south_texture.startswith("./textures/south.xpm")
    assert game.map.west_texture.startswith("./textures/west.xpm")
    assert game.map.east_texture.startswith("./textures/east.xpm")


def test_read_textures_last_line_wins():
    game = Game()
    lines = SCENE[:4] + ["NO ./other.xpm\n"]
    read_textures(game, lines)
    assert game.map.north_texture == "./other.xpm"


def test_read_textures_missing_key():
    game = Game()
    with pytest.raises(CubError, match="missing"):
        read_textures(game, SCENE[:3])


def test_read_color_floor_and_ceiling():
    game = Game()
    assert read_color(game, SCENE, "F") == [220, 100, 0]
    assert read_color(game, SCENE, "C") == [225, 30, 0]
    assert game.map.floor_color == [220, 100, 0]
    assert game.map.ceiling_color == [225, 30, 0]


def test_read_color_uses_first_matching_line():
    game = Game()
    read_color(game, ["F 1,2,3\n", "F 4,5,6\n"], "F")
    assert game.map.floor_color == [1, 2, 3]


def test_read_color_partial_leaves_unset():
    game = Game()
    read_color(game, ["C 10,20\n"], "C")
    assert game.map.ceiling_color == [10, 20, -1]


@pytest.mark.parametrize("line", ["F 256,0,0\n", "F 0,-1,0\n"])
def test_read_color_out_of_range(line):
    with pytest.raises(CubError, match="out of range"):
        read_color(Game(), [line], "F")


def test_read_color_missing_line():
    with pytest.raises(CubError):
        read_color(Game(), SCENE[:4], "C")


@pytest.mark.parametrize(
    "line, expected",
    [
        ("111111\n", True),
        ("  10N01\n", True),
        ("\t1 0 1", True),
        ("\n", False),
        ("   \n", False),
        ("", False),
        ("F 220,100,0\n", False),
        ("NO ./north.xpm\n", False),
        ("1x1\n", False),
    ],
)
def test_is_level_line(line, expected):
    assert is_level_line(line) is expected


def test_extract_level_keeps_grid_rows():
    assert extract_level(SCENE) == SCENE[8:]


def test_extract_level_skips_non_grid_after_start():
    lines = ["NO ./a1.xpm\n", "111\n", "\n", "1N1\n"]
    assert extract_level(lines) == ["111\n", "1N1\n"]


def test_extract_level_without_map():
    with pytest.raises(CubError, match="No map"):
        extract_level(["NO ./north.xpm\n", "\n"])


def test_player_angle_values():
    assert player_angle("N") == pytest.approx(3 * math.pi / 2)
    assert player_angle("S") == pytest.approx(math.pi / 2)
    assert player_angle("W") == pytest.approx(math.pi)
    assert player_angle("E") == 0


def test_player_angle_invalid():
    with pytest.raises(CubError):
        player_angle("X")


def test_find_player_start_places_at_tile_centre():
    game = Game()
    game.map.level = SCENE[8:]
    assert find_player_start(game) is True
    assert (game.player.x - TILE_SIZE / 2) / TILE_SIZE == 2
    assert (game.player.y - TILE_SIZE / 2) / TILE_SIZE == 2
    assert game.player.angle == pytest.approx(3 * math.pi / 2)


def test_find_player_start_without_start():
    game = Game()
    game.map.level = ["111\n", "101\n", "111\n"]
    assert find_player_start(game) is False
    assert (game.player.x, game.player.y) == (0.0, 0.0)


def test_load_map(scene_file):
    game = Game()
    load_map(game, scene_file)
    assert game.map.lines == SCENE
    assert game.map.north_texture == "./textures/north.xpm"
    assert game.map.floor_color == [220, 100, 0]
    assert game.map.ceiling_color == [225, 30, 0]
    assert game.map.level == SCENE[8:]
    assert game.map.level_height == len(SCENE[8:])
    assert game.map.level_width == len("111111\n")


def test_load_map_missing_file(tmp_path):
    with pytest.raises(CubError, match="open failed"):
        load_map(Game(), tmp_path / "absent.cub")


def test_check_input_success(scene_file):
    game = Game()
    check_input(["cub3D", str(scene_file)], game)
    assert game.player.angle == pytest.approx(3 * math.pi / 2)
    assert game.map.level_height == len(SCENE[8:])


@pytest.mark.parametrize("argv", [["cub3D"], ["cub3D", "a.cub", "b.cub"]])
def test_check_input_argument_count(argv):
    with pytest.raises(CubError, match=rf"\[{len(argv)}\] = Invalid number"):
        check_input(argv, Game())


def test_check_input_wrong_extension(tmp_path):
    path = tmp_path / "level.txt"
    path.write_text("".join(SCENE))
    with pytest.raises(CubError, match="Wrong Datatype"):
        check_input(["cub3D", str(path)], Game())