import io

import pytest

from cubecaster.config import CEILING, FLOOR, CubError
from cubecaster.level import find_player
from cubecaster.scene import (
    Scene,
    parse_graphics,
    parse_scene,
    parse_scene_file,
    read_lines,
)
from cubecaster.textutil import to_rgb
from cubecaster.xpm import parse_xpm

GRAPHICS = """NO ./north.xpm
SO ./south.xpm

WE ./west.xpm
EA ./east.xpm
F 220,100,0
C 225,30,0
"""

MAP = """
111111
100001
10N001
111111
"""

XPM = '"1 1 1 1", "a c #112233", "a"\n'


def fake_loader(path):
    return f"tex:{path}"


def test_read_lines_strips_newlines_only():
    assert list(read_lines(io.StringIO("a\nb\n\nc"))) == ["a", "b", "", "c"]


def test_parse_graphics_orders_textures_and_colors():
    textures, colors = parse_graphics(GRAPHICS.splitlines(), fake_loader)
    assert textures == [
        "tex:./north.xpm",
        "tex:./south.xpm",
        "tex:./west.xpm",
        "tex:./east.xpm",
    ]
    assert colors[FLOOR] == to_rgb("220,100,0")
    assert colors[CEILING] == to_rgb("225,30,0")


def test_parse_graphics_any_entry_order():
    lines = ["C 1,2,3", "EA e", "F 4,5,6", "WE w", "SO s", "NO n"]
    textures, colors = parse_graphics(lines, fake_loader)
    assert textures == ["tex:n", "tex:s", "tex:w", "tex:e"]
    assert colors == [to_rgb("4,5,6"), to_rgb("1,2,3")]


def test_parse_graphics_leaves_rest_unread():
    it = iter(GRAPHICS.splitlines() + ["111", "1N1"])
    parse_graphics(it, fake_loader)
    assert list(it) == ["111", "1N1"]


def test_parse_graphics_duplicate_texture():
    lines = ["NO a", "NO b", "WE w", "EA e", "F 1,1,1", "C 1,1,1"]
    with pytest.raises(CubError, match="duplicate"):
        parse_graphics(lines, fake_loader)


def test_parse_graphics_duplicate_color():
    lines = ["NO n", "SO s", "WE w", "F 1,1,1", "F 2,2,2", "C 1,1,1"]
    with pytest.raises(CubError, match="duplicate"):
        parse_graphics(lines, fake_loader)


def test_parse_graphics_unknown_identifier():
    with pytest.raises(CubError, match="Unknown color type"):
        parse_graphics(["XX path"], fake_loader)


def test_parse_graphics_empty_input():
    with pytest.raises(CubError, match="File is empty"):
        parse_graphics(["", "   "], fake_loader)


def test_parse_graphics_missing_color():
    lines = ["NO n", "SO s", "WE w", "EA e", "F 1,1,1"]
    with pytest.raises(CubError, match="color"):
        parse_graphics(lines, fake_loader)


def test_parse_graphics_missing_texture():
    with pytest.raises(CubError, match="texture"):
        parse_graphics(["NO n", "F 1,1,1"], fake_loader)


def test_parse_graphics_loader_error_propagates():
    def failing(path):
        raise CubError("XPM Error")

    with pytest.raises(CubError, match="XPM Error"):
        parse_graphics(GRAPHICS.splitlines(), failing)


def test_parse_scene_builds_everything():
    scene = parse_scene(io.StringIO(GRAPHICS + MAP), fake_loader)
    assert isinstance(scene, Scene)
    assert scene.grid.rows[0] == "111111"
    assert scene.grid.height == 4
    assert scene.state == find_player(scene.grid)
    assert (scene.state.pos.x, scene.state.pos.y) == (2.5, 2.5)


def test_parse_scene_rejects_open_map():
    bad_map = "\n111111\n100001\n10N00\n111111\n"
    with pytest.raises(CubError):
        parse_scene(io.StringIO(GRAPHICS + bad_map), fake_loader)


def test_parse_scene_without_map():
    with pytest.raises(CubError, match="Empty file"):
        parse_scene(io.StringIO(GRAPHICS), fake_loader)


def test_parse_scene_file_loads_textures(tmp_path):
    texture_path = tmp_path / "wall.xpm"
    texture_path.write_text(XPM)
    body = "".join(
        f"{ident} {texture_path}\n" for ident in ("NO", "SO", "WE", "EA")
    )
    cub = tmp_path / "level.cub"
    cub.write_text(body + "F 0,0,0\nC 255,255,255\n" + MAP)
    scene = parse_scene_file(cub)
    expected = parse_xpm(XPM).pixels
    assert all(texture.pixels == expected for texture in scene.textures)
    assert scene.colors[CEILING] == to_rgb("255,255,255")


def test_parse_scene_file_missing(tmp_path):
    with pytest.raises(CubError, match="Cant open a file"):
        parse_scene_file(tmp_path / "absent.cub")