import math

import pytest

from fdfview.image import Image
from fdfview.mapfile import parse_map
from fdfview.scene import Key, Scene


def flat_scene(rows=3, cols=3, width=200, height=100):
    lines = [" ".join(["0"] * cols) for _ in range(rows)]
    return Scene(parse_map(lines), width=width, height=height)


def test_offset_starts_at_screen_center():
    scene = flat_scene(width=200, height=100)
    assert (scene.offset.x, scene.offset.y) == (200 // 2, 100 // 2)
    assert (scene.center.x, scene.center.y) == (scene.offset.x, scene.offset.y)


def test_default_rotation_is_isometric():
    scene = flat_scene()
    assert scene.rot.x == pytest.approx(math.atan(1 / math.sqrt(2)))
    assert scene.rot.y == 0
    assert scene.rot.z == pytest.approx(math.pi / 4)


def test_default_zoom_proportions():
    scene = flat_scene()
    assert scene.zoom.y == scene.zoom.x
    assert scene.zoom.z == pytest.approx(scene.zoom.x / 2)
    assert scene.zoom.x > 0


def test_projection_shape_and_colors():
    scene = Scene(parse_map(["1,0xff0000 2", "3 4,0x00ff00"]), width=200, height=100)
    assert [len(row) for row in scene.proj] == [2, 2]
    colors = [[p.color for p in row] for row in scene.proj]
    assert colors == scene.map.colors


def test_flat_grid_centroid_is_offset():
    scene = flat_scene(rows=4, cols=5)
    points = [p for row in scene.proj for p in row]
    mean_x = sum(p.x for p in points) / len(points)
    mean_y = sum(p.y for p in points) / len(points)
    assert mean_x == pytest.approx(scene.offset.x)
    assert mean_y == pytest.approx(scene.offset.y)


def test_center_point_height_does_not_shift_x():
    scene = Scene(parse_map(["0 0 0", "0 9 0", "0 0 0"]), width=200, height=100)
    assert scene.proj[1][1].x == pytest.approx(scene.offset.x)


def test_escape_requests_close():
    scene = flat_scene()
    assert scene.key_press(Key.ESCAPE) is True
    assert scene.key_press(Key.A) is False


def test_move_keys_shift_offset():
    scene = flat_scene()
    start_x, start_y = scene.offset.x, scene.offset.y
    scene.key_press(Key.A)
    scene.key_press(Key.S)
    scene.step()
    assert scene.offset.x == start_x - 5
    assert scene.offset.y == start_y + 5
    scene.key_release(Key.A)
    scene.key_release(Key.S)
    assert (scene.motion.xmove, scene.motion.ymove) == (0, 0)


def test_rotation_keys_turn_view():
    scene = flat_scene()
    rz, rx = scene.rot.z, scene.rot.x
    scene.key_press(Key.LEFT)
    scene.key_press(Key.DOWN)
    scene.step()
    assert scene.rot.z == pytest.approx(rz + math.pi / 100)
    assert scene.rot.x == pytest.approx(rx - math.pi / 100)
    scene.key_release(Key.LEFT)
    scene.key_release(Key.DOWN)
    assert (scene.motion.z_rotate, scene.motion.x_rotate) == (0, 0)


def test_rotation_wraps_below_full_turn():
    scene = flat_scene()
    scene.rot.z = 2 * math.pi - 0.001
    scene.key_press(Key.LEFT)
    scene.step()
    assert 0 <= scene.rot.z < 2 * math.pi


def test_zoom_keys_scale_all_axes():
    scene = flat_scene()
    zx, zz = scene.zoom.x, scene.zoom.z
    scene.key_press(Key.EQUAL)
    scene.step()
    assert scene.zoom.x == pytest.approx(zx * 1.05)
    assert scene.zoom.z == pytest.approx(zz * 1.05)
    scene.key_release(Key.EQUAL)
    assert scene.motion.zoom == 1.0


def test_height_scale_changes_only_z():
    scene = flat_scene()
    zx, zz = scene.zoom.x, scene.zoom.z
    scene.key_press(Key.PAGE_DOWN)
    scene.step()
    assert scene.zoom.x == zx
    assert scene.zoom.z == pytest.approx(zz * (1 - 0.05))
    scene.key_release(Key.PAGE_DOWN)
    assert scene.motion.zscale == 0.0


def test_idle_step_keeps_projection():
    scene = flat_scene()
    before = [(p.x, p.y, p.z) for row in scene.proj for p in row]
    scene.step()
    scene.project()
    after = [(p.x, p.y, p.z) for row in scene.proj for p in row]
    assert after == pytest.approx(before)


def test_draw_marks_every_line_start():
    scene = flat_scene(rows=2, cols=3)
    img = Image(scene.width, scene.height)
    scene.draw(img)
    starts = [p for row in scene.proj for p in row][:-1]
    assert all(img.get_pixel(int(p.x), int(p.y)) == 0xFFFFFF for p in starts)


def test_empty_map_projects_nothing():
    scene = Scene(parse_map([]), width=200, height=100)
    img = Image(200, 100)
    scene.draw(img)
    assert scene.proj == []
    assert all(value == 0 for row in img.rows() for value in row)