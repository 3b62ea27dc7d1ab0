from fdfview.colors import get_r
from fdfview.drawing import draw_line
from fdfview.geometry import Vec
from fdfview.image import Image

WHITE = 0xFFFFFF


def lit(img):
    return {
        (x, y)
        for y, row in enumerate(img.rows())
        for x, value in enumerate(row)
        if value
    }


def test_horizontal_line():
    img = Image(20, 20)
    draw_line(img, Vec(2, 4, color=WHITE), Vec(9, 4, color=WHITE))
    assert lit(img) == {(x, 4) for x in range(2, 10)}


def test_vertical_line():
    img = Image(20, 20)
    draw_line(img, Vec(3, 1, color=WHITE), Vec(3, 8, color=WHITE))
    assert lit(img) == {(3, y) for y in range(1, 9)}


def test_diagonal_line():
    img = Image(20, 20)
    draw_line(img, Vec(0, 0, color=WHITE), Vec(7, 7, color=WHITE))
    assert lit(img) == {(i, i) for i in range(8)}


def test_reversed_diagonal_covers_same_pixels():
    forward, backward = Image(20, 20), Image(20, 20)
    draw_line(forward, Vec(0, 0, color=WHITE), Vec(7, 7, color=WHITE))
    draw_line(backward, Vec(7, 7, color=WHITE), Vec(0, 0, color=WHITE))
    assert lit(forward) == lit(backward)


def test_single_point():
    img = Image(10, 10)
    draw_line(img, Vec(4, 4, color=WHITE), Vec(4, 4, color=WHITE))
    assert lit(img) == {(4, 4)}


def test_shallow_line_one_pixel_per_column():
    img = Image(20, 20)
    draw_line(img, Vec(0, 0, color=WHITE), Vec(10, 3, color=WHITE))
    pixels = sorted(lit(img))
    assert [x for x, _ in pixels] == list(range(11))
    ys = [y for _, y in pixels]
    assert ys[0] == 0 and ys[-1] == 3
    assert all(0 <= later - earlier <= 1 for earlier, later in zip(ys, ys[1:]))


def test_steep_line_one_pixel_per_row():
    img = Image(20, 20)
    draw_line(img, Vec(2, 0, color=WHITE), Vec(5, 9, color=WHITE))
    pixels = sorted(lit(img), key=lambda p: p[1])
    assert [y for _, y in pixels] == list(range(10))
    xs = [x for x, _ in pixels]
    assert xs[0] == 2 and xs[-1] == 5
    assert all(0 <= later - earlier <= 1 for earlier, later in zip(xs, xs[1:]))


def test_gradient_runs_from_start_to_end_color():
    img = Image(20, 20)
    start, end = 0x0000FF, 0xFF0000
    draw_line(img, Vec(0, 2, color=start), Vec(10, 2, color=end))
    assert img.get_pixel(0, 2) == start
    assert img.get_pixel(10, 2) == end
    reds = [get_r(img.get_pixel(x, 2)) for x in range(11)]
    assert reds == sorted(reds)


def test_offscreen_part_is_clipped():
    img = Image(10, 10)
    draw_line(img, Vec(-5, -5, color=WHITE), Vec(5, 5, color=WHITE))
    assert lit(img) == {(i, i) for i in range(6)}