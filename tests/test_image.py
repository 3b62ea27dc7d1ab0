import pytest

from fdfview.image import Image, mask_shifts, to_visual_color


def test_new_image_is_blank():
    img = Image(6, 4)
    rows = list(img.rows())
    assert len(rows) == 4
    assert all(row == [0] * 6 for row in rows)


def test_layout_reports_line_length():
    img = Image(7, 3)
    assert img.size_line == 7 * img.bpp // 8
    assert img.endian == 0


def test_put_get_round_trip():
    img = Image(8, 8)
    img.put_pixel(3, 5, 0x00ABCDEF)
    assert img.get_pixel(3, 5) == 0x00ABCDEF
    assert list(img.rows())[5][3] == 0x00ABCDEF


def test_negative_coordinates_ignored():
    img = Image(4, 4)
    img.put_pixel(-1, 0, 0x123456)
    img.put_pixel(0, -1, 0x123456)
    assert all(value == 0 for row in img.rows() for value in row)


def test_write_at_width_wraps_to_next_row():
    img = Image(5, 5)
    img.put_pixel(5, 1, 0x00FF00)
    assert img.get_pixel(0, 2) == 0x00FF00


def test_write_beyond_inclusive_bound_ignored():
    img = Image(5, 5)
    img.put_pixel(6, 0, 0x00FF00)
    img.put_pixel(0, 6, 0x00FF00)
    assert all(value == 0 for row in img.rows() for value in row)


def test_get_pixel_out_of_range_raises():
    img = Image(3, 3)
    with pytest.raises(IndexError):
        img.get_pixel(10, 0)


def test_clear_resets_pixels():
    img = Image(4, 4)
    img.put_pixel(1, 1, 0xFFFFFF)
    img.clear()
    assert img.get_pixel(1, 1) == 0


def test_negative_color_stored_as_unsigned():
    img = Image(2, 2)
    img.put_pixel(0, 0, -1)
    assert img.get_pixel(0, 0) == 0xFFFFFFFF


@pytest.mark.parametrize("size", [(0, 5), (5, 0), (-1, 3)])
def test_invalid_size_rejected(size):
    with pytest.raises(ValueError):
        Image(*size)


def test_mask_shifts_truecolor():
    assert mask_shifts(0xFF0000, 0x00FF00, 0x0000FF) == (16, 8, 8, 8, 0, 8)


def test_mask_shifts_rgb565():
    assert mask_shifts(0xF800, 0x07E0, 0x001F) == (11, 5, 5, 6, 0, 5)


def test_mask_shifts_rejects_zero():
    with pytest.raises(ValueError):
        mask_shifts(0, 0xFF00, 0xFF)


def test_deep_visual_keeps_color():
    shifts = mask_shifts(0xF800, 0x07E0, 0x001F)
    assert to_visual_color(0x123456, 24, shifts) == 0x123456


@pytest.mark.parametrize("color", [0x000000, 0x123456, 0xFFFFFF, 0x80FF01])
def test_truecolor_shifts_round_trip_at_low_depth(color):
    shifts = mask_shifts(0xFF0000, 0x00FF00, 0x0000FF)
    assert to_visual_color(color, 16, shifts) == color


def test_rgb565_white():
    shifts = mask_shifts(0xF800, 0x07E0, 0x001F)
    assert to_visual_color(0xFFFFFF, 16, shifts) == 0xFFFF