"""Bresenham line rasterisation with colour gradients."""

from __future__ import annotations

from fdfview.colors import gradient
from fdfview.geometry import Vec, difx, dify
from fdfview.image import Image


def _small_slope(img: Image, a: Vec, b: Vec) -> None:
    dx, dy = difx(a, b), dify(a, b)
    step_x = 1 if dx >= 0 else -1
    step_y = 1 if dy >= 0 else -1
    x, y = int(a.x), int(a.y)
    p = 2 * abs(dy) - abs(dx)
    img.put_pixel(x, y, a.color)
    for _ in range(abs(dx)):
        x += step_x
        if p <= 0:
            p += 2 * abs(dy)
        else:
            y += step_y
            p += 2 * abs(dy) - 2 * abs(dx)
        img.put_pixel(x, y, gradient(x, y, a, b))


def _big_slope(img: Image, a: Vec, b: Vec) -> None:
    dx, dy = difx(a, b), dify(a, b)
    step_x = 1 if dx >= 0 else -1
    step_y = 1 if dy >= 0 else -1
    x, y = int(a.x), int(a.y)
    p = 2 * abs(dx) - abs(dy)
    img.put_pixel(x, y, a.color)
    for _ in range(abs(dy)):
        y += step_y
        if p < 0:
            p += 2 * abs(dx)
        else:
            x += step_x
            p += 2 * abs(dx) - 2 * abs(dy)
        img.put_pixel(x, y, gradient(x, y, a, b))


def draw_line(img: Image, a: Vec, b: Vec) -> None:
    """Draw the segment from ``a`` to ``b``, blending from ``a.color`` to ``b.color``."""
    if abs(difx(a, b)) > abs(dify(a, b)):
        _small_slope(img, a, b)
    else:
        _big_slope(img, a, b)