"""Packing, unpacking and blending of 32-bit TRGB colours."""

from __future__ import annotations

from fdfview.geometry import Vec, difx, dify

_MASK32 = 0xFFFFFFFF


def get_t(trgb: int) -> int:
    """Transparency byte."""
    return (trgb >> 24) & 0xFF


def get_r(trgb: int) -> int:
    """Red byte."""
    return (trgb >> 16) & 0xFF


def get_g(trgb: int) -> int:
    """Green byte."""
    return (trgb >> 8) & 0xFF


def get_b(trgb: int) -> int:
    """Blue byte."""
    return trgb & 0xFF


def create_trgb(t: int, r: int, g: int, b: int) -> int:
    """Pack four channels into one unsigned 32-bit colour."""
    return (int(t) << 24 | int(r) << 16 | int(g) << 8 | int(b)) & _MASK32


def add_shade(shade: float, color: int) -> int:
    """Darken ``color`` by ``shade`` (strictly between 0 and 1); otherwise unchanged."""
    if shade >= 1 or shade <= 0:
        return color
    keep = 1 - shade
    return create_trgb(
        get_t(color),
        int(keep * get_r(color)),
        int(keep * get_g(color)),
        int(keep * get_b(color)),
    )


def gradient(x: float, y: float, a: Vec, b: Vec) -> int:
    """Colour at ``(x, y)`` on the segment from ``a`` to ``b``.

    The fraction is taken along the dominant axis of the segment; the
    transparency byte is always that of ``a``.
    """
    if abs(difx(a, b)) > abs(dify(a, b)):
        fraction = (x - a.x) / (b.x - a.x) if a.x != b.x else 0.0
    else:
        fraction = (y - a.y) / (b.y - a.y) if a.y != b.y else 0.0

    def channel(get) -> int:
        start = get(a.color)
        return int(start + (get(b.color) - start) * fraction)

    return create_trgb(get_t(a.color), channel(get_r), channel(get_g), channel(get_b))