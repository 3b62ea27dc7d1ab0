"""Off-screen 32-bit pixel image and colour conversion for the display visual."""

from __future__ import annotations

import struct
from collections.abc import Iterator, Sequence

_BYTES_PER_PIXEL = 4
_PAD_PIXELS = 32
_PIXEL = struct.Struct("<I")


class Image:
    """A ``width`` x ``height`` image of packed 32-bit little-endian pixels.

    The buffer carries padding past the last row, and pixel writes accept
    coordinates up to and including ``width`` and ``height``: a write at
    ``x == width`` lands on the first pixel of the next row.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size {width}x{height}")
        self.width = width
        self.height = height
        self.bpp = _BYTES_PER_PIXEL * 8
        self.size_line = width * _BYTES_PER_PIXEL
        self.endian = 0
        self.data = bytearray((width + _PAD_PIXELS) * height * _BYTES_PER_PIXEL)

    def _offset(self, x: int, y: int) -> int | None:
        if not (0 <= x <= self.width and 0 <= y <= self.height):
            return None
        offset = y * self.size_line + x * (self.bpp // 8)
        if offset + _BYTES_PER_PIXEL > len(self.data):
            return None
        return offset

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at ``(x, y)``; writes outside the buffer are ignored."""
        offset = self._offset(int(x), int(y))
        if offset is not None:
            _PIXEL.pack_into(self.data, offset, color & 0xFFFFFFFF)

    def get_pixel(self, x: int, y: int) -> int:
        """Pixel value at ``(x, y)``."""
        offset = self._offset(int(x), int(y))
        if offset is None:
            raise IndexError(f"pixel ({x}, {y}) outside image")
        return _PIXEL.unpack_from(self.data, offset)[0]

    def clear(self) -> None:
        """Reset every pixel to zero."""
        self.data[:] = bytes(len(self.data))

    def rows(self) -> Iterator[list[int]]:
        """Yield the visible rows as lists of pixel values."""
        row_format = struct.Struct(f"<{self.width}I")
        for y in range(self.height):
            yield list(row_format.unpack_from(self.data, y * self.size_line))


def _shift_and_length(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"colour mask must be positive, got {mask:#x}")
    shift = (mask & -mask).bit_length() - 1
    bits = mask >> shift
    length = (~bits & (bits + 1)).bit_length() - 1
    return shift, length


def mask_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Offset and width of each channel mask: ``(r_off, r_len, g_off, g_len, b_off, b_len)``."""
    return tuple(
        value
        for mask in (red_mask, green_mask, blue_mask)
        for value in _shift_and_length(mask)
    )


def to_visual_color(color: int, depth: int, shifts: Sequence[int]) -> int:
    """Convert a ``0xRRGGBB`` colour to a pixel value for a visual of ``depth`` bits."""
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    r_off, r_len, g_off, g_len, b_off, b_len = shifts
    return (
        ((red >> (16 - r_len)) << r_off)
        + ((green >> (16 - g_len)) << g_off)
        + ((blue >> (16 - b_len)) << b_off)
    )