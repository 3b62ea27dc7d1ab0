"""Loading of XPM pixmaps, from in-memory line lists or from C-style source files."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable

from fdfview.colornames import text_to_rgb
from fdfview.image import Image

_TRANSPARENT = 0xFF000000
_WORD_SEPARATORS = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data is malformed."""


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def find_unquoted(text: str, needle: str) -> int:
    """Index of the first ``needle`` in ``text`` outside double quotes, or -1."""
    if not needle:
        raise ValueError("needle must not be empty")
    inside = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            inside = not inside
        if not inside and text.startswith(needle, pos):
            return pos
    return -1


def _blank(text: str, start: int, count: int) -> str:
    stop = min(len(text), start + count)
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace ``/* */`` and ``//`` comments outside quotes by spaces.

    The length of the text is kept. A ``//`` comment is blanked together
    with the newline that ends it.
    """
    while (begin := find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        end = end - (begin + 2) if end != -1 else -1
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        end = end - (begin + 2) if end != -1 else -1
        text = _blank(text, begin, end + 3)
    return text


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an :class:`Image` from the strings of an XPM pixmap.

    The first string holds width, height, number of colours and characters
    per pixel; colour definitions and pixel rows follow. Colours named
    ``None`` become fully transparent; pixels whose key is not defined are 0.
    """
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = split_words(next_line("header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid header: {' '.join(header[:4])}")

    # Short keys are stored in a direct table (last definition wins);
    # longer keys are searched in definition order (first one wins).
    direct = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour definition")
        if len(line) < cpp:
            raise XpmError(f"colour definition too short: {line!r}")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"no colour in definition: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"no colour after 'c' in definition: {line!r}")
        end = words[index + 2] if index + 2 < len(words) else None
        rgb = text_to_rgb(words[index + 1], end)
        key = line[:cpp]
        if direct:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    image = Image(width, height)
    for y in range(height):
        line = next_line("pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} too short")
        for x in range(width):
            color = palette.get(line[x * cpp:(x + 1) * cpp], 0)
            image.put_pixel(x, y, _TRANSPARENT if color == -1 else color)
    return image


def xpm_to_image(data: Iterable[str]) -> Image:
    """Build an image from XPM data given as a sequence of strings."""
    return parse_xpm(data)


def xpm_file_to_image(path: str | os.PathLike[str]) -> Image:
    """Read an XPM file in C source form and build its image."""
    with open(path, encoding="latin-1", newline="") as handle:
        text = handle.read()
    return parse_xpm(_QUOTED.findall(strip_comments(text)))