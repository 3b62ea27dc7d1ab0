"""Reading of height-map files: whitespace-separated heights with optional colours."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

DEFAULT_COLOR = 0xFFFFFF
_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class MapParseError(ValueError):
    """Raised when a map file is malformed."""


@dataclass
class HeightMap:
    """A grid of heights with one colour per point."""

    heights: list[list[int]] = field(default_factory=list)
    colors: list[list[int]] = field(default_factory=list)
    width: int = 0

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.heights)


def is_numeric(s: str | None) -> bool:
    """True for an optionally signed, non-empty run of decimal digits."""
    if not s:
        return False
    if s[0] in "+-":
        s = s[1:]
    return bool(s) and all(ch in _DIGITS for ch in s)


def is_color(s: str | None) -> bool:
    """True for ``0x`` followed by two to six hexadecimal digits."""
    if s is None or not 4 <= len(s) <= 8 or not s.startswith("0x"):
        return False
    return all(ch in _HEX_DIGITS for ch in s[2:])


def get_color(s: str) -> int:
    """Value of a colour token accepted by :func:`is_color`."""
    return int(s[2:8], 16)


def _parse_token(raw: str) -> tuple[int, int]:
    parts = [part for part in raw.split(",") if part]
    if not parts or not is_numeric(parts[0]) or len(parts) > 2:
        raise MapParseError("Parse error: malformed line")
    height = int(parts[0])
    if len(parts) == 1:
        return height, DEFAULT_COLOR
    if not is_color(parts[1]):
        raise MapParseError("Parse error: malformed line")
    return height, get_color(parts[1])


def parse_map(lines: Iterable[str]) -> HeightMap:
    """Build a :class:`HeightMap` from the lines of a map file.

    Every line must hold as many space-separated tokens as the first
    non-empty one; a token is ``height`` or ``height,0xRRGGBB``.
    """
    grid = HeightMap()
    for line in lines:
        words = [word for word in line.strip("\n").split(" ") if word]
        if grid.width and grid.width != len(words):
            raise MapParseError(
                f"Parse error in line {grid.height}: wrong line length"
            )
        if not grid.width:
            grid.width = len(words)
        parsed = [_parse_token(word) for word in words]
        grid.heights.append([h for h, _ in parsed])
        grid.colors.append([c for _, c in parsed])
    return grid


def load_map(path: str | os.PathLike[str]) -> HeightMap:
    """Read and parse the map file at ``path``."""
    with open(path, encoding="latin-1", newline="") as handle:
        return parse_map(handle)


def format_grid(rows: Sequence[Sequence[int]] | None) -> str:
    """Tab-separated text rendering of a grid of integers."""
    if not rows:
        return "Empty Array\n"
    return "".join("".join(f"{value}\t" for value in row) + "\n" for row in rows)