"""Vector type and small geometric helpers used by the projection."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Vec:
    """A point in model or screen space, carrying a colour."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    color: int = 0

    def __str__(self) -> str:
        return f"x: {self.x:f}y: {self.y:f}z: {self.z:f}, color: {self.color} "


def hypotenuse(a: float, b: float) -> float:
    """Length of the hypotenuse of a right triangle with legs ``a`` and ``b``."""
    return math.sqrt(a * a + b * b)


def rot_rect_h(alpha: float, length: float, width: float) -> float:
    """Height taken by a ``length`` x ``width`` rectangle rotated by ``alpha``."""
    return 2 * abs(math.sin(alpha) * length + math.cos(alpha) * width) - length


def difx(a: Vec, b: Vec) -> int:
    """Horizontal distance from ``a`` to ``b``, truncated towards zero."""
    return int(b.x - a.x)


def dify(a: Vec, b: Vec) -> int:
    """Vertical distance from ``a`` to ``b``, truncated towards zero."""
    return int(b.y - a.y)


def round_half_up(x: float) -> int:
    """Add one half and truncate towards zero."""
    return int(x + 0.5)