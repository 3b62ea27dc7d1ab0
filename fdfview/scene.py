"""Projection of a height map into screen space, and its keyboard-driven motion."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

from fdfview.drawing import draw_line
from fdfview.geometry import Vec, hypotenuse, rot_rect_h
from fdfview.image import Image
from fdfview.mapfile import HeightMap

WIDTH = 1280
HEIGHT = 720
_TWO_PI = 2 * math.pi


class Key(IntEnum):
    """Key symbols the viewer reacts to."""

    A = ord("a")
    D = ord("d")
    W = ord("w")
    S = ord("s")
    MINUS = ord("-")
    EQUAL = ord("=")
    ESCAPE = 0xFF1B
    LEFT = 0xFF51
    UP = 0xFF52
    RIGHT = 0xFF53
    DOWN = 0xFF54
    PAGE_UP = 0xFF55
    PAGE_DOWN = 0xFF56


@dataclass
class Motion:
    """Movement requested by the keys currently held down."""

    xmove: int = 0
    ymove: int = 0
    z_rotate: int = 0
    x_rotate: int = 0
    zoom: float = 1.0
    zscale: float = 0.0


@dataclass
class Scene:
    """A height map with its view transform and projected points."""

    map: HeightMap
    width: int = WIDTH
    height: int = HEIGHT
    center: Vec = field(init=False)
    offset: Vec = field(init=False)
    rot: Vec = field(init=False)
    zoom: Vec = field(init=False)
    motion: Motion = field(init=False, default_factory=Motion)
    proj: list[list[Vec]] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        self.center = Vec(self.width // 2, self.height // 2, 0)
        self.offset = Vec(self.center.x, self.center.y, self.center.z)
        self.rot = Vec(math.atan(1 / math.sqrt(2)), 0.0, math.pi / 4)
        self.zoom = Vec()
        self._default_zoom()
        self.project()

    def _default_zoom(self) -> None:
        cols, rows = self.map.width, self.map.height
        extent = rot_rect_h(math.pi / 4, cols, rows)
        zoom = (self.height - 20) / extent if extent else math.inf
        diagonal = hypotenuse(cols, rows)
        if zoom * diagonal > self.width - diagonal:
            zoom = self.width - diagonal
        self.zoom.x = zoom
        self.zoom.y = zoom
        self.zoom.z = zoom / 2

    def _project_point(self, col: int, row: int, h: float, color: int) -> Vec:
        x = (col - (self.map.width - 1) / 2) * self.zoom.x
        y = (row - (self.map.height - 1) / 2) * self.zoom.y
        z = h * self.zoom.z

        cz, sz = math.cos(self.rot.z), math.sin(self.rot.z)
        x, y = cz * x - sz * y, sz * x + cz * y
        cy, sy = math.cos(self.rot.y), math.sin(self.rot.y)
        x, z = cy * x + sy * z, -sy * x + cy * z
        cx, sx = math.cos(self.rot.x), math.sin(self.rot.x)
        y, z = cx * y - sx * z, sx * y + cx * z

        return Vec(
            x + self.offset.x, y + self.offset.y, z + self.offset.z, color
        )

    def project(self) -> None:
        """Recompute every projected point from the map and the view transform."""
        self.proj = [
            [
                self._project_point(col, row, h, color)
                for col, (h, color) in enumerate(zip(heights, colors))
            ]
            for row, (heights, colors) in enumerate(
                zip(self.map.heights, self.map.colors)
            )
        ]

    def step(self) -> None:
        """Advance the view transform by one frame of the current motion."""
        self.rot.z += self.motion.z_rotate * math.pi / 100
        if self.rot.z >= _TWO_PI:
            self.rot.z -= _TWO_PI
        self.rot.x += self.motion.x_rotate * math.pi / 100
        if self.rot.x >= _TWO_PI:
            self.rot.x -= _TWO_PI
        self.offset.x += 5 * self.motion.xmove
        self.offset.y += 5 * self.motion.ymove
        self.zoom.z *= 1 + self.motion.zscale
        self.zoom.x *= self.motion.zoom
        self.zoom.y *= self.motion.zoom
        self.zoom.z *= self.motion.zoom

    def draw(self, img: Image) -> None:
        """Draw the wireframe: each point joined to its right and lower neighbours."""
        for index, row in enumerate(self.proj):
            below = self.proj[index + 1] if index + 1 < len(self.proj) else None
            for col, point in enumerate(row):
                if below is not None and col < len(below):
                    draw_line(img, point, below[col])
                if col + 1 < len(row):
                    draw_line(img, point, row[col + 1])

    def key_press(self, key: int) -> bool:
        """Start the motion bound to ``key``; True when the key asks to close."""
        motion = self.motion
        if key == Key.ESCAPE:
            return True
        if key == Key.A:
            motion.xmove = -1
        elif key == Key.D:
            motion.xmove = 1
        if key == Key.W:
            motion.ymove = -1
        elif key == Key.S:
            motion.ymove = 1
        if key == Key.LEFT:
            motion.z_rotate = 1
        elif key == Key.RIGHT:
            motion.z_rotate = -1
        if key == Key.UP:
            motion.x_rotate = 1
        elif key == Key.DOWN:
            motion.x_rotate = -1
        if key == Key.MINUS:
            motion.zoom = 0.95
        elif key == Key.EQUAL:
            motion.zoom = 1.05
        if key == Key.PAGE_UP:
            motion.zscale = 0.05
        elif key == Key.PAGE_DOWN:
            motion.zscale = -0.05
        return False

    def key_release(self, key: int) -> None:
        """Stop the motion bound to ``key``."""
        motion = self.motion
        if key in (Key.A, Key.D):
            motion.xmove = 0
        if key in (Key.W, Key.S):
            motion.ymove = 0
        if key in (Key.LEFT, Key.RIGHT):
            motion.z_rotate = 0
        if key in (Key.UP, Key.DOWN):
            motion.x_rotate = 0
        if key in (Key.MINUS, Key.EQUAL):
            motion.zoom = 1.0
        if key in (Key.PAGE_UP, Key.PAGE_DOWN):
            motion.zscale = 0.0