"""Interactive window that shows a height map as a rotating wireframe."""

from __future__ import annotations

import base64
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

from fdfview.image import Image
from fdfview.mapfile import HeightMap
from fdfview.scene import HEIGHT, WIDTH, Key, Scene

WINDOW_TITLE = "FDF - A wireframe model"
FRAME_INTERVAL = 1.0 / 20
_POLL_MS = 5

_NAMED_KEYS: dict[str, Key] = {
    "Escape": Key.ESCAPE,
    "Left": Key.LEFT,
    "Right": Key.RIGHT,
    "Up": Key.UP,
    "Down": Key.DOWN,
    "Prior": Key.PAGE_UP,
    "Next": Key.PAGE_DOWN,
    "Page_Up": Key.PAGE_UP,
    "Page_Down": Key.PAGE_DOWN,
    "minus": Key.MINUS,
    "equal": Key.EQUAL,
}


@dataclass
class FrameClock:
    """Decides when enough time has passed to render the next frame."""

    interval: float = FRAME_INTERVAL
    last: float = 0.0

    def due(self, now: float) -> bool:
        """True, and remember ``now``, when more than ``interval`` has elapsed."""
        if now - self.last > self.interval:
            self.last = now
            return True
        return False


def translate_keysym(keysym: str) -> int | None:
    """Key code for a window-system key name, or None for keys without one."""
    if keysym in _NAMED_KEYS:
        return int(_NAMED_KEYS[keysym])
    if len(keysym) == 1:
        return ord(keysym)
    return None


def _ppm_bytes(image: Image) -> bytes:
    width, height = image.width, image.height
    raw = bytes(image.data[: width * height * 4])
    rgb = bytearray(width * height * 3)
    rgb[0::3] = raw[2::4]
    rgb[1::3] = raw[1::4]
    rgb[2::3] = raw[0::4]
    return b"P6\n%d %d\n255\n" % (width, height) + bytes(rgb)


class Viewer:
    """Owns the scene, its off-screen image and the window that shows it."""

    def __init__(
        self,
        heightmap: HeightMap,
        *,
        width: int = WIDTH,
        height: int = HEIGHT,
        timer: Callable[[], float] = time.time,
        on_frame: Callable[[Image], None] | None = None,
        log: TextIO | None = None,
    ) -> None:
        self._log = log if log is not None else sys.stdout
        self._timer = timer
        self._on_frame = on_frame
        self._root = None
        self._canvas = None
        self._canvas_item = None
        self._photo = None
        self.clock = FrameClock()
        self.closed = False
        self._say("Init map...")
        self.scene = Scene(heightmap, width, height)
        self.image = Image(width, height)
        self._say("Create first view...")
        self.scene.draw(self.image)

    def _say(self, message: str) -> None:
        print(message, file=self._log)

    def _present(self) -> None:
        if self._canvas is not None:
            import tkinter as tk

            encoded = base64.b64encode(_ppm_bytes(self.image)).decode("ascii")
            self._photo = tk.PhotoImage(data=encoded, format="PPM")
            self._canvas.itemconfigure(self._canvas_item, image=self._photo)
        if self._on_frame is not None:
            self._on_frame(self.image)

    def _press(self, keysym: str) -> None:
        key = translate_keysym(keysym)
        if key is not None and self.scene.key_press(key):
            self.close()

    def _release(self, keysym: str) -> None:
        key = translate_keysym(keysym)
        if key is not None:
            self.scene.key_release(key)

    def tick(self) -> bool:
        """Render one frame if it is due; True when a frame was rendered."""
        if self.closed or not self.clock.due(self._timer()):
            return False
        self.scene.step()
        self.scene.project()
        self.image.clear()
        self.scene.draw(self.image)
        self._present()
        self.clock.last = self._timer()
        return True

    def run(self) -> int:
        """Open the window and process events until it is closed."""
        self._say("Start mlx...")
        try:
            import tkinter as tk
        except ImportError as exc:
            raise RuntimeError("Mlx creation failed") from exc
        try:
            root = tk.Tk()
        except tk.TclError as exc:
            raise RuntimeError("Window creation failed") from exc
        self._root = root
        root.title(WINDOW_TITLE)
        root.resizable(False, False)
        self._canvas = tk.Canvas(
            root,
            width=self.image.width,
            height=self.image.height,
            highlightthickness=0,
            background="black",
        )
        self._canvas.pack()
        self._canvas_item = self._canvas.create_image(0, 0, anchor="nw")
        self._say("Render first view...")
        self._present()
        self._say("Set hooks...")
        root.protocol("WM_DELETE_WINDOW", self.close)
        root.bind("<KeyPress>", lambda event: self._press(event.keysym))
        root.bind("<KeyRelease>", lambda event: self._release(event.keysym))

        def poll() -> None:
            if self.closed:
                return
            self.tick()
            if not self.closed:
                root.after(_POLL_MS, poll)

        self._say("Start loop...")
        root.after(_POLL_MS, poll)
        root.mainloop()
        return 0

    def close(self) -> None:
        """Release the window; further ticks do nothing."""
        if self.closed:
            return
        self.closed = True
        self._say("Clear and close window...")
        if self._root is not None:
            self._root.destroy()
            self._root = None
            self._canvas = None
            self._photo = None