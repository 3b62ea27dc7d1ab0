"""Command line entry point: view a height-map file as a wireframe."""

from __future__ import annotations

import errno
import os
import sys
from collections.abc import Sequence
from typing import TextIO

from fdfview.mapfile import MapParseError, parse_map
from fdfview.viewer import Viewer


def open_map(path: str | os.PathLike[str]) -> TextIO:
    """Open the map file at ``path`` for reading."""
    if not os.path.exists(path):
        raise FileNotFoundError(errno.ENOENT, "File does not exist.", str(path))
    try:
        return open(path, encoding="latin-1", newline="")
    except OSError as exc:
        raise OSError(exc.errno, "Cannot open file", str(path)) from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer on the map file named in ``argv``; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    print("Open file...")
    if len(args) != 1:
        print("Usage: <filename>", file=sys.stderr)
        return 1
    try:
        handle = open_map(args[0])
    except FileNotFoundError:
        print("File does not exist.", file=sys.stderr)
        return 1
    except OSError:
        print("Cannot open file", file=sys.stderr)
        return 1
    print("Parse file...")
    try:
        with handle:
            heightmap = parse_map(handle)
    except MapParseError as exc:
        print(exc, file=sys.stderr)
        return 1
    print("Parsing successful")
    try:
        return Viewer(heightmap).run()
    except RuntimeError as exc:
        print(f"Error\n{exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())