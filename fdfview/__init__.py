"""Isometric wireframe viewer for height-map files, with an XPM image loader."""

__version__ = "0.1.0"