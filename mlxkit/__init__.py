"""Headless RGBA images, XPM42 loading, a depth-sorted render queue and frame-loop context, with string and line-reading helpers."""

__version__ = "0.1.0"