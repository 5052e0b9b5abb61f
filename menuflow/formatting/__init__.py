"""ANSI styling helpers for console text."""

from menuflow.formatting.colorizer import (
    Bg,
    Effect,
    Fg,
    bg_indexed,
    bg_rgb,
    colorize,
    fg_indexed,
    fg_rgb,
)

__all__ = [
    "Bg",
    "Effect",
    "Fg",
    "bg_indexed",
    "bg_rgb",
    "colorize",
    "fg_indexed",
    "fg_rgb",
]
