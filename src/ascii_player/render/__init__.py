"""
Render Module
=============

Pixel-to-glyph mapping and frame rendering.

    - ASCII_RAMP: Default intensity ramp, sparsest to densest
    - colorize: One RGB pixel to one colored glyph
    - render_frame: Whole frame to multi-line colored text
"""

from ascii_player.render.pixel import (
    ASCII_RAMP,
    colorize,
    luminance_to_index,
    pixel_to_char,
)
from ascii_player.render.frame import render_frame


__all__ = [
    "ASCII_RAMP",
    "colorize",
    "luminance_to_index",
    "pixel_to_char",
    "render_frame",
]
