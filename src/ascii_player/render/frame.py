"""
Frame Renderer
==============

Converts one decoded, resized RGB frame into a multi-line colored string.
"""

from typing import Sequence, Union

import numpy as np

from ascii_player.render.pixel import ASCII_RAMP, colorize


FrameLike = Union[np.ndarray, Sequence[Sequence[Sequence[int]]]]


def render_frame(frame: FrameLike, ramp: str = ASCII_RAMP) -> str:
    """
    Render a frame as colored ASCII text.

    Pixels are visited in row-major order and every row is terminated by a
    line break. The function only reads the frame, so it can run
    concurrently on frames shared between threads.

    Args:
        frame: (H, W, 3) uint8 array in RGB order, or nested rows of triples
        ramp: Intensity ramp, sparsest glyph first

    Returns:
        Rendered frame text
    """
    # Plain ints are much faster to format than numpy scalars
    rows = frame.tolist() if isinstance(frame, np.ndarray) else frame

    lines = []
    for row in rows:
        lines.append("".join(colorize(r, g, b, ramp) for r, g, b in row))
        lines.append("\n")
    return "".join(lines)
