"""
Pixel Mapper
============

Maps a single pixel onto one glyph of the intensity ramp and wraps it in a
24-bit true-color ANSI escape.

Design Rules:
    - Pure functions, no state
    - Luminance is the unweighted mean of the three channels
    - Color escape is built from the raw channel values
"""

ASCII_RAMP = ".-:=+*%#@$"

TRUECOLOR_FOREGROUND = "\033[38;2;{r};{g};{b}m"


def luminance_to_index(value: float, ramp_length: int = len(ASCII_RAMP)) -> int:
    """
    Map a luminance value onto an index of the ramp.

    Args:
        value: Luminance in [0, 256)
        ramp_length: Number of glyphs in the ramp

    Returns:
        floor(value * ramp_length / 256), in [0, ramp_length)
    """
    return int(value * ramp_length / 256)


def pixel_to_char(value: float, ramp: str = ASCII_RAMP) -> str:
    """Return the ramp glyph for a luminance value."""
    return ramp[luminance_to_index(value, len(ramp))]


def colorize(r: int, g: int, b: int, ramp: str = ASCII_RAMP) -> str:
    """
    Render one RGB pixel as a colored glyph.

    Args:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
        ramp: Intensity ramp, sparsest glyph first

    Returns:
        True-color escape sequence followed by the glyph
    """
    return TRUECOLOR_FOREGROUND.format(r=r, g=g, b=b) + pixel_to_char(
        (r + g + b) / 3.0, ramp
    )
