"""
Video Parameter Models
======================

Immutable description of the source video and the terminal-sized target.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class VideoParameters:
    """
    Video parameters, resolved once at startup.

    Attributes:
        frame_rate: Frames per second used for playback pacing
        source_width: Decoded frame width in pixels
        source_height: Decoded frame height in pixels
        target_width: Resized width (characters per row)
        target_height: Resized height (rows per frame)
        frame_count: Frame count reported by the container (may be
            approximate)
    """

    frame_rate: float
    source_width: int
    source_height: int
    target_width: int
    target_height: int
    frame_count: int

    def to_dict(self) -> dict:
        """Export as dictionary for logging."""
        return {
            "frame_rate": round(self.frame_rate, 3),
            "source": f"{self.source_width}x{self.source_height}",
            "target": f"{self.target_width}x{self.target_height}",
            "frame_count": self.frame_count,
        }


def compute_target_height(
    source_width: int,
    source_height: int,
    target_width: int,
    vertical_scale: float = 0.4,
) -> int:
    """
    Scale the source height to the target width, preserving aspect ratio.

    Terminal cells are taller than wide, so the height is further
    multiplied by `vertical_scale`.

    Args:
        source_width: Source width in pixels, must be positive
        source_height: Source height in pixels
        target_width: Target width in characters
        vertical_scale: Vertical compression factor

    Returns:
        Target height in rows, at least 1
    """
    scaled = target_width * source_height // source_width
    return max(int(scaled * vertical_scale), 1)
