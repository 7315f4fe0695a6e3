"""
Playback Driver
===============

Writes rendered frames to the terminal at a fixed cadence.

Design Rules:
    - Frames are shown strictly in iteration order
    - Sleep between frames is round(1000 / frame_rate) ms, not adaptive
    - No frame is ever skipped, no looping
"""

import logging
import sys
import time
from typing import Callable, Iterable, Optional, TextIO

from ascii_player.playback.terminal import frame_prefix


logger = logging.getLogger(__name__)


def frame_interval_ms(frame_rate: float) -> int:
    """
    Nominal delay between frames.

    Args:
        frame_rate: Frames per second, must be positive

    Returns:
        round(1000 / frame_rate) in milliseconds

    Raises:
        ValueError: If frame_rate is not positive
    """
    if frame_rate <= 0:
        raise ValueError(f"frame_rate must be > 0, got {frame_rate}")
    return round(1000 / frame_rate)


class PlaybackDriver:
    """
    Fixed-cadence terminal emitter.

    Attributes:
        frame_rate: Source frames per second
        clear_screen: Clear the screen before each frame instead of
            overwriting in place
        interval_ms: Sleep after each frame

    Example:
        driver = PlaybackDriver(frame_rate=24.0)
        driver.play(rendered_frames)
    """

    def __init__(
        self,
        frame_rate: float,
        clear_screen: bool = False,
        stream: Optional[TextIO] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.frame_rate = frame_rate
        self.clear_screen = clear_screen
        self.interval_ms = frame_interval_ms(frame_rate)
        self.stream = stream if stream is not None else sys.stdout
        self._sleep = sleep
        self._prefix = frame_prefix(clear_screen)
        self.frames_shown: int = 0

    def show(self, frame_text: str) -> None:
        """Reposition the cursor, write one frame and wait one interval."""
        self.stream.write(self._prefix)
        self.stream.write(frame_text)
        self.stream.flush()
        self.frames_shown += 1
        self._sleep(self.interval_ms / 1000.0)

    def play(self, frames: Iterable[str]) -> int:
        """
        Show every frame in order.

        Args:
            frames: Rendered frames, a list or a generator

        Returns:
            Number of frames shown by this call
        """
        logger.info(
            f"Playback at {self.frame_rate:.2f} FPS "
            f"({self.interval_ms} ms per frame, clear={self.clear_screen})"
        )
        played = 0
        for frame_text in frames:
            self.show(frame_text)
            played += 1
        return played
