"""
Playback Module
===============

Timed terminal output of rendered frames.

    - PlaybackDriver: Fixed-cadence frame emitter
    - frame_interval_ms: Delay between frames for a frame rate
    - Escape sequences: CURSOR_HOME, CLEAR_SCREEN, RESET_ATTRIBUTES
"""

from ascii_player.playback.driver import PlaybackDriver, frame_interval_ms
from ascii_player.playback.terminal import (
    CLEAR_SCREEN,
    CURSOR_HOME,
    RESET_ATTRIBUTES,
    frame_prefix,
)


__all__ = [
    "PlaybackDriver",
    "frame_interval_ms",
    "CLEAR_SCREEN",
    "CURSOR_HOME",
    "RESET_ATTRIBUTES",
    "frame_prefix",
]
