"""
ascii-video-player
==================

Terminal video player that turns every frame of a video into true-color
ASCII art.

Frames are decoded and resized with OpenCV, mapped pixel by pixel onto a
fixed intensity ramp, and written to the terminal at the source frame rate.

Components:
    - render: Pixel mapping and whole-frame rendering
    - pipeline: Parallel conversion scheduler and progress reporting
    - playback: Fixed-cadence terminal playback
    - video: OpenCV-backed video source
    - models: Video parameters and run state

Example:
    from ascii_player.config import load_config
    from ascii_player.main import Player

    player = Player(load_config())
    summary = player.run("clip.mp4", preload=True)
"""

__version__ = "0.1.0"
__author__ = "ascii-video-player contributors"

__all__ = [
    "__version__",
]
