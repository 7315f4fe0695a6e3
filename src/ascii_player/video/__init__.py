"""
Video Module
============

Decoding and resizing through OpenCV.

    - VideoSource: Opens a video, reports its parameters, yields RGB frames
    - VideoSourceError / SourceOpenError: Decoder failures
"""

from ascii_player.video.source import SourceOpenError, VideoSource, VideoSourceError


__all__ = [
    "VideoSource",
    "VideoSourceError",
    "SourceOpenError",
]
