"""
Data Models
===========

    Video:
        - VideoParameters: Source and target geometry, frame rate
        - compute_target_height: Aspect-preserving, cell-corrected height

    State:
        - PlaybackMode: PRELOAD or STREAMING
        - PlayerState: Orchestrator states
        - RunSummary: End-of-run report
"""

from ascii_player.models.video import VideoParameters, compute_target_height
from ascii_player.models.state import PlaybackMode, PlayerState, RunSummary

__all__ = [
    "VideoParameters",
    "compute_target_height",
    "PlaybackMode",
    "PlayerState",
    "RunSummary",
]
