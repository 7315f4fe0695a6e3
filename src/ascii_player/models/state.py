"""
Player State Models
===================

Run mode, orchestrator states and the end-of-run summary.
"""

from dataclasses import dataclass
from enum import Enum


class PlaybackMode(str, Enum):
    """
    How frames travel from decoder to terminal.

    PRELOAD: Decode everything, convert in parallel, then play
    STREAMING: Decode, convert and show one frame at a time
    """

    PRELOAD = "preload"
    STREAMING = "streaming"


class PlayerState(str, Enum):
    """Orchestrator states, in the order a run visits them."""

    INIT = "INIT"
    PARAMETERS_RESOLVED = "PARAMETERS_RESOLVED"
    PRELOADING = "PRELOADING"
    PARALLEL_CONVERTING = "PARALLEL_CONVERTING"
    STREAMING = "STREAMING"
    REPORTING = "REPORTING"
    DONE = "DONE"


@dataclass(frozen=True, slots=True)
class RunSummary:
    """
    Result of one playback run.

    Attributes:
        frame_rate: Playback frames per second
        target_width: Characters per row
        target_height: Rows per frame
        frames_played: Frames written to the terminal
        elapsed_ms: Wall-clock time from first decode to last frame
    """

    frame_rate: float
    target_width: int
    target_height: int
    frames_played: int
    elapsed_ms: int

    def format(self) -> str:
        """Human-readable summary block."""
        return (
            f"Framerate: {self.frame_rate:g} FPS\n"
            f"Height: {self.target_height}\n"
            f"Width: {self.target_width}\n"
            f"Execution Time: {self.elapsed_ms} ms\n"
        )
