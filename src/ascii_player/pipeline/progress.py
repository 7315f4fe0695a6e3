"""
Progress Reporting
==================

Thread-safe completed-frame counter and throttled progress bar.

Conversion tasks finish frames in no particular order, so the bar tracks
how many frames are done, not which ones.

Design Rules:
    - Counter increment has its own lock, separate from the display lock
    - Bar is redrawn only when progress advances by the threshold (5%)
    - Displayed value never decreases and never exceeds 100%
    - Bar is rewritten in place with a carriage return, no newline
"""

import logging
import sys
import threading
from typing import Optional, TextIO


logger = logging.getLogger(__name__)

# Absorbs float error so an advance of exactly one threshold counts
THRESHOLD_TOLERANCE = 1e-9


class ProgressState:
    """
    Shared progress of one conversion run.

    Attributes:
        completed: Frames converted so far
        last_progress: Last displayed fraction, -1.0 before the first draw
    """

    def __init__(self) -> None:
        self._completed: int = 0
        self._counter_lock = threading.Lock()
        self.display_lock = threading.Lock()
        self.last_progress: float = -1.0

    @property
    def completed(self) -> int:
        return self._completed

    def increment(self) -> int:
        """
        Atomically count one more completed frame.

        Returns:
            Completed count after the increment
        """
        with self._counter_lock:
            self._completed += 1
            return self._completed


class ProgressReporter:
    """
    Fixed-width terminal progress bar driven by a ProgressState.

    Example:
        reporter = ProgressReporter()
        for frame in frames:
            convert(frame)
            reporter.frame_completed(total=len(frames))
        reporter.finish()
    """

    def __init__(
        self,
        state: Optional[ProgressState] = None,
        stream: Optional[TextIO] = None,
        bar_width: int = 50,
        threshold: float = 0.05,
    ) -> None:
        """
        Initialize reporter.

        Args:
            state: Shared progress state. A new one is created if omitted.
            stream: Output stream, defaults to stdout
            bar_width: Bar width in characters
            threshold: Minimum advance (fraction) between redraws
        """
        if bar_width < 1:
            raise ValueError("bar_width must be >= 1")

        self.state = state if state is not None else ProgressState()
        self.stream = stream if stream is not None else sys.stdout
        self.bar_width = bar_width
        self.threshold = threshold

    def frame_completed(self, total: int) -> int:
        """Count one finished frame and report. Returns the new count."""
        completed = self.state.increment()
        self.report(completed, total)
        return completed

    def report(self, completed: int, total: int) -> None:
        """
        Redraw the bar if progress advanced enough since the last draw.

        Args:
            completed: Frames completed
            total: Frames in the run
        """
        if total <= 0:
            return

        progress = min(max(completed / total, 0.0), 1.0)

        # Unlocked pre-check keeps most callers off the lock
        if not self._advanced(progress):
            return

        with self.state.display_lock:
            if not self._advanced(progress):
                return
            self.state.last_progress = progress
            self.stream.write(self.format_bar(progress))
            self.stream.flush()

    def _advanced(self, progress: float) -> bool:
        """Whether progress moved at least one threshold past the last draw."""
        advance = progress - self.state.last_progress
        return advance >= self.threshold - THRESHOLD_TOLERANCE

    def format_bar(self, progress: float) -> str:
        """Format the bar for a fraction in [0, 1]."""
        pos = int(self.bar_width * progress)
        cells = []
        for i in range(self.bar_width):
            if i < pos:
                cells.append("=")
            elif i == pos:
                cells.append(">")
            else:
                cells.append(" ")
        return f"[{''.join(cells)}] {int(progress * 100)} %\r"

    def finish(self) -> None:
        """Move past the bar line."""
        self.stream.write("\n")
        self.stream.flush()
        logger.debug(f"Progress finished at {self.state.completed} frames")
