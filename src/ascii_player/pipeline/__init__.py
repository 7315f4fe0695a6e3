"""
Pipeline Module
===============

Parallel frame conversion for preload mode.

    - ProgressState: Shared completed-frame counter of one run
    - ProgressReporter: Throttled in-place progress bar
    - partition: Split a frame range into per-worker chunks
    - ParallelConverter: Thread pool that renders chunks in place

Example:
    from ascii_player.pipeline import ParallelConverter, ProgressReporter

    converter = ParallelConverter(workers=4)
    reporter = ProgressReporter()
    rendered = converter.convert(frames, reporter)
    reporter.finish()
"""

from ascii_player.pipeline.progress import ProgressReporter, ProgressState
from ascii_player.pipeline.scheduler import (
    ParallelConverter,
    partition,
    resolve_workers,
)


__all__ = [
    "ProgressState",
    "ProgressReporter",
    "ParallelConverter",
    "partition",
    "resolve_workers",
]
