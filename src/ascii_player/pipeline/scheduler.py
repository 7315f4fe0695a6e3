"""
Parallel Conversion Scheduler
=============================

Renders a preloaded frame list on a pool of worker threads.

The index range is split into one contiguous chunk per worker. Every task
writes its rendered frames into a pre-sized list at the source indices, so
the result is in display order whatever order the tasks finish in.

Design Rules:
    - Source frames are shared read-only
    - Output list is write-partitioned by chunk, no lock needed
    - Single join barrier, no cancellation, no retries
    - Worker count never drops below 1
"""

import logging
import os
import time
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable, List, Optional, Sequence

from ascii_player.pipeline.progress import ProgressReporter
from ascii_player.render.frame import render_frame


logger = logging.getLogger(__name__)


def resolve_workers(requested: Optional[int] = None) -> int:
    """
    Resolve the number of conversion workers.

    Args:
        requested: Explicit count. None or values below 1 mean
            "use hardware concurrency".

    Returns:
        Worker count, at least 1
    """
    if requested is not None and requested >= 1:
        return requested
    return max(os.cpu_count() or 1, 1)


def partition(count: int, workers: int) -> List[range]:
    """
    Split [0, count) into contiguous chunks, one per worker.

    Each chunk holds count // workers indices and the last chunk also takes
    the remainder. Chunks may be empty when count < workers.

    Args:
        count: Number of frames
        workers: Number of chunks (0 is treated as 1)

    Returns:
        List of `workers` ranges covering [0, count) exactly once
    """
    workers = max(workers, 1)
    per_chunk = count // workers

    chunks = []
    for i in range(workers):
        start = i * per_chunk
        end = count if i == workers - 1 else (i + 1) * per_chunk
        chunks.append(range(start, end))
    return chunks


class ParallelConverter:
    """
    Converts frames to text with one task per chunk.

    Attributes:
        workers: Number of chunks and pool threads
        renderer: Callable turning one frame into text
    """

    def __init__(
        self,
        workers: Optional[int] = None,
        renderer: Callable[..., str] = render_frame,
    ) -> None:
        """
        Initialize converter.

        Args:
            workers: Worker count. None or 0 uses hardware concurrency.
            renderer: Frame renderer, render_frame by default
        """
        self.workers = resolve_workers(workers)
        self.renderer = renderer

    def convert(
        self,
        frames: Sequence,
        reporter: Optional[ProgressReporter] = None,
    ) -> List[str]:
        """
        Render all frames in parallel.

        Blocks until every chunk is done. An exception raised while
        rendering propagates to the caller after all tasks have finished.

        Args:
            frames: Preloaded frames, read-only during conversion
            reporter: Progress reporter. A fresh one (with its own
                ProgressState) is created per call if omitted.

        Returns:
            Rendered frames, index-aligned with `frames`
        """
        total = len(frames)
        if reporter is None:
            reporter = ProgressReporter()

        rendered: List[Optional[str]] = [None] * total
        chunks = partition(total, self.workers)

        logger.info(
            f"Converting {total} frames with {self.workers} workers "
            f"(chunk sizes: {[len(c) for c in chunks]})"
        )
        start_time = time.perf_counter()

        with ThreadPoolExecutor(
            max_workers=self.workers,
            thread_name_prefix="convert",
        ) as executor:
            futures = [
                executor.submit(self._convert_chunk, chunk, frames, rendered, reporter)
                for chunk in chunks
            ]
            wait(futures)

        for future in futures:
            future.result()

        logger.info(
            f"Conversion finished in {time.perf_counter() - start_time:.2f}s"
        )
        return rendered

    def _convert_chunk(
        self,
        chunk: range,
        frames: Sequence,
        rendered: List[Optional[str]],
        reporter: ProgressReporter,
    ) -> None:
        """Render one chunk in index order into its slots."""
        total = len(frames)
        for i in chunk:
            rendered[i] = self.renderer(frames[i])
            reporter.frame_completed(total)
