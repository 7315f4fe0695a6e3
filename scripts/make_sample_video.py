#!/usr/bin/env python3
"""
Sample Video Generator
======================

Writes a short synthetic video for trying the player by hand.

The clip is a horizontal color gradient that scrolls one step per frame,
so dropped or reordered frames are easy to spot during playback.

Usage:
    python scripts/make_sample_video.py --output sample.avi
    python scripts/make_sample_video.py --frames 120 --fps 24
    ascii-player --video sample.avi --preload
"""

import argparse
import logging
import sys

import cv2
import numpy as np


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
logger = logging.getLogger(__name__)


def gradient_frame(index: int, width: int, height: int) -> np.ndarray:
    """Build one BGR frame of the scrolling gradient."""
    x = (np.arange(width) + index * 4) % width
    row = np.stack(
        [
            (x * 255 // max(width - 1, 1)),
            np.full(width, (index * 5) % 256),
            255 - (x * 255 // max(width - 1, 1)),
        ],
        axis=-1,
    ).astype(np.uint8)
    return np.repeat(row[np.newaxis, :, :], height, axis=0)


def write_video(output: str, frames: int, fps: float, width: int, height: int) -> int:
    """
    Write the sample clip.

    Returns:
        Number of frames written
    """
    writer = cv2.VideoWriter(
        output,
        cv2.VideoWriter_fourcc(*"MJPG"),
        fps,
        (width, height),
    )
    if not writer.isOpened():
        logger.error(f"Could not open video writer for {output}")
        return 0

    try:
        for i in range(frames):
            writer.write(gradient_frame(i, width, height))
    finally:
        writer.release()

    logger.info(f"Wrote {frames} frames ({width}x{height} @ {fps} FPS) to {output}")
    return frames


def main():
    parser = argparse.ArgumentParser(
        description="Generate a synthetic video for ascii-player"
    )
    parser.add_argument(
        "--output",
        type=str,
        default="sample.avi",
        help="Output path (default: sample.avi)",
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=60,
        help="Number of frames (default: 60)",
    )
    parser.add_argument(
        "--fps",
        type=float,
        default=24.0,
        help="Frame rate (default: 24)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=640,
        help="Frame width in pixels (default: 640)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=360,
        help="Frame height in pixels (default: 360)",
    )

    args = parser.parse_args()

    written = write_video(args.output, args.frames, args.fps, args.width, args.height)

    sys.exit(0 if written > 0 else 1)


if __name__ == "__main__":
    main()
