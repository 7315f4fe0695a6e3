"""
Test Configuration
==================

Pytest fixtures and test configuration for ascii-video-player.
"""

from typing import List, Optional

import cv2
import numpy as np
import pytest


class FakeCapture:
    """
    Stand-in for cv2.VideoCapture that serves in-memory BGR frames.

    Attributes:
        released: Whether release() was called
    """

    def __init__(
        self,
        frames: List[np.ndarray],
        fps: float = 1.0,
        opened: bool = True,
        size: Optional[tuple] = None,
    ) -> None:
        self._frames = list(frames)
        self._fps = fps
        self._opened = opened
        if size is None:
            height, width = frames[0].shape[:2] if frames else (0, 0)
        else:
            width, height = size
        self._width = width
        self._height = height
        self.released = False

    def isOpened(self) -> bool:
        return self._opened

    def get(self, prop: int) -> float:
        return {
            cv2.CAP_PROP_FPS: float(self._fps),
            cv2.CAP_PROP_FRAME_WIDTH: float(self._width),
            cv2.CAP_PROP_FRAME_HEIGHT: float(self._height),
            cv2.CAP_PROP_FRAME_COUNT: float(len(self._frames)),
        }.get(prop, 0.0)

    def read(self):
        if not self._frames:
            return False, None
        return True, self._frames.pop(0)

    def release(self) -> None:
        self.released = True


def solid_frame(height: int, width: int, bgr=(0, 0, 0)) -> np.ndarray:
    """Build a (height, width, 3) uint8 frame filled with one BGR color."""
    frame = np.zeros((height, width, 3), dtype=np.uint8)
    frame[:, :] = bgr
    return frame


@pytest.fixture
def black_frame():
    """Provide a 2x2 all-black RGB frame."""
    return np.zeros((2, 2, 3), dtype=np.uint8)


@pytest.fixture
def random_frame():
    """Provide a reproducible 4x6 random RGB frame."""
    rng = np.random.default_rng(seed=7)
    return rng.integers(0, 256, size=(4, 6, 3), dtype=np.uint8)


@pytest.fixture
def sleeps():
    """Collects the durations passed to an injected sleep function."""
    return []


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run in an empty directory so no ascii_player.yaml is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
