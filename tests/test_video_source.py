"""
Video Source Tests
==================

Tests for the OpenCV video source, driven by a fake capture.
"""

import numpy as np
import pytest

from ascii_player.models import VideoParameters, compute_target_height
from ascii_player.video import SourceOpenError, VideoSource, VideoSourceError

from conftest import FakeCapture, solid_frame


def source_for(capture: FakeCapture) -> VideoSource:
    return VideoSource("clip.mp4", capture_factory=lambda path: capture)


class TestTargetSize:
    """Tests for the target height computation."""

    def test_default_scaling(self):
        # 480 * 360 // 640 = 270, * 0.4 = 108
        assert compute_target_height(640, 360, 480) == 108

    def test_integer_division_before_scaling(self):
        # 480 * 1080 // 1920 = 270
        assert compute_target_height(1920, 1080, 480, 0.4) == 108
        # 100 * 7 // 3 = 233, * 0.4 = 93.2
        assert compute_target_height(3, 7, 100, 0.4) == 93

    def test_at_least_one_row(self):
        assert compute_target_height(2, 2, 2, 0.4) == 1
        assert compute_target_height(1000, 1, 10, 0.4) == 1


class TestVideoSource:
    """Tests for opening, parameters and frame reading."""

    def test_open_failure(self):
        capture = FakeCapture([], opened=False)
        with pytest.raises(SourceOpenError, match="clip.mp4"):
            source_for(capture).open()
        assert capture.released

    def test_open_without_frame_size(self):
        capture = FakeCapture([], opened=True, size=(0, 0))
        with pytest.raises(SourceOpenError):
            source_for(capture).open()
        assert capture.released

    def test_parameters(self):
        capture = FakeCapture([solid_frame(360, 640)], fps=25.0)
        with source_for(capture) as source:
            params = source.parameters(target_width=480, vertical_scale=0.4)

        assert params == VideoParameters(
            frame_rate=25.0,
            source_width=640,
            source_height=360,
            target_width=480,
            target_height=108,
            frame_count=1,
        )

    def test_fallback_fps(self):
        capture = FakeCapture([solid_frame(4, 4)], fps=0.0)
        with source_for(capture) as source:
            params = source.parameters(target_width=4, fallback_fps=30.0)
        assert params.frame_rate == 30.0

    def test_frames_resized_and_rgb(self):
        """BGR pure blue comes out as RGB (0, 0, 255) at the target size."""
        frames = [solid_frame(8, 8, bgr=(255, 0, 0)) for _ in range(3)]
        with source_for(FakeCapture(frames)) as source:
            out = list(source.frames(4, 2))

        assert len(out) == 3
        for frame in out:
            assert frame.shape == (2, 4, 3)
            assert frame.dtype == np.uint8
            assert (frame[:, :, 0] == 0).all()
            assert (frame[:, :, 2] == 255).all()

    def test_preload_exhausts_source(self):
        frames = [solid_frame(2, 2) for _ in range(5)]
        with source_for(FakeCapture(frames)) as source:
            assert len(source.preload(2, 2)) == 5
            assert source.preload(2, 2) == []

    def test_release_on_exit(self):
        capture = FakeCapture([solid_frame(2, 2)])
        with source_for(capture) as source:
            assert source.is_open
        assert capture.released
        assert not source.is_open

    def test_read_before_open(self):
        source = source_for(FakeCapture([solid_frame(2, 2)]))
        with pytest.raises(VideoSourceError):
            list(source.frames(2, 2))
        with pytest.raises(VideoSourceError):
            source.parameters()
