"""
Render Tests
============

Tests for the pixel mapper and frame renderer.
"""

import threading

import numpy as np

from ascii_player.render import (
    ASCII_RAMP,
    colorize,
    luminance_to_index,
    pixel_to_char,
    render_frame,
)


BLACK_GLYPH = "\033[38;2;0;0;0m."


class TestPixelMapper:
    """Tests for luminance-to-glyph mapping."""

    def test_index_in_range_and_monotonic(self):
        """Every luminance maps into the ramp, never going back down."""
        previous = 0
        for value in range(256):
            index = luminance_to_index(value)
            assert 0 <= index < len(ASCII_RAMP)
            assert index >= previous
            previous = index

    def test_fractional_luminance(self):
        """Averages that are not whole numbers stay in range."""
        assert luminance_to_index(255.999) == len(ASCII_RAMP) - 1
        assert luminance_to_index(25.5) == 0
        assert luminance_to_index(25.7) == 1

    def test_ramp_extremes(self):
        assert pixel_to_char(0) == "."
        assert pixel_to_char(255) == "$"

    def test_custom_ramp_length(self):
        assert luminance_to_index(128, ramp_length=2) == 1
        assert pixel_to_char(127, ramp=" #") == " "

    def test_colorize_black(self):
        assert colorize(0, 0, 0) == BLACK_GLYPH

    def test_colorize_uses_raw_channels(self):
        """Escape carries the channels; glyph comes from their mean."""
        # mean of (255, 0, 0) is 85 -> index 3
        assert colorize(255, 0, 0) == "\033[38;2;255;0;0m="
        assert colorize(255, 255, 255) == "\033[38;2;255;255;255m$"


class TestFrameRenderer:
    """Tests for whole-frame rendering."""

    def test_black_2x2(self, black_frame):
        """Two rows of two darkest glyphs, each row newline-terminated."""
        expected = (BLACK_GLYPH * 2 + "\n") * 2
        assert render_frame(black_frame) == expected

    def test_row_major_order(self):
        frame = np.array(
            [[[0, 0, 0], [255, 255, 255]],
             [[255, 0, 0], [0, 0, 0]]],
            dtype=np.uint8,
        )
        lines = render_frame(frame).split("\n")
        assert lines[0] == BLACK_GLYPH + "\033[38;2;255;255;255m$"
        assert lines[1] == "\033[38;2;255;0;0m=" + BLACK_GLYPH
        assert lines[2] == ""

    def test_accepts_nested_lists(self):
        rows = [[(0, 0, 0), (0, 0, 0)], [(0, 0, 0), (0, 0, 0)]]
        assert render_frame(rows) == (BLACK_GLYPH * 2 + "\n") * 2

    def test_line_count_matches_height(self, random_frame):
        text = render_frame(random_frame)
        assert text.count("\n") == random_frame.shape[0]
        assert text.count("\033[38;2;") == random_frame.shape[0] * random_frame.shape[1]

    def test_deterministic_sequential(self, random_frame):
        assert render_frame(random_frame) == render_frame(random_frame)

    def test_deterministic_concurrent(self, random_frame):
        """Copies rendered on different threads give identical text."""
        results = [None] * 4

        def worker(i):
            results[i] = render_frame(random_frame.copy())

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(set(results)) == 1
        assert results[0] == render_frame(random_frame)

    def test_does_not_modify_frame(self, random_frame):
        before = random_frame.copy()
        render_frame(random_frame)
        assert np.array_equal(before, random_frame)
