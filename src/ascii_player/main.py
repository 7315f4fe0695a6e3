"""
ascii-video-player Main Application
===================================

Command-line entry point and run orchestration.

A run walks through these states:

    INIT -> PARAMETERS_RESOLVED -> PRELOADING -> PARALLEL_CONVERTING -> REPORTING -> DONE
    INIT -> PARAMETERS_RESOLVED -> STREAMING -> REPORTING -> DONE

Preload mode decodes every frame first, converts them on a thread pool and
then plays the result. Streaming mode decodes, converts and shows one frame
at a time on the calling thread.

Usage:
    ascii-player --video clip.mp4
    ascii-player -v clip.mp4 --preload --clear
    python -m ascii_player -v clip.mp4 --workers 4
"""

import argparse
import logging
import sys
import time
from functools import partial
from typing import Callable, List, Optional, TextIO

import yaml
from pydantic import ValidationError

from ascii_player import __version__
from ascii_player.config import Settings, load_config, setup_logging
from ascii_player.models.state import PlaybackMode, PlayerState, RunSummary
from ascii_player.models.video import VideoParameters
from ascii_player.pipeline import ParallelConverter, ProgressReporter
from ascii_player.playback import PlaybackDriver, RESET_ATTRIBUTES
from ascii_player.render import render_frame
from ascii_player.video import SourceOpenError, VideoSource


logger = logging.getLogger(__name__)


# =============================================================================
# Orchestrator
# =============================================================================

class Player:
    """
    Runs one video from open to summary.

    Attributes:
        settings: Player configuration
        stream: Terminal output stream
        state: Current PlayerState
        history: Every state visited by the last run, in order

    Example:
        player = Player(load_config())
        summary = player.run("clip.mp4", preload=True)
        print(summary.elapsed_ms)
    """

    def __init__(
        self,
        settings: Settings,
        stream: Optional[TextIO] = None,
        source_factory: Callable[[str], VideoSource] = VideoSource,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        """
        Initialize player.

        Args:
            settings: Loaded settings
            stream: Output stream, defaults to stdout
            source_factory: Builds the video source for a path
            sleep: Sleep function used between frames, time.sleep if
                omitted
        """
        self.settings = settings
        self.stream = stream if stream is not None else sys.stdout
        self._source_factory = source_factory
        self._sleep = sleep or time.sleep
        self._renderer = partial(render_frame, ramp=settings.render.ramp)
        self.state = PlayerState.INIT
        self.history: List[PlayerState] = []

    def _transition(self, state: PlayerState) -> None:
        logger.debug(f"Player state: {self.state.value} -> {state.value}")
        self.state = state
        self.history.append(state)

    def run(
        self,
        video_path: str,
        preload: bool = False,
        clear_screen: bool = False,
    ) -> RunSummary:
        """
        Play a video end to end.

        Args:
            video_path: Video file path
            preload: Decode and convert everything before playing
            clear_screen: Clear the screen before every frame

        Returns:
            RunSummary of the run

        Raises:
            SourceOpenError: If the video cannot be opened
        """
        self.history = []
        self._transition(PlayerState.INIT)
        mode = PlaybackMode.PRELOAD if preload else PlaybackMode.STREAMING

        source = self._source_factory(video_path)
        source.open()

        try:
            params = source.parameters(
                target_width=self.settings.render.target_width,
                vertical_scale=self.settings.render.vertical_scale,
                fallback_fps=self.settings.playback.fallback_fps,
            )
            self._transition(PlayerState.PARAMETERS_RESOLVED)
            logger.info(f"Video parameters: {params.to_dict()}, mode={mode.value}")

            driver = PlaybackDriver(
                frame_rate=params.frame_rate,
                clear_screen=clear_screen,
                stream=self.stream,
                sleep=self._sleep,
            )

            start_time = time.perf_counter()
            if mode is PlaybackMode.PRELOAD:
                played = self._run_preload(source, params, driver)
            else:
                played = self._run_streaming(source, params, driver)
            elapsed_ms = int((time.perf_counter() - start_time) * 1000)
        finally:
            source.release()

        self._transition(PlayerState.REPORTING)
        summary = RunSummary(
            frame_rate=params.frame_rate,
            target_width=params.target_width,
            target_height=params.target_height,
            frames_played=played,
            elapsed_ms=elapsed_ms,
        )
        self.stream.write(RESET_ATTRIBUTES)
        self.stream.write(summary.format())
        self.stream.flush()
        logger.info(f"Played {played} frames in {elapsed_ms} ms")

        self._transition(PlayerState.DONE)
        return summary

    def _run_preload(
        self,
        source: VideoSource,
        params: VideoParameters,
        driver: PlaybackDriver,
    ) -> int:
        """Decode everything, convert in parallel, then play."""
        self._transition(PlayerState.PRELOADING)
        frames = source.preload(params.target_width, params.target_height)

        self._transition(PlayerState.PARALLEL_CONVERTING)
        conversion = self.settings.conversion
        converter = ParallelConverter(
            workers=conversion.workers or None,
            renderer=self._renderer,
        )
        reporter = ProgressReporter(
            stream=self.stream,
            bar_width=conversion.progress_bar_width,
            threshold=conversion.progress_threshold,
        )
        rendered = converter.convert(frames, reporter)
        reporter.finish()

        return driver.play(rendered)

    def _run_streaming(
        self,
        source: VideoSource,
        params: VideoParameters,
        driver: PlaybackDriver,
    ) -> int:
        """Decode, convert and show one frame at a time."""
        self._transition(PlayerState.STREAMING)
        played = 0
        for frame in source.frames(params.target_width, params.target_height):
            driver.show(self._renderer(frame))
            played += 1
        return played


# =============================================================================
# Command Line
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ascii-player",
        description="Play a video in the terminal as colored ASCII art",
    )
    parser.add_argument(
        "--video", "-v",
        type=str,
        required=True,
        help="Path to the video file",
    )
    parser.add_argument(
        "--preload", "-p",
        action="store_true",
        help="Decode and convert all frames (in parallel) before playing",
    )
    parser.add_argument(
        "--clear", "-c",
        action="store_true",
        help="Clear the screen before each frame instead of overwriting",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a YAML settings file",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Conversion workers in preload mode (default: CPU count)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the player from the command line.

    Args:
        argv: Arguments without the program name. Defaults to sys.argv[1:].

    Returns:
        Process exit code: 0 on success, 1 on configuration or source
        errors, 130 when interrupted. A missing --video exits through
        argparse with status 2.
    """
    args = build_parser().parse_args(argv)

    try:
        settings = load_config(args.config)
        if args.workers is not None:
            settings.conversion.workers = args.workers
        if args.log_level:
            settings.logging.level = args.log_level
    except (FileNotFoundError, ValidationError, ValueError, yaml.YAMLError) as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    setup_logging(settings)

    player = Player(settings)
    try:
        player.run(args.video, preload=args.preload, clear_screen=args.clear)
    except SourceOpenError as e:
        logger.error(f"Source open failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        sys.stdout.write(RESET_ATTRIBUTES + "\n")
        sys.stdout.flush()
        logger.info("Playback interrupted")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
