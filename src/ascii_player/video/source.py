"""
Video Source
============

OpenCV-backed reader that yields resized RGB frames.

Design Rules:
    - This is the ONLY place in the codebase that touches cv2.VideoCapture
    - Frames leave this module in RGB order, resized with INTER_AREA
    - A failed read is end of stream, not an error
    - Fails fast if the source cannot be opened
"""

import logging
from typing import Callable, Iterator, List, Optional

import cv2
import numpy as np

from ascii_player.models.video import VideoParameters, compute_target_height


logger = logging.getLogger(__name__)


class VideoSourceError(Exception):
    """Base error for video source failures."""
    pass


class SourceOpenError(VideoSourceError):
    """Raised when the decoder cannot open a video."""
    pass


class VideoSource:
    """
    Video file opened through OpenCV.

    Attributes:
        path: Path or URL handed to the decoder

    Example:
        with VideoSource("clip.mp4") as source:
            params = source.parameters(target_width=480)
            for frame in source.frames(params.target_width, params.target_height):
                ...
    """

    def __init__(
        self,
        path: str,
        capture_factory: Optional[Callable[[str], object]] = None,
    ) -> None:
        """
        Initialize source. Nothing is opened until open() is called.

        Args:
            path: Video path, any container/codec OpenCV can decode
            capture_factory: Builds the capture object, cv2.VideoCapture
                if omitted
        """
        self.path = path
        self._capture_factory = capture_factory or cv2.VideoCapture
        self._capture = None

    @property
    def is_open(self) -> bool:
        return self._capture is not None

    def open(self) -> "VideoSource":
        """
        Open the video.

        Raises:
            SourceOpenError: If the decoder rejects the path or reports
                an empty frame size
        """
        capture = self._capture_factory(self.path)
        if not capture.isOpened():
            capture.release()
            raise SourceOpenError(f"Could not open video: {self.path}")

        self._capture = capture
        if self._get(cv2.CAP_PROP_FRAME_WIDTH) <= 0 or self._get(cv2.CAP_PROP_FRAME_HEIGHT) <= 0:
            self.release()
            raise SourceOpenError(f"Video has no frame size: {self.path}")

        logger.info(f"Opened video: {self.path}")
        return self

    def release(self) -> None:
        if self._capture is not None:
            self._capture.release()
            self._capture = None

    def __enter__(self) -> "VideoSource":
        if not self.is_open:
            self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def _get(self, prop: int) -> float:
        if self._capture is None:
            raise VideoSourceError("Video source is not open")
        return self._capture.get(prop)

    def parameters(
        self,
        target_width: int = 480,
        vertical_scale: float = 0.4,
        fallback_fps: Optional[float] = None,
    ) -> VideoParameters:
        """
        Read the source properties and compute the target size.

        Args:
            target_width: Characters per row
            vertical_scale: Vertical compression for terminal cells
            fallback_fps: Frame rate to use when the container reports
                none. If None, the reported value is kept as is.

        Returns:
            VideoParameters for this source
        """
        frame_rate = float(self._get(cv2.CAP_PROP_FPS))
        source_width = int(self._get(cv2.CAP_PROP_FRAME_WIDTH))
        source_height = int(self._get(cv2.CAP_PROP_FRAME_HEIGHT))
        frame_count = int(self._get(cv2.CAP_PROP_FRAME_COUNT))

        if frame_rate <= 0 and fallback_fps is not None:
            logger.warning(
                f"Video reports frame rate {frame_rate}, "
                f"using {fallback_fps} FPS"
            )
            frame_rate = fallback_fps

        return VideoParameters(
            frame_rate=frame_rate,
            source_width=source_width,
            source_height=source_height,
            target_width=target_width,
            target_height=compute_target_height(
                source_width, source_height, target_width, vertical_scale
            ),
            frame_count=max(frame_count, 0),
        )

    def frames(self, width: int, height: int) -> Iterator[np.ndarray]:
        """
        Yield resized RGB frames until the decoder runs out.

        Args:
            width: Target width in pixels
            height: Target height in pixels

        Yields:
            (height, width, 3) uint8 arrays in RGB order
        """
        if self._capture is None:
            raise VideoSourceError("Video source is not open")

        while True:
            ok, bgr = self._capture.read()
            if not ok or bgr is None:
                break
            resized = cv2.resize(bgr, (width, height), interpolation=cv2.INTER_AREA)
            yield cv2.cvtColor(resized, cv2.COLOR_BGR2RGB)

    def preload(self, width: int, height: int) -> List[np.ndarray]:
        """Read every remaining frame into memory."""
        frames = list(self.frames(width, height))
        logger.info(f"Preloaded {len(frames)} frames")
        return frames
