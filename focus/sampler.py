"""
Frame capture: camera wrapper and the downsizing frame sampler.
"""
from __future__ import annotations
import logging
from typing import Optional, Protocol, Tuple

import cv2
import numpy as np

logger = logging.getLogger(__name__)


class FrameReadError(RuntimeError):
    """The source reported a size but no pixels could be read this tick."""


class VideoSource(Protocol):
    def dimensions(self) -> Tuple[int, int]: ...
    def read(self) -> Tuple[bool, Optional[np.ndarray]]: ...
    def release(self) -> None: ...


class CameraSource:
    """
    Local webcam via cv2.VideoCapture.

    release() is idempotent; the capture is closed at most once.
    """
    def __init__(self, camera_index: int = 0):
        self.camera_index = camera_index
        self._cap = None

    def open(self) -> "CameraSource":
        cap = cv2.VideoCapture(self.camera_index)
        if not cap.isOpened():
            cap.release()
            raise RuntimeError(f"Could not open camera index {self.camera_index}")
        self._cap = cap
        logger.debug(f"[sampler] camera {self.camera_index} opened")
        return self

    @property
    def is_open(self) -> bool:
        return self._cap is not None

    def dimensions(self) -> Tuple[int, int]:
        if self._cap is None:
            return 0, 0
        w = int(self._cap.get(cv2.CAP_PROP_FRAME_WIDTH) or 0)
        h = int(self._cap.get(cv2.CAP_PROP_FRAME_HEIGHT) or 0)
        return w, h

    def read(self) -> Tuple[bool, Optional[np.ndarray]]:
        if self._cap is None:
            return False, None
        return self._cap.read()

    def release(self) -> None:
        if self._cap is None:
            return
        self._cap.release()
        self._cap = None
        logger.debug(f"[sampler] camera {self.camera_index} released")


class FrameSampler:
    """Resize live frames into one reusable offscreen buffer."""
    def __init__(self, width: int = 160, height: int = 120):
        self.size = (int(width), int(height))
        self._target = np.zeros((int(height), int(width), 3), dtype=np.uint8)

    def sample(self, source: VideoSource) -> Optional[np.ndarray]:
        """
        Grab the current frame from `source`, downsized to the sampler resolution.

        Returns None while the source has no decoded dimensions yet.
        Raises FrameReadError when pixels cannot be read.
        The returned array is the shared buffer; it is overwritten next tick.
        """
        w, h = source.dimensions()
        if w <= 0 or h <= 0:
            return None

        try:
            ok, frame = source.read()
        except Exception as e:
            raise FrameReadError(f"read failed: {e}") from e
        if not ok or frame is None:
            raise FrameReadError("source returned no frame")
        return self.downsize(frame)

    def downsize(self, frame: np.ndarray) -> np.ndarray:
        """Resize an already-read frame into the shared buffer."""
        try:
            if frame.ndim == 2:
                frame = cv2.cvtColor(frame, cv2.COLOR_GRAY2BGR)
            elif frame.shape[2] == 4:
                frame = cv2.cvtColor(frame, cv2.COLOR_BGRA2BGR)
            self._target = cv2.resize(frame, self.size, dst=self._target, interpolation=cv2.INTER_AREA)
        except cv2.error as e:
            raise FrameReadError(f"resize failed: {e}") from e
        return self._target
