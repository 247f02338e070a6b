# focus/monitor.py
"""
Live gaze monitoring.

GazeMonitor runs the per-tick pipeline (sample -> estimate -> advance) on a
single asyncio task at SAMPLE_INTERVAL cadence:
- ticks are synchronous and never overlap
- stop() cancels the task and releases the video source
- the source is released on every exit path, exactly once

run_live_overlay drives the same pipeline from an OpenCV window loop and
draws the gaze state on each displayed frame.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Callable, Optional

import cv2

from focus.attention import estimate_attention
from focus.config import Settings
from focus.gaze import GazeState, GazeTracker
from focus.models import AttentionSample, GazeWarning, LiveStatus
from focus.sampler import CameraSource, FrameReadError, FrameSampler, VideoSource
from focus.visual import center_window, draw_overlays

logger = logging.getLogger(__name__)


class GazeMonitor:
    """Periodic attention sampling for one interview."""
    def __init__(self,
                 settings: Settings,
                 source_factory: Optional[Callable[[], VideoSource]] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.s = settings
        self._source_factory = source_factory or (lambda: CameraSource(settings.CAMERA_INDEX).open())
        self._clock = clock
        self.sampler = FrameSampler(settings.FRAME_WIDTH, settings.FRAME_HEIGHT)
        self.tracker: Optional[GazeTracker] = None
        self._source: Optional[VideoSource] = None
        self._task: Optional[asyncio.Task] = None
        self._started_at: Optional[float] = None
        self._started_wall: Optional[float] = None

    # ---- lifecycle ----
    @property
    def started_at(self) -> Optional[float]:
        """Wall-clock start time (epoch seconds); tick timestamps use the monitor clock."""
        return self._started_wall

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Acquire the source and schedule the sampling task on the running loop."""
        if self.running:
            return
        loop = asyncio.get_running_loop()
        self._source = self._source_factory()
        self._started_at = self._clock()
        self._started_wall = time.time()
        self.tracker = GazeTracker(self.s, started_at=self._started_at)
        self._task = loop.create_task(self._run())
        logger.debug(f"[monitor] started interval={self.s.SAMPLE_INTERVAL}s")

    async def stop(self) -> Optional[GazeTracker]:
        """Cancel sampling, release the source, and hand back the finished tracker."""
        task = self._task
        if task is not None and not task.done():
            task.cancel()
            await asyncio.wait({task})
        elif task is not None and not task.cancelled() and task.exception() is not None:
            logger.warning(f"[monitor] sampling task had failed: {task.exception()!r}")
        self._release()
        logger.debug("[monitor] stopped")
        return self.tracker

    async def __aenter__(self) -> "GazeMonitor":
        self.start()
        return self

    async def __aexit__(self, *exc) -> None:
        await self.stop()

    def status(self) -> LiveStatus:
        tracker = self.tracker
        return LiveStatus(
            running=self.running,
            started_at=self._started_wall,
            looking_away=(tracker is not None and tracker.state is GazeState.LOOKING_AWAY),
            warning_count=(tracker.warning_count if tracker is not None else 0),
        )

    # ---- loop ----
    async def _run(self) -> None:
        try:
            while True:
                self.tick()
                await asyncio.sleep(self.s.SAMPLE_INTERVAL)
        except Exception:
            logger.exception("[monitor] sampling loop crashed")
            raise
        finally:
            self._release()

    def tick(self, now: Optional[float] = None) -> Optional[GazeWarning]:
        """
        One sampling step. Skips (returns None, session untouched) when the
        source is not ready or the frame cannot be read or estimated.
        """
        if self._source is None or self.tracker is None:
            return None
        now = self._clock() if now is None else now
        try:
            frame = self.sampler.sample(self._source)
            if frame is None:
                return None
            estimate = estimate_attention(frame, self.s)
        except Exception:
            logger.exception("[monitor] tick skipped; frame unreadable")
            return None
        return self.tracker.step(AttentionSample(timestamp=now, attentive=estimate.attentive))

    def _release(self) -> None:
        source, self._source = self._source, None
        if source is not None:
            source.release()
            logger.debug("[monitor] video source released")


# -----------------------------------------------------------------------------
# Live camera overlay (OpenCV window)
# -----------------------------------------------------------------------------
class _FrameTap:
    """Pass-through source that keeps the last full-size frame for display."""
    def __init__(self, source: VideoSource):
        self.source = source
        self.last = None

    def dimensions(self):
        return self.source.dimensions()

    def read(self):
        ok, frame = self.source.read()
        self.last = frame if ok else None
        return ok, frame

    def release(self) -> None:
        self.source.release()


def run_live_overlay(settings: Settings, camera_index: Optional[int] = None) -> GazeTracker:
    """
    Open the webcam, run the focus pipeline every SAMPLE_INTERVAL seconds and
    draw the center window, gaze state and warning count. Press 'q' to quit.

    Nothing is drawn until the camera reports decoded dimensions; the window
    closes when the camera stops delivering frames.
    Returns the tracker holding the final warning count and warning log.
    """
    cam_idx = settings.CAMERA_INDEX if camera_index is None else camera_index
    tap = _FrameTap(CameraSource(cam_idx).open())
    sampler = FrameSampler(settings.FRAME_WIDTH, settings.FRAME_HEIGHT)
    tracker = GazeTracker(settings, started_at=time.monotonic())
    next_t = 0.0

    try:
        while True:
            tnow = time.monotonic()
            frame = None
            if tnow >= next_t:
                try:
                    small = sampler.sample(tap)
                except FrameReadError:
                    logger.debug("[monitor] overlay stream ended")
                    break
                if small is not None:
                    frame = tap.last
                    try:
                        estimate = estimate_attention(small, settings)
                        tracker.step(AttentionSample(timestamp=tnow, attentive=estimate.attentive))
                    except Exception:
                        logger.exception("[monitor] overlay tick skipped")
                    next_t = tnow + settings.SAMPLE_INTERVAL
            else:
                ok, frame = tap.read()
                if not ok or frame is None:
                    break

            if frame is not None:
                annotated = draw_overlays(frame, tracker.state.value, tracker.warning_count,
                                          center_window(frame.shape, settings))
                cv2.imshow("Interview Focus (q to quit)", annotated)
            if (cv2.waitKey(1) & 0xFF) == ord("q"):
                break
    finally:
        tap.release()
        cv2.destroyAllWindows()

    return tracker
