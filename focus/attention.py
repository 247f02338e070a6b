"""
Brightness-density attention heuristic.

A cheap stand-in for a face detector: a frame counts as attentive when enough
of it is lit AND the center window holds a dense patch of brighter pixels,
i.e. "someone well-lit sits in the middle of the picture". Both conditions
are required; a single global threshold fires on bright backgrounds.
"""
from __future__ import annotations
import numpy as np

from focus.config import Settings
from focus.models import AttentionEstimate


def _center_bounds(size: int, radius: int) -> tuple[int, int]:
    c = size // 2
    return max(0, c - radius), min(size, c + radius)


def estimate_attention(frame: np.ndarray, settings: Settings) -> AttentionEstimate:
    """
    Classify one frame as attentive / not attentive.

    Args:
        frame: HxWxC pixel array (C >= 3), channel values 0..255
        settings: thresholds, stride and center radius

    Returns:
        AttentionEstimate with the verdict and both densities.

    Raises:
        ValueError: frame is not an HxWxC array with at least 3 channels.
    """
    if frame is None or frame.ndim != 3 or frame.shape[2] < 3:
        raise ValueError(f"expected HxWx3 frame, got shape {getattr(frame, 'shape', None)}")

    height, width = frame.shape[:2]
    step = settings.PIXEL_STRIDE

    sampled = frame[::step, ::step, :3].astype(np.float32)
    brightness = sampled.mean(axis=2)
    total = brightness.size
    bright_pixels = int(np.count_nonzero(brightness > settings.BRIGHTNESS_THRESHOLD))

    # sampled rows/cols keep their original pixel coordinates
    ys = np.arange(0, height, step)
    xs = np.arange(0, width, step)
    y0, y1 = _center_bounds(height, settings.CENTER_RADIUS)
    x0, x1 = _center_bounds(width, settings.CENTER_RADIUS)
    row_mask = (ys >= y0) & (ys < y1)
    col_mask = (xs >= x0) & (xs < x1)
    center = brightness[np.ix_(row_mask, col_mask)]
    center_total = center.size
    center_bright = int(np.count_nonzero(center > settings.CENTER_BRIGHTNESS_THRESHOLD))

    brightness_density = bright_pixels / total if total else 0.0
    center_density = center_bright / center_total if center_total else 0.0

    attentive = (brightness_density > settings.MIN_BRIGHTNESS_DENSITY
                 and center_density > settings.MIN_CENTER_DENSITY)
    return AttentionEstimate(
        attentive=attentive,
        brightness_density=round(brightness_density, 4),
        center_density=round(center_density, 4),
    )
