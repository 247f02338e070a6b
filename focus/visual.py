"""Overlay drawing for the live focus window.

- center_window: map the estimator's center square onto a full-size frame
- draw_overlays: draw the center window, gaze state and warning count
"""
from __future__ import annotations
import cv2
import numpy as np
from typing import Dict, Optional, Tuple

from focus.config import Settings

FOCUSED_COLOR = (0, 255, 0)
AWAY_COLOR = (0, 0, 255)


def center_window(frame_shape: Tuple[int, ...], settings: Settings) -> Dict[str, int]:
    """Center square used by the estimator, scaled from sampler to frame pixels."""
    h, w = frame_shape[:2]
    sx = w / float(settings.FRAME_WIDTH)
    sy = h / float(settings.FRAME_HEIGHT)
    rx = int(settings.CENTER_RADIUS * sx)
    ry = int(settings.CENTER_RADIUS * sy)
    cx, cy = w // 2, h // 2
    x0, y0 = max(0, cx - rx), max(0, cy - ry)
    x1, y1 = min(w, cx + rx), min(h, cy + ry)
    return {"x": x0, "y": y0, "w": x1 - x0, "h": y1 - y0}


def draw_overlays(frame: np.ndarray,
                  state: str,
                  warning_count: int,
                  region: Optional[Dict[str, int]] = None) -> np.ndarray:
    """Draw gaze status on a copy of the frame.

    Args:
        frame: BGR image
        state: "FOCUSED" or "LOOKING_AWAY"
        warning_count: warnings so far this session
        region: optional {x,y,w,h} center window

    Returns:
        Annotated copy of the frame
    """
    out = frame.copy()
    h, w = out.shape[:2]
    color = AWAY_COLOR if state == "LOOKING_AWAY" else FOCUSED_COLOR

    if region:
        x = max(0, min(int(region.get("x", 0)), w - 1))
        y = max(0, min(int(region.get("y", 0)), h - 1))
        rw = max(0, min(int(region.get("w", 0)), w - x))
        rh = max(0, min(int(region.get("h", 0)), h - y))
        cv2.rectangle(out, (x, y), (x + rw, y + rh), color, 2)

    cv2.putText(out, state, (10, 30), cv2.FONT_HERSHEY_SIMPLEX, 1.0, color, 2, cv2.LINE_AA)
    cv2.putText(out, f"Warnings: {warning_count}", (10, 60),
                cv2.FONT_HERSHEY_SIMPLEX, 0.7, color, 2, cv2.LINE_AA)
    return out
