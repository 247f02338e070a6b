
"""Run the live focus overlay.

Usage:
    uvicorn api.main:app --reload  # (separate, for API)
    python scripts/live_overlay.py  # (to see camera overlay window)

Press 'q' to quit the window.
"""
from focus.config import Settings
from focus.monitor import run_live_overlay

if __name__ == '__main__':
    s = Settings()
    tracker = run_live_overlay(s)
    print(f"Gaze warnings: {tracker.warning_count}")
