"""
Gaze state machine: debounce per-frame attention verdicts into warnings.
"""
from __future__ import annotations
import enum
import logging
from typing import List, Optional, Tuple

from focus.config import Settings
from focus.models import AttentionSample, GazeSession, GazeWarning

logger = logging.getLogger(__name__)


class GazeState(str, enum.Enum):
    FOCUSED = "FOCUSED"
    LOOKING_AWAY = "LOOKING_AWAY"


def state_of(session: GazeSession) -> GazeState:
    return GazeState.LOOKING_AWAY if session.currently_looking_away else GazeState.FOCUSED


def advance(session: GazeSession,
            sample: AttentionSample,
            settings: Settings) -> Tuple[GazeSession, bool]:
    """
    Apply one attention sample to the session.

    - attentive: back to FOCUSED, look-away start cleared, warnings kept
    - not attentive while FOCUSED: enter LOOKING_AWAY at sample time
    - not attentive while LOOKING_AWAY: fire a warning once the grace period
      has passed and the previous warning is older than the cooldown

    Returns:
        (new session, whether a warning fired on this sample)
    """
    now = sample.timestamp

    if sample.attentive:
        if not session.currently_looking_away:
            return session, False
        return session.model_copy(update={
            "currently_looking_away": False,
            "look_away_started_at": None,
        }), False

    if not session.currently_looking_away:
        session = session.model_copy(update={
            "currently_looking_away": True,
            "look_away_started_at": now,
        })

    away_for = now - session.look_away_started_at
    cooled = (session.last_warning_at is None
              or now - session.last_warning_at > settings.WARNING_COOLDOWN)
    if away_for > settings.GRACE_PERIOD and cooled:
        return session.model_copy(update={
            "warning_count": session.warning_count + 1,
            "last_warning_at": now,
        }), True
    return session, False


class GazeTracker:
    """Owns the GazeSession for one interview and logs every fired warning."""
    def __init__(self, settings: Settings, started_at: float = 0.0):
        self.s = settings
        self.started_at = float(started_at)
        self.session = GazeSession()
        self.warnings: List[GazeWarning] = []

    @property
    def state(self) -> GazeState:
        return state_of(self.session)

    @property
    def warning_count(self) -> int:
        return self.session.warning_count

    def step(self, sample: AttentionSample) -> Optional[GazeWarning]:
        """Feed one sample; return the warning it raised, if any."""
        self.session, fired = advance(self.session, sample, self.s)
        if not fired:
            return None
        warning = GazeWarning(timestamp_offset=round(sample.timestamp - self.started_at, 3))
        self.warnings.append(warning)
        logger.info(f"[gaze] warning {self.session.warning_count} at +{warning.timestamp_offset}s")
        return warning
