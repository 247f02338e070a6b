"""
Configuration for the focus monitor and scoring.
"""
from pydantic import BaseModel
import os


class ScoringWeights(BaseModel):
    """
    Constants for one scoring run. Held fixed across a run for reproducibility.
    """
    PENALTY_PER_WARNING: float = 8.0
    MIN_ANSWER_CHARS: int = 10

    COMMUNICATION_BASE: float = 40.0
    COMMUNICATION_PER_MATCH: float = 6.0
    COMMUNICATION_COMPLETENESS: float = 30.0

    TECHNICAL_BASE: float = 30.0
    TECHNICAL_PER_MATCH: float = 10.0
    TECHNICAL_COMPLETENESS: float = 35.0

    CONFIDENCE_BASE: float = 50.0
    CONFIDENCE_WORDS_DIVISOR: float = 30.0
    CONFIDENCE_COMPLETENESS: float = 25.0

    WEIGHT_COMMUNICATION: float = 0.30
    WEIGHT_TECHNICAL: float = 0.25
    WEIGHT_CONFIDENCE: float = 0.25
    WEIGHT_FOCUS: float = 0.20


class Settings(BaseModel):
    """
    Runtime settings with environment-variable overrides.
    """
    CAMERA_INDEX: int = int(os.getenv("CAMERA_INDEX", "0"))
    SAMPLE_INTERVAL: float = float(os.getenv("SAMPLE_INTERVAL", "1.0"))

    # Offscreen render target
    FRAME_WIDTH: int = int(os.getenv("FRAME_WIDTH", "160"))
    FRAME_HEIGHT: int = int(os.getenv("FRAME_HEIGHT", "120"))

    # Brightness heuristic (tune D1/D2 together)
    CENTER_RADIUS: int = int(os.getenv("CENTER_RADIUS", "35"))
    PIXEL_STRIDE: int = int(os.getenv("PIXEL_STRIDE", "3"))
    BRIGHTNESS_THRESHOLD: float = float(os.getenv("BRIGHTNESS_THRESHOLD", "80"))
    CENTER_BRIGHTNESS_THRESHOLD: float = float(os.getenv("CENTER_BRIGHTNESS_THRESHOLD", "100"))
    MIN_BRIGHTNESS_DENSITY: float = float(os.getenv("MIN_BRIGHTNESS_DENSITY", "0.12"))
    MIN_CENTER_DENSITY: float = float(os.getenv("MIN_CENTER_DENSITY", "0.08"))

    # Debounce
    GRACE_PERIOD: float = float(os.getenv("GRACE_PERIOD", "3.0"))
    WARNING_COOLDOWN: float = float(os.getenv("WARNING_COOLDOWN", "5.0"))

    PENALTY_PER_WARNING: float = float(os.getenv("PENALTY_PER_WARNING", "8"))

    def __init__(self, **data):
        super().__init__(**data)
        # Clamp values that would stall the loop or the pixel scan
        object.__setattr__(self, "PIXEL_STRIDE", max(1, int(self.PIXEL_STRIDE)))
        object.__setattr__(self, "SAMPLE_INTERVAL", max(0.05, float(self.SAMPLE_INTERVAL)))
        object.__setattr__(self, "FRAME_WIDTH", max(1, int(self.FRAME_WIDTH)))
        object.__setattr__(self, "FRAME_HEIGHT", max(1, int(self.FRAME_HEIGHT)))
        object.__setattr__(self, "CENTER_RADIUS", max(0, int(self.CENTER_RADIUS)))

    def scoring_weights(self) -> ScoringWeights:
        return ScoringWeights(PENALTY_PER_WARNING=self.PENALTY_PER_WARNING)
