"""
Pydantic data models for the focus monitor and API IO.
"""
from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Literal


class AttentionSample(BaseModel):
    timestamp: float
    attentive: bool


class AttentionEstimate(BaseModel):
    attentive: bool
    brightness_density: float = 0.0
    center_density: float = 0.0


class GazeSession(BaseModel):
    """State of one interview's gaze tracking. Transitions return new instances."""
    model_config = ConfigDict(frozen=True)

    currently_looking_away: bool = False
    look_away_started_at: Optional[float] = None
    warning_count: int = Field(default=0, ge=0)
    last_warning_at: Optional[float] = None


class GazeWarning(BaseModel):
    timestamp_offset: float
    warning_type: Literal["looking_away"] = "looking_away"


class EvaluationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall_score: int
    communication_score: int
    technical_score: int
    confidence_score: int
    focus_score: int
    feedback: List[str] = Field(default_factory=list)


class InterviewRecord(BaseModel):
    """Everything the persistence layer stores for a finished interview."""
    evaluation: EvaluationResult
    gaze_warnings: int
    warning_log: List[GazeWarning] = Field(default_factory=list)
    answer_scores: List[int] = Field(default_factory=list)
    completion_time: float


# live / API models


class LiveStatus(BaseModel):
    running: bool
    started_at: float | None = None
    looking_away: bool = False
    warning_count: int = 0


class EvaluateRequest(BaseModel):
    answers: List[str] = Field(default_factory=list)
    warning_count: int = Field(default=0, ge=0)
    total_questions: int = Field(default=0, ge=0)


class AnswerRequest(BaseModel):
    answer: str


class InterviewCompleteRequest(BaseModel):
    answers: List[str] = Field(default_factory=list)
    total_questions: int = Field(default=0, ge=0)
