
import pytest
from pydantic import ValidationError
from focus.models import (AttentionSample, GazeSession, GazeWarning, EvaluationResult,
                          InterviewRecord, EvaluateRequest)

def test_models():
    ev = EvaluationResult(overall_score=70, communication_score=70, technical_score=60,
                          confidence_score=75, focus_score=84, feedback=["ok"])
    rec = InterviewRecord(evaluation=ev, gaze_warnings=2,
                          warning_log=[GazeWarning(timestamp_offset=3.5)], completion_time=120.0)
    assert rec.warning_log[0].warning_type == "looking_away"
    assert AttentionSample(timestamp=1.0, attentive=False).attentive is False

def test_gaze_session_is_immutable():
    s = GazeSession()
    assert s.currently_looking_away is False and s.look_away_started_at is None
    with pytest.raises(ValidationError):
        s.warning_count = 3

def test_negative_counts_rejected():
    with pytest.raises(ValidationError):
        GazeSession(warning_count=-1)
    with pytest.raises(ValidationError):
        EvaluateRequest(answers=[], warning_count=-2, total_questions=5)
