
from focus.gaze import GazeTracker
from focus.models import AttentionSample
from focus.pipeline import build_interview_record


def test_build_interview_record(settings):
    tracker = GazeTracker(settings, started_at=0.0)
    for i in range(9):
        tracker.step(AttentionSample(timestamp=i * 0.5, attentive=False))
    assert tracker.warning_count == 1

    answers = ["I designed the database schema for our team project", "short"]
    rec = build_interview_record(answers, 2, tracker, started_at=10.0, finished_at=130.25,
                                 settings=settings)
    assert rec.gaze_warnings == 1
    assert rec.evaluation.focus_score == 92
    assert len(rec.warning_log) == 1 and rec.warning_log[0].timestamp_offset == 3.5
    assert rec.answer_scores[1] == 0 and rec.answer_scores[0] > 0
    assert rec.completion_time == 120.25


def test_build_interview_record_without_tracker(settings):
    rec = build_interview_record([], 5, None, started_at=0.0, finished_at=1.0, settings=settings)
    assert rec.gaze_warnings == 0
    assert rec.warning_log == []
    assert rec.evaluation.overall_score == 0
    assert rec.evaluation.focus_score == 100
