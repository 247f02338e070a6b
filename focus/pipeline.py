# focus/pipeline.py
from __future__ import annotations
from typing import List, Optional
import logging

from focus.config import Settings
from focus.gaze import GazeTracker
from focus.models import InterviewRecord
from focus.scoring import evaluate_answer, evaluate_interview

logger = logging.getLogger(__name__)


def build_interview_record(answers: List[str],
                           total_questions: int,
                           tracker: Optional[GazeTracker],
                           started_at: float,
                           finished_at: float,
                           settings: Settings) -> InterviewRecord:
    """
    Final scoring step: evaluate the answers against the session's warnings and
    package everything the persistence layer stores for the interview.

    A missing tracker (camera never started) counts as zero warnings.
    """
    warning_count = tracker.warning_count if tracker is not None else 0
    warning_log = list(tracker.warnings) if tracker is not None else []
    logger.debug(f"[pipeline] scoring answers={len(answers)} questions={total_questions} warnings={warning_count}")

    evaluation = evaluate_interview(answers, warning_count, total_questions, settings.scoring_weights())

    answer_scores = [evaluate_answer(a) for a in answers]

    record = InterviewRecord(
        evaluation=evaluation,
        gaze_warnings=warning_count,
        warning_log=warning_log,
        answer_scores=answer_scores,
        completion_time=round(max(0.0, finished_at - started_at), 2),
    )
    logger.debug(f"[pipeline] record built overall={evaluation.overall_score}")
    return record
