"""
Interview scoring heuristics.
"""
from __future__ import annotations
import logging
import math
import re
from typing import List, Optional

from focus.config import ScoringWeights
from focus.models import EvaluationResult

logger = logging.getLogger(__name__)

TECHNICAL_KEYWORDS = frozenset({
    "algorithm", "database", "api", "framework", "programming", "code",
    "system", "architecture", "design", "development", "testing", "security",
    "javascript", "react", "node", "sql", "python", "java", "git", "aws",
})

COMMUNICATION_KEYWORDS = frozenset({
    "experience", "team", "project", "challenge", "solution", "learn",
    "collaborate", "communicate", "problem", "responsibility", "leadership",
    "mentor", "feedback", "conflict", "stakeholder", "presentation",
})

NO_VALID_ANSWERS = "No valid answers provided. Please ensure you provide detailed responses."

_NON_WORD = re.compile(r"[^\w]")


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _clean_words(answer: str) -> List[str]:
    return [_NON_WORD.sub("", w) for w in answer.lower().split()]


def _overall_feedback(overall: int) -> str:
    if overall >= 80:
        return "Excellent performance! You demonstrated strong communication and technical skills."
    if overall >= 70:
        return "Good performance with room for improvement in some areas."
    if overall >= 60:
        return "Fair performance. Consider practicing interview skills and technical knowledge."
    return "Needs improvement. Focus on communication skills and technical preparation."


def evaluate_interview(answers: List[str],
                       warning_count: int,
                       total_questions: int,
                       weights: Optional[ScoringWeights] = None) -> EvaluationResult:
    """
    Combine answer transcripts and gaze warnings into a 0..100 evaluation.

    Sub-scores:
      communication = base + communication keyword hits + completeness bonus
      technical     = base + technical keyword hits + completeness bonus
      confidence    = base + word volume + completeness bonus
      focus         = 100 - warnings * penalty (floored at 0)

    Overall is the weighted sum (0.30 / 0.25 / 0.25 / 0.20) of the unrounded
    sub-scores, rounded half up. An interview without any valid answer scores
    0 everywhere except focus.
    """
    w = weights or ScoringWeights()
    if warning_count < 0:
        raise ValueError(f"warning_count must be >= 0, got {warning_count}")

    valid = [a for a in answers if len(a.strip()) > w.MIN_ANSWER_CHARS]
    completeness = len(valid) / total_questions if total_questions > 0 else 0.0
    focus = max(0.0, 100.0 - warning_count * w.PENALTY_PER_WARNING)

    if not valid:
        logger.debug(f"[scoring] no valid answers out of {len(answers)}")
        return EvaluationResult(
            overall_score=0,
            communication_score=0,
            technical_score=0,
            confidence_score=0,
            focus_score=round_half_up(focus),
            feedback=[NO_VALID_ANSWERS],
        )

    technical_hits = 0
    communication_hits = 0
    total_words = 0
    for answer in valid:
        words = _clean_words(answer)
        total_words += len(words)
        for word in words:
            if word in TECHNICAL_KEYWORDS:
                technical_hits += 1
            if word in COMMUNICATION_KEYWORDS:
                communication_hits += 1

    communication = min(100.0, w.COMMUNICATION_BASE
                        + communication_hits * w.COMMUNICATION_PER_MATCH
                        + completeness * w.COMMUNICATION_COMPLETENESS)
    technical = min(100.0, w.TECHNICAL_BASE
                    + technical_hits * w.TECHNICAL_PER_MATCH
                    + completeness * w.TECHNICAL_COMPLETENESS)
    confidence = min(100.0, w.CONFIDENCE_BASE
                     + total_words / w.CONFIDENCE_WORDS_DIVISOR
                     + completeness * w.CONFIDENCE_COMPLETENESS)

    overall = round_half_up(
        communication * w.WEIGHT_COMMUNICATION +
        technical * w.WEIGHT_TECHNICAL +
        confidence * w.WEIGHT_CONFIDENCE +
        focus * w.WEIGHT_FOCUS
    )

    feedback = [_overall_feedback(overall)]
    if warning_count > 3:
        feedback.append("Try to maintain better eye contact during interviews.")
    if completeness < 0.8:
        feedback.append("Provide more detailed answers to showcase your knowledge and experience.")
    if technical_hits < 3:
        feedback.append("Include more technical details relevant to the role you're applying for.")

    logger.debug(f"[scoring] valid={len(valid)}/{total_questions} tech={technical_hits} "
                 f"comm={communication_hits} words={total_words} overall={overall}")
    return EvaluationResult(
        overall_score=overall,
        communication_score=round_half_up(communication),
        technical_score=round_half_up(technical),
        confidence_score=round_half_up(confidence),
        focus_score=round_half_up(focus),
        feedback=feedback,
    )


def evaluate_answer(answer: str) -> int:
    """Score a single answer 0..100 from its length and technical vocabulary."""
    if not answer or len(answer.strip()) < 10:
        return 0
    words = _clean_words(answer)
    score = min(80, len(words) * 2)
    hits = sum(1 for word in words if word in TECHNICAL_KEYWORDS)
    score += min(20, hits * 5)
    return min(100, score)
