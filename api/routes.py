"""
REST endpoints for scoring and live focus monitoring.
"""
from fastapi import APIRouter, HTTPException
import logging
import time

from focus.config import Settings
from focus.models import (AnswerRequest, EvaluateRequest, EvaluationResult, InterviewCompleteRequest,
                          InterviewRecord, LiveStatus)
from focus.monitor import GazeMonitor
from focus.pipeline import build_interview_record
from focus.scoring import evaluate_answer, evaluate_interview


router = APIRouter()
settings = Settings()
logger = logging.getLogger(__name__)

live_session: dict = {"monitor": None}


def make_monitor() -> GazeMonitor:
    return GazeMonitor(settings)


@router.post("/evaluate", response_model=EvaluationResult)
async def evaluate(req: EvaluateRequest):
    """
    Score a finished interview from its answers and gaze warning count.

    Args:
        req: answers, warning_count, total_questions

    Returns:
        EvaluationResult
    """
    logger.debug(f"[api] /evaluate answers={len(req.answers)} warnings={req.warning_count}")
    try:
        return evaluate_interview(req.answers, req.warning_count, req.total_questions,
                                  settings.scoring_weights())
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/evaluate/answer")
async def evaluate_single_answer(req: AnswerRequest):
    return {"score": evaluate_answer(req.answer)}


@router.post("/live/start")
async def live_start():
    monitor = live_session["monitor"]
    if monitor is not None and monitor.running:
        return {"status": "already_running"}
    monitor = make_monitor()
    try:
        monitor.start()
    except RuntimeError as e:
        logger.exception("[api] live monitor failed to start")
        raise HTTPException(status_code=503, detail=str(e))
    live_session["monitor"] = monitor
    return {"status": "started"}


@router.get("/live/status", response_model=LiveStatus)
async def live_status():
    monitor = live_session["monitor"]
    if monitor is None:
        return LiveStatus(running=False)
    return monitor.status()


@router.post("/live/stop")
async def live_stop():
    monitor = live_session["monitor"]
    if monitor is None or not monitor.running:
        return {"status": "not_running"}
    tracker = await monitor.stop()
    final = monitor.status()
    return {
        "status": "stopped",
        "warning_count": final.warning_count,
        "warning_log": [w.model_dump() for w in (tracker.warnings if tracker else [])],
    }


@router.post("/interview/complete", response_model=InterviewRecord)
async def interview_complete(req: InterviewCompleteRequest):
    """
    Finish the interview: stop the live monitor (if any), score the answers
    against its gaze warnings and return the record to persist.

    Args:
        req: answers, total_questions

    Returns:
        InterviewRecord
    """
    monitor = live_session["monitor"]
    finished_at = time.time()
    tracker = None
    started_at = finished_at
    if monitor is not None:
        tracker = await monitor.stop()
        started_at = monitor.started_at or finished_at
    live_session["monitor"] = None

    logger.debug(f"[api] /interview/complete answers={len(req.answers)} "
                 f"warnings={tracker.warning_count if tracker else 0}")
    try:
        return build_interview_record(req.answers, req.total_questions, tracker,
                                      started_at=started_at, finished_at=finished_at,
                                      settings=settings)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
