"""Readiness and score routes."""

from fastapi import APIRouter

from ..schemas import IssuesRequest, ReadinessResponse, ScoreResponse
from ..services import TriageService
from ..services.triage import readiness_to_out

router = APIRouter()
triage_svc = TriageService()


@router.post("/readiness", response_model=ReadinessResponse)
def readiness(req: IssuesRequest) -> ReadinessResponse:
    """Blocking errors grouped by issue code, with export-readiness counters."""
    summary = triage_svc.readiness(req.issues, req.format_id)
    return readiness_to_out(summary)


@router.post("/score", response_model=ScoreResponse)
def score(req: IssuesRequest) -> ScoreResponse:
    """Weighted validation score with per-category notes."""
    return triage_svc.score(req.issues, req.format_id)
