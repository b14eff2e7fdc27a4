"""Markdown readiness report route."""

from fastapi import APIRouter
from fastapi.responses import Response

from ..report_formatter import format_readiness_report
from ..schemas import IssuesRequest
from ..services import TriageService

router = APIRouter()
triage_svc = TriageService()


@router.post("/report")
def report(req: IssuesRequest) -> Response:
    """Readiness summary and category scores as Markdown."""
    summary = triage_svc.readiness(req.issues, req.format_id)
    breakdown, notes = triage_svc.breakdown_with_notes(req.issues, req.format_id)
    body = format_readiness_report(
        summary,
        breakdown,
        notes,
        file_name=(req.file_name or "").strip() or None,
        format_id=(req.format_id or "").strip() or None,
        registry=triage_svc.registry,
    )
    return Response(content=body, media_type="text/markdown; charset=utf-8")
