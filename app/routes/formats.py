"""Known export formats."""

from fastapi import APIRouter

from ..schemas import FormatsResponse
from ..services import TriageService

router = APIRouter()
triage_svc = TriageService()


@router.get("/formats", response_model=FormatsResponse)
def formats() -> FormatsResponse:
    """Format ids with dedicated issue metadata."""
    return FormatsResponse(formats=triage_svc.format_ids())
