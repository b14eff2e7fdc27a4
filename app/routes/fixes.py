"""Fix grouping and fix log routes."""

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from ..config import get_max_fixes
from ..schemas import FixesRequest, FixGroupsResponse
from ..services import TriageService

router = APIRouter(prefix="/fixes")
triage_svc = TriageService()


def _check_size(req: FixesRequest) -> None:
    limit = get_max_fixes()
    if len(req.fixes) > limit:
        raise HTTPException(413, f"Too many fix messages: {len(req.fixes)} (limit {limit})")


@router.post("/groups", response_model=FixGroupsResponse)
def fix_groups(req: FixesRequest) -> FixGroupsResponse:
    """Applied fixes grouped by type, largest group first."""
    _check_size(req)
    return triage_svc.group_fixes(req.fixes)


@router.post("/log", response_class=PlainTextResponse)
def fixes_log(req: FixesRequest) -> str:
    """Plain-text auto-fix log."""
    _check_size(req)
    return triage_svc.fixes_log(req.fixes, file_name=req.file_name, format_id=req.format_id)
