"""Triage service: wraps catalog_triage and maps to API models."""

from deps import Any, List, Optional, Tuple, logging
from ..schemas import (
    BlockingGroupOut,
    FixGroupOut,
    FixGroupsResponse,
    IssueIn,
    ReadinessResponse,
    ScoreNoteOut,
    ScoreResponse,
)

from catalog_triage import (
    Issue,
    ReportGenerator,
    Severity,
    build_score_notes,
    compute_readiness_summary,
    compute_validation_breakdown,
    default_registry,
    group_fixes_by_type,
)
from catalog_triage.issue import ReadinessSummary
from catalog_triage.scoring import ScoreNote, ValidationBreakdown

logger = logging.getLogger(__name__)


def _issue_from_in(i: IssueIn) -> Issue:
    return Issue(
        code=i.code,
        message=i.message,
        severity=Severity(i.severity),
        row_index=i.row_index if i.row_index is not None else -1,
        column=i.column,
        suggestion=i.suggestion or "",
    )


def readiness_to_out(summary: ReadinessSummary) -> ReadinessResponse:
    return ReadinessResponse(
        blocking_errors=summary.blocking_errors,
        auto_fixable_blocking_errors=summary.auto_fixable_blocking_errors,
        blocking_groups=[
            BlockingGroupOut(
                code=g.code,
                title=g.title,
                count=g.count,
                first_row_index=g.first_row_index,
                auto_fixable_count=g.auto_fixable_count,
            )
            for g in summary.blocking_groups
        ],
    )


class TriageService:
    """Wraps the triage engine for use by the API."""

    def __init__(self, registry: Any = None):
        self.registry = default_registry if registry is None else registry

    def readiness(self, issues: List[IssueIn], format_id: Optional[str] = None) -> ReadinessSummary:
        """Blocking-error summary for the given issues."""
        summary = compute_readiness_summary(
            [_issue_from_in(i) for i in issues], format_id, registry=self.registry
        )
        logger.info(
            "Readiness: %d issues, %d blocking, %d auto-fixable (format=%s)",
            len(issues), summary.blocking_errors, summary.auto_fixable_blocking_errors, format_id or "-",
        )
        return summary

    def breakdown_with_notes(
        self, issues: List[IssueIn], format_id: Optional[str] = None
    ) -> Tuple[ValidationBreakdown, List[ScoreNote]]:
        core_issues = [_issue_from_in(i) for i in issues]
        breakdown = compute_validation_breakdown(core_issues, format_id, registry=self.registry)
        notes = build_score_notes(breakdown, core_issues, format_id, registry=self.registry)
        return breakdown, notes

    def score(self, issues: List[IssueIn], format_id: Optional[str] = None) -> ScoreResponse:
        """Score breakdown plus per-category notes."""
        breakdown, notes = self.breakdown_with_notes(issues, format_id)
        return ScoreResponse(
            score=breakdown.score,
            categories=breakdown.categories,
            errors=breakdown.errors,
            warnings=breakdown.warnings,
            infos=breakdown.infos,
            blocking_errors=breakdown.blocking_errors,
            ready=breakdown.ready,
            label=breakdown.label,
            notes=[ScoreNoteOut(key=n.key, label=n.label, score=n.score, note=n.note) for n in notes],
        )

    def group_fixes(self, fixes: List[Optional[str]]) -> FixGroupsResponse:
        groups = group_fixes_by_type(fixes)
        return FixGroupsResponse(
            total=len(fixes),
            groups=[FixGroupOut(type=g.type, count=g.count, sample=g.sample) for g in groups],
        )

    def fixes_log(
        self,
        fixes: List[Optional[str]],
        file_name: Optional[str] = None,
        format_id: Optional[str] = None,
    ) -> str:
        """Plain-text auto-fix log. Blank names render as "unknown"."""
        return ReportGenerator.generate_fixes_log(
            fixes,
            file_name=(file_name or "").strip() or None,
            format_id=(format_id or "").strip() or None,
        )

    def format_ids(self) -> List[str]:
        if hasattr(self.registry, "format_ids"):
            return self.registry.format_ids()
        return []
