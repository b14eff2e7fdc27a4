"""
Catalog triage: fix-message classification, export readiness and fix logs.
"""

from .classifier import FALLBACK_LABEL, FIX_LABELS, FIX_RULES, classify_fix
from .grouper import group_fixes_by_type
from .issue import BlockingGroup, FixGroup, Issue, IssueMeta, ReadinessSummary, Severity
from .readiness import compute_readiness_summary
from .registry import DictIssueMetaRegistry, IssueMetaRegistry, default_registry
from .reporter import ReportGenerator
from .scoring import ScoreNote, ValidationBreakdown, build_score_notes, compute_validation_breakdown

__all__ = [
    "BlockingGroup",
    "DictIssueMetaRegistry",
    "FALLBACK_LABEL",
    "FIX_LABELS",
    "FIX_RULES",
    "FixGroup",
    "Issue",
    "IssueMeta",
    "IssueMetaRegistry",
    "ReadinessSummary",
    "ReportGenerator",
    "ScoreNote",
    "Severity",
    "ValidationBreakdown",
    "build_score_notes",
    "classify_fix",
    "compute_readiness_summary",
    "compute_validation_breakdown",
    "default_registry",
    "group_fixes_by_type",
]
