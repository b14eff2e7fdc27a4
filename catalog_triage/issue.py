"""
Issue and triage data models for the catalog triage engine.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Severity(Enum):
    """Issue severity levels."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class Issue:
    """A row or file problem reported by the validation engine.

    row_index is 0-based; -1 marks a file-level issue.
    """
    code: Optional[str]
    message: str
    severity: Severity
    row_index: int = -1
    column: str = ""
    suggestion: str = ""


@dataclass(frozen=True)
class IssueMeta:
    """Registry metadata for one issue code. None means "not stated"."""
    title: Optional[str] = None
    blocking: Optional[bool] = None
    auto_fixable: Optional[bool] = None
    category: Optional[str] = None
    explanation: Optional[str] = None
    why_platform_cares: Optional[str] = None
    how_to_fix: Optional[str] = None


@dataclass
class FixGroup:
    """Applied fixes sharing one category label."""
    type: str
    count: int
    sample: str


@dataclass
class BlockingGroup:
    """Blocking errors aggregated under one issue code."""
    code: str
    title: str
    count: int
    first_row_index: int
    auto_fixable_count: int


@dataclass
class ReadinessSummary:
    """Export readiness counters plus per-code blocking groups."""
    blocking_errors: int = 0
    auto_fixable_blocking_errors: int = 0
    blocking_groups: List[BlockingGroup] = field(default_factory=list)
