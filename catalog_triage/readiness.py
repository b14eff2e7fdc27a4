"""
Export readiness: blocking-error aggregation per issue code.
"""

import logging
from typing import Any, Dict, Iterable, Optional

from .issue import BlockingGroup, Issue, ReadinessSummary, Severity
from .registry import default_registry

logger = logging.getLogger(__name__)

UNKNOWN_CODE = "unknown"


def is_error(severity: Any) -> bool:
    """True for Severity.ERROR or the plain string "error"."""
    if isinstance(severity, Severity):
        return severity is Severity.ERROR
    return severity == Severity.ERROR.value


def row_index_of(issue: Issue) -> int:
    """Row index as an int; anything that is not an integer counts as file-level."""
    row = getattr(issue, "row_index", -1)
    if isinstance(row, bool) or not isinstance(row, int):
        return -1
    return row


def compute_readiness_summary(
    issues: Optional[Iterable[Issue]],
    format_id: Optional[str] = None,
    registry: Any = None,
) -> ReadinessSummary:
    """Count blocking errors and group them by issue code.

    Errors block unless the registry marks the code non-blocking. An error counts
    as auto-fixable only when the registry says so and the issue is row-scoped.
    Groups are ordered by count, highest first; equal counts keep first-seen order.
    """
    if registry is None:
        registry = default_registry
    summary = ReadinessSummary()
    groups: Dict[str, BlockingGroup] = {}

    for issue in issues or ():
        if not is_error(getattr(issue, "severity", None)):
            continue

        code = getattr(issue, "code", None)
        meta = registry.lookup(format_id, code)
        blocking = True if meta is None or meta.blocking is None else meta.blocking
        if not blocking:
            continue

        summary.blocking_errors += 1

        row_index = row_index_of(issue)
        auto_fixable = bool(meta is not None and meta.auto_fixable) and row_index >= 0
        if auto_fixable:
            summary.auto_fixable_blocking_errors += 1

        key = UNKNOWN_CODE if code is None else code
        group = groups.get(key)
        if group is None:
            if meta is not None and meta.title is not None:
                title = meta.title
            elif key == UNKNOWN_CODE:
                title = getattr(issue, "message", "") or ""
            else:
                title = key
            group = BlockingGroup(
                code=key,
                title=title,
                count=0,
                first_row_index=-1,
                auto_fixable_count=0,
            )
            groups[key] = group

        group.count += 1
        if auto_fixable:
            group.auto_fixable_count += 1
        if group.first_row_index == -1 and row_index >= 0:
            group.first_row_index = row_index

    # sorted() is stable, so ties stay in first-seen order
    summary.blocking_groups = sorted(groups.values(), key=lambda g: -g.count)
    logger.debug(
        "Readiness for format=%s: %d blocking (%d auto-fixable) across %d codes",
        format_id, summary.blocking_errors, summary.auto_fixable_blocking_errors, len(groups),
    )
    return summary
