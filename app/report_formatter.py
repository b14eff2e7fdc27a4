"""Format readiness results as human-readable Markdown."""

from deps import Any, List, Optional, datetime

from catalog_triage.issue import BlockingGroup, IssueMeta, ReadinessSummary
from catalog_triage.registry import default_registry
from catalog_triage.scoring import CATEGORY_LABELS, ScoreNote, ValidationBreakdown


def _row_label(group: BlockingGroup) -> str:
    """First affected row, 1-based for display; file-level groups have none."""
    if group.first_row_index < 0:
        return "file-level"
    return f"first at row {group.first_row_index + 1}"


def _group_block_md(group: BlockingGroup, meta: Optional[IssueMeta] = None) -> List[str]:
    """One blocking group: title, code, count, first row, auto-fix count and registry guidance."""
    lines = []
    lines.append(f"- **{group.title}** (`{group.code}`) · {group.count} error(s) · {_row_label(group)}")
    if group.auto_fixable_count:
        lines.append(f"  - Auto-fixable: {group.auto_fixable_count}")
    if meta is not None:
        if meta.explanation:
            lines.append(f"  - What it means: {meta.explanation}")
        if meta.why_platform_cares:
            lines.append(f"  - Why it matters: {meta.why_platform_cares}")
        if meta.how_to_fix:
            lines.append(f"  - How to fix: {meta.how_to_fix}")
    return lines


def format_readiness_report(
    summary: ReadinessSummary,
    breakdown: ValidationBreakdown,
    notes: List[ScoreNote],
    file_name: Optional[str] = None,
    format_id: Optional[str] = None,
    registry: Any = None,
) -> str:
    """Format readiness and score results as Markdown."""
    if registry is None:
        registry = default_registry
    lines = []
    lines.append(f"# Export readiness: {file_name or 'unknown'}")
    lines.append("")
    lines.append(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    lines.append(f"Format: {format_id or 'unknown'}")
    lines.append("")
    lines.append(
        f"**{breakdown.label}** · score **{breakdown.score}**/100 "
        f"({breakdown.errors} error(s), {breakdown.warnings} warning(s), {breakdown.infos} info)."
    )
    lines.append("")

    lines.append("## Blocking issues")
    lines.append("")
    if not summary.blocking_groups:
        lines.append("No blocking issues found.")
        lines.append("")
    else:
        lines.append(
            f"**{summary.blocking_errors}** blocking error(s), "
            f"**{summary.auto_fixable_blocking_errors}** auto-fixable."
        )
        lines.append("")
        for group in summary.blocking_groups:
            lines.extend(_group_block_md(group, registry.lookup(format_id, group.code)))
        lines.append("")

    lines.append("## Category scores")
    lines.append("")
    lines.append("| Category | Score | Notes |")
    lines.append("| --- | --- | --- |")
    for note in notes:
        label = CATEGORY_LABELS.get(note.key, note.label)
        lines.append(f"| {label} | {note.score} | {note.note} |")
    lines.append("")

    return "\n".join(lines)
