"""
Report generation for applied auto-fixes.
"""

from datetime import datetime, timezone
from typing import List, Optional

from .grouper import group_fixes_by_type


def _utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC with milliseconds, e.g. 2024-05-01T12:00:00.000Z."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ReportGenerator:
    """Generate plain-text fix logs."""

    @staticmethod
    def generate_fixes_log(
        fixes: Optional[List[Optional[str]]],
        file_name: Optional[str] = None,
        format_id: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> str:
        """Generate the downloadable auto-fix log.

        Summary lines follow group_fixes_by_type order; the full action list keeps
        the original order of fixes.
        """
        fixes = list(fixes or [])
        groups = group_fixes_by_type(fixes)

        report = ["=== Auto Fix Log ==="]
        report.append(f"Date:     {_utc_timestamp(now)}")
        report.append(f"File:     {file_name or 'unknown'}")
        report.append(f"Format:   {format_id or 'unknown'}")
        report.append(f"Actions:  {len(fixes)}")
        report.append("")
        report.append("--- Summary by type ---")
        for g in groups:
            report.append(f"  {g.count:>4}×  {g.type}")
        report.append("")
        report.append("--- Full action list ---")
        for i, msg in enumerate(fixes, 1):
            report.append(f"{i:>5}.  {msg if msg is not None else ''}")
        report.append("")

        return "\n".join(report)
