"""
Issue metadata lookup.

Any object with a ``lookup(format_id, code)`` method returning an
``IssueMeta`` or None can be passed to the readiness analyzer and the
score breakdown. Defaults for missing fields are applied by the callers.
"""

from typing import Dict, List, Mapping, Optional

from .issue import IssueMeta
from .meta_tables import FORMAT_ISSUE_META, GENERIC_ISSUE_META


class IssueMetaRegistry:
    """Built-in registry: per-format tables, then the generic suffix table."""

    def __init__(
        self,
        formats: Optional[Mapping[str, Mapping[str, IssueMeta]]] = None,
        generic: Optional[Mapping[str, IssueMeta]] = None,
    ):
        self.formats = FORMAT_ISSUE_META if formats is None else formats
        self.generic = GENERIC_ISSUE_META if generic is None else generic

    def lookup(self, format_id: Optional[str], code: Optional[str]) -> Optional[IssueMeta]:
        """Return metadata for code, or None when nothing is registered."""
        if not code or not isinstance(code, str):
            return None
        fmt = (format_id or "").strip()
        if fmt:
            table = self.formats.get(fmt)
            if table and code in table:
                return table[code]
        suffix = code.split("/")[-1]
        return self.generic.get(suffix)

    def format_ids(self) -> List[str]:
        """Format ids that have a dedicated table."""
        return sorted(self.formats)


class DictIssueMetaRegistry:
    """Registry over a flat ``{code: IssueMeta}`` mapping; ignores format_id."""

    def __init__(self, entries: Mapping[str, IssueMeta]):
        self.entries: Dict[str, IssueMeta] = dict(entries)

    def lookup(self, format_id: Optional[str], code: Optional[str]) -> Optional[IssueMeta]:
        if not code:
            return None
        return self.entries.get(code)


default_registry = IssueMetaRegistry()
