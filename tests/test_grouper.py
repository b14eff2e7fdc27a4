"""
Tests for grouping fix messages by type.
"""

from catalog_triage.grouper import group_fixes_by_type
from catalog_triage.issue import FixGroup


class TestGroupFixesByType:
    """Tests for group_fixes_by_type(fixes)"""

    def test_empty_input(self):
        assert group_fixes_by_type([]) == []
        assert group_fixes_by_type(None) == []

    def test_sample_is_first_seen(self):
        """["a", "b", "a"] -> one fallback group, sample "a" """
        groups = group_fixes_by_type(["a", "b", "a"])
        assert groups == [FixGroup(type="Other normalisation", count=3, sample="a")]

    def test_sorted_by_count_then_label(self):
        fixes = [
            "Trimmed whitespace in Title",
            "Set Price to 2 decimals",
            "Set Price to 3 decimals",
            "Trimmed whitespace in SKU",
            "Filled Vendor from brand",
        ]
        groups = group_fixes_by_type(fixes)
        assert [(g.type, g.count) for g in groups] == [
            ("Price fields", 2),
            ("Whitespace cleanup", 2),
            ("Generated / derived values", 1),
        ]
        assert groups[0].sample == "Set Price to 2 decimals"
        assert groups[1].sample == "Trimmed whitespace in Title"

    def test_counts_sum_to_input_length(self):
        fixes = ["Normalized URL handle"] * 4 + ["Set Status to draft", "x", None]
        groups = group_fixes_by_type(fixes)
        assert sum(g.count for g in groups) == len(fixes)

    def test_none_message_uses_fallback(self):
        groups = group_fixes_by_type([None])
        assert groups == [FixGroup(type="Other normalisation", count=1, sample="")]

    def test_repeatable(self):
        fixes = ["Set Published to TRUE", "Removed duplicate image", "Set Published to FALSE"]
        assert group_fixes_by_type(fixes) == group_fixes_by_type(fixes)
