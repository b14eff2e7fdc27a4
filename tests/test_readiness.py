"""
Tests for export readiness aggregation.

Covers blocking defaults, the file-level auto-fix guard, group titles,
first-row tracking and group ordering.
"""

import pytest

from catalog_triage.issue import BlockingGroup, Issue, IssueMeta, ReadinessSummary, Severity
from catalog_triage.readiness import compute_readiness_summary
from catalog_triage.registry import DictIssueMetaRegistry


def _issue(code, severity=Severity.ERROR, row=0, message="msg"):
    return Issue(code=code, message=message, severity=severity, row_index=row)


@pytest.fixture
def registry():
    return DictIssueMetaRegistry({
        "price_missing": IssueMeta(blocking=True, auto_fixable=True),
        "soft_error": IssueMeta(title="Soft", blocking=False),
        "titled": IssueMeta(title="Nice title"),
    })


class TestComputeReadinessSummary:
    """Tests for compute_readiness_summary(issues, format_id, registry)"""

    def test_reference_example(self, registry):
        """Row-scoped and file-level errors of one code; warning ignored"""
        issues = [
            _issue("price_missing", row=2),
            _issue("price_missing", row=-1),
            _issue("tag_dup", severity=Severity.WARNING, row=5),
        ]
        summary = compute_readiness_summary(issues, registry=registry)
        assert summary.blocking_errors == 2
        assert summary.auto_fixable_blocking_errors == 1
        assert summary.blocking_groups == [
            BlockingGroup(
                code="price_missing",
                title="price_missing",
                count=2,
                first_row_index=2,
                auto_fixable_count=1,
            )
        ]

    def test_empty_input(self, registry):
        assert compute_readiness_summary([], registry=registry) == ReadinessSummary()
        assert compute_readiness_summary(None, registry=registry) == ReadinessSummary()

    def test_non_blocking_errors_skipped(self, registry):
        summary = compute_readiness_summary([_issue("soft_error")], registry=registry)
        assert summary.blocking_errors == 0
        assert summary.blocking_groups == []

    def test_unknown_code_blocks_by_default(self, registry):
        summary = compute_readiness_summary([_issue("not_registered", row=3)], registry=registry)
        assert summary.blocking_errors == 1
        assert summary.auto_fixable_blocking_errors == 0
        group = summary.blocking_groups[0]
        assert group.title == "not_registered"
        assert group.auto_fixable_count == 0

    def test_info_and_warning_ignored(self, registry):
        issues = [
            _issue("price_missing", severity=Severity.INFO),
            _issue("price_missing", severity=Severity.WARNING),
        ]
        assert compute_readiness_summary(issues, registry=registry).blocking_errors == 0

    def test_title_from_registry(self, registry):
        summary = compute_readiness_summary([_issue("titled")], registry=registry)
        assert summary.blocking_groups[0].title == "Nice title"

    def test_missing_code_uses_message(self, registry):
        summary = compute_readiness_summary(
            [_issue(None, message="Row has no columns"), _issue(None, message="Other text")],
            registry=registry,
        )
        assert len(summary.blocking_groups) == 1
        group = summary.blocking_groups[0]
        assert group.code == "unknown"
        assert group.title == "Row has no columns"
        assert group.count == 2

    def test_file_level_never_auto_fixable(self, registry):
        summary = compute_readiness_summary([_issue("price_missing", row=-1)], registry=registry)
        assert summary.auto_fixable_blocking_errors == 0
        assert summary.blocking_groups[0].first_row_index == -1

    def test_first_row_index_set_once(self, registry):
        issues = [
            _issue("price_missing", row=-1),
            _issue("price_missing", row=4),
            _issue("price_missing", row=2),
        ]
        group = compute_readiness_summary(issues, registry=registry).blocking_groups[0]
        assert group.first_row_index == 4
        assert group.count == 3
        assert group.auto_fixable_count == 2

    def test_non_integer_row_is_file_level(self, registry):
        issue = Issue(code="price_missing", message="m", severity=Severity.ERROR, row_index=None)
        summary = compute_readiness_summary([issue], registry=registry)
        assert summary.auto_fixable_blocking_errors == 0
        assert summary.blocking_groups[0].first_row_index == -1

    def test_string_severity_accepted(self, registry):
        issue = Issue(code="price_missing", message="m", severity="error", row_index=1)
        assert compute_readiness_summary([issue], registry=registry).blocking_errors == 1

    def test_groups_sorted_by_count_ties_keep_first_seen(self, registry):
        issues = [
            _issue("b_code"),
            _issue("a_code"),
            _issue("c_code"),
            _issue("c_code"),
        ]
        groups = compute_readiness_summary(issues, registry=registry).blocking_groups
        assert [g.code for g in groups] == ["c_code", "b_code", "a_code"]

    def test_totals_match_groups(self, registry):
        issues = [_issue("price_missing", row=i - 1) for i in range(5)] + [_issue("x"), _issue("y", row=-1)]
        summary = compute_readiness_summary(issues, registry=registry)
        assert summary.blocking_errors == sum(g.count for g in summary.blocking_groups)
        assert summary.auto_fixable_blocking_errors == sum(g.auto_fixable_count for g in summary.blocking_groups)

    def test_repeatable(self, registry):
        issues = [_issue("price_missing", row=2), _issue("x", row=-1)]
        first = compute_readiness_summary(issues, registry=registry)
        second = compute_readiness_summary(issues, registry=registry)
        assert first == second


class TestReadinessWithBuiltInRegistry:
    """compute_readiness_summary against the default registry"""

    def test_shopify_auto_fixable_handle(self):
        issues = [
            _issue("shopify/blank_handle", row=7),
            _issue("shopify/blank_handle", row=9),
            _issue("shopify/compare_at_lt_price", row=1),
        ]
        summary = compute_readiness_summary(issues, "shopify_products")
        assert summary.blocking_errors == 2
        assert summary.auto_fixable_blocking_errors == 2
        group = summary.blocking_groups[0]
        assert group.title == "Missing URL handle"
        assert group.first_row_index == 7

    def test_generic_suffix_applies_without_format(self):
        issues = [
            _issue("custom/required_blank", row=0),
            _issue("custom/invalid_email", row=0),
        ]
        summary = compute_readiness_summary(issues)
        assert summary.blocking_errors == 1
        assert summary.blocking_groups[0].title == "Required field is blank"


class _SizedRegistry(DictIssueMetaRegistry):
    """Mapping-style fake: an empty one is falsy."""

    def __len__(self):
        return len(self.entries)


class TestInjectedRegistry:
    """An injected registry is used even when it is empty"""

    def test_empty_sized_registry_is_not_replaced(self):
        issues = [_issue("shopify/compare_at_lt_price", row=1)]
        summary = compute_readiness_summary(issues, "shopify_products", registry=_SizedRegistry({}))
        assert summary.blocking_errors == 1
        assert summary.auto_fixable_blocking_errors == 0
        assert summary.blocking_groups[0].title == "shopify/compare_at_lt_price"


class TestEmptyStringCode:
    def test_empty_code_is_kept(self, registry):
        """Only an absent code falls back to "unknown" """
        summary = compute_readiness_summary([_issue("", message="Row text")], registry=registry)
        group = summary.blocking_groups[0]
        assert group.code == ""
        assert group.title == ""

    def test_empty_and_absent_codes_group_separately(self, registry):
        summary = compute_readiness_summary([_issue(""), _issue(None), _issue(None)], registry=registry)
        assert [(g.code, g.count) for g in summary.blocking_groups] == [("unknown", 2), ("", 1)]
