"""
Tests for the plain-text auto-fix log.
"""

from datetime import datetime, timedelta, timezone

from catalog_triage.reporter import ReportGenerator

NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestGenerateFixesLog:
    """Tests for ReportGenerator.generate_fixes_log()"""

    def test_full_layout(self):
        text = ReportGenerator.generate_fixes_log(
            ["a", "b", "a"], file_name="products.csv", format_id="shopify_products", now=NOW
        )
        assert text == "\n".join([
            "=== Auto Fix Log ===",
            "Date:     2024-05-01T12:00:00.000Z",
            "File:     products.csv",
            "Format:   shopify_products",
            "Actions:  3",
            "",
            "--- Summary by type ---",
            "     3×  Other normalisation",
            "",
            "--- Full action list ---",
            "    1.  a",
            "    2.  b",
            "    3.  a",
            "",
        ])

    def test_defaults_to_unknown(self):
        text = ReportGenerator.generate_fixes_log([], now=NOW)
        lines = text.split("\n")
        assert lines[2] == "File:     unknown"
        assert lines[3] == "Format:   unknown"
        assert lines[4] == "Actions:  0"
        assert lines[6:] == ["--- Summary by type ---", "", "--- Full action list ---", ""]

    def test_summary_follows_group_order(self):
        fixes = ["Removed duplicate image", "Set Price to 2 decimals", "Set Price to 3 decimals"]
        text = ReportGenerator.generate_fixes_log(fixes, now=NOW)
        summary = text.split("--- Summary by type ---\n")[1].split("\n\n")[0]
        assert summary.split("\n") == ["     2×  Price fields", "     1×  Images"]

    def test_wide_indexes(self):
        fixes = ["x"] * 12
        text = ReportGenerator.generate_fixes_log(fixes, now=NOW)
        assert "   12.  x" in text
        assert "    12×  Other normalisation" in text

    def test_timestamp_converted_to_utc(self):
        local = datetime(2024, 5, 1, 14, 30, 0, 250000, tzinfo=timezone(timedelta(hours=2)))
        text = ReportGenerator.generate_fixes_log([], now=local)
        assert "Date:     2024-05-01T12:30:00.250Z" in text

    def test_naive_timestamp_treated_as_utc(self):
        text = ReportGenerator.generate_fixes_log([], now=datetime(2024, 1, 2, 3, 4, 5))
        assert "Date:     2024-01-02T03:04:05.000Z" in text

    def test_default_clock(self):
        text = ReportGenerator.generate_fixes_log(["x"])
        date_line = text.split("\n")[1]
        assert date_line.startswith("Date:     ")
        assert date_line.endswith("Z")

    def test_deterministic_apart_from_date(self):
        fixes = ["Normalized URL handle", "Trimmed whitespace"]
        first = ReportGenerator.generate_fixes_log(fixes, file_name="f.csv").split("\n")
        second = ReportGenerator.generate_fixes_log(fixes, file_name="f.csv").split("\n")
        del first[1], second[1]
        assert first == second
