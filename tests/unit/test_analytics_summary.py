from datetime import date

import pytest

from invoice_dashboard.analyst.models import AnalystRecord
from invoice_dashboard.analytics.models import VendorSpending
from invoice_dashboard.analytics.summary import (
    RECENT_INVOICES_SHOWN,
    build_analytics,
    since_for_range,
    summarize_dashboard,
)


class TestSummarizeDashboard:
    def test_totals(self) -> None:
        totals = summarize_dashboard([10.0, 2.5, None])
        assert totals.cumulative_total == 12.5
        assert totals.invoice_count == 3

    def test_empty(self) -> None:
        totals = summarize_dashboard([])
        assert totals.cumulative_total == 0
        assert totals.invoice_count == 0


class TestSinceForRange:
    def test_all_time(self) -> None:
        assert since_for_range(None) is None

    def test_last_thirty_days(self) -> None:
        assert since_for_range(30, today=date(2024, 3, 31)) == "2024-03-01"

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            since_for_range(-1)


class TestBuildAnalytics:
    def test_empty_records(self) -> None:
        summary = build_analytics([])
        assert summary.total_amount == 0
        assert summary.invoice_count == 0
        assert summary.top_vendor == VendorSpending("N/A", 0.0)
        assert summary.vendor_breakdown == []

    def test_breakdown_and_top_vendor(self) -> None:
        records = [
            AnalystRecord("Acme", "2024-01-01", 100.0),
            AnalystRecord("Globex", "2024-01-02", 300.0),
            AnalystRecord("Acme", "2024-01-03", 50.0),
        ]
        summary = build_analytics(records)

        assert summary.total_amount == 450.0
        assert summary.invoice_count == 3
        assert summary.vendor_breakdown == [
            VendorSpending("Acme", 150.0),
            VendorSpending("Globex", 300.0),
        ]
        assert summary.top_vendor == VendorSpending("Globex", 300.0)

    def test_tie_goes_to_last_vendor(self) -> None:
        records = [AnalystRecord("A", None, 10.0), AnalystRecord("B", None, 10.0)]
        assert build_analytics(records).top_vendor.name == "B"

    def test_tie_ignores_smaller_vendor_in_between(self) -> None:
        records = [
            AnalystRecord("A", None, 10.0),
            AnalystRecord("B", None, 5.0),
            AnalystRecord("C", None, 10.0),
        ]
        assert build_analytics(records).top_vendor == VendorSpending("C", 10.0)

    def test_vendorless_records_count_toward_total_only(self) -> None:
        records = [AnalystRecord(None, None, 5.0), AnalystRecord("", None, 5.0)]
        summary = build_analytics(records)
        assert summary.total_amount == 10.0
        assert summary.vendor_breakdown == []
        assert summary.top_vendor.name == "N/A"

    def test_recent_sorted_newest_first_with_bad_dates_last(self) -> None:
        records = [
            AnalystRecord("A", "N/A", 1.0),
            AnalystRecord("B", "2024-01-01", 1.0),
            AnalystRecord("C", "2024-06-01", 1.0),
            AnalystRecord("D", "2024-03-01", 1.0),
            AnalystRecord("E", "2023-12-31", 1.0),
        ]
        recent = build_analytics(records).recent
        assert len(recent) == RECENT_INVOICES_SHOWN
        assert [r.vendor for r in recent] == ["C", "D", "B", "E"]

    def test_points_follow_record_order(self) -> None:
        records = [AnalystRecord("A", "2024-01-01", 1.0), AnalystRecord("B", "2024-01-02", None)]
        points = build_analytics(records).points
        assert [(p.vendor, p.amount) for p in points] == [("A", 1.0), ("B", 0.0)]
