"""Aggregations behind the dashboard and analytics views."""

from collections.abc import Iterable, Sequence
from datetime import date, timedelta

from invoice_dashboard.analyst.models import AnalystRecord
from invoice_dashboard.analytics.models import (
    AnalyticsSummary,
    DashboardTotals,
    SpendPoint,
    VendorSpending,
)

RECENT_INVOICES_SHOWN = 4


def summarize_dashboard(amounts: Iterable[float | None]) -> DashboardTotals:
    values = [amount or 0.0 for amount in amounts]
    return DashboardTotals(cumulative_total=sum(values), invoice_count=len(values))


def since_for_range(days: int | None, today: date | None = None) -> str | None:
    """ISO lower bound for a "last N days" filter; ``None`` means all time."""
    if days is None:
        return None
    if days < 0:
        raise ValueError("days must not be negative")
    today = today or date.today()
    return (today - timedelta(days=days)).isoformat()


def _sort_key(record: AnalystRecord) -> tuple[int, str]:
    try:
        parsed = date.fromisoformat((record.date or "")[:10])
    except ValueError:
        # Unparseable dates ("N/A") sort after every real date.
        return (1, "")
    return (0, parsed.isoformat())


def build_analytics(records: Sequence[AnalystRecord]) -> AnalyticsSummary:
    if not records:
        return AnalyticsSummary()

    total = sum(record.amount or 0.0 for record in records)

    spending: dict[str, float] = {}
    for record in records:
        if record.vendor:
            spending[record.vendor] = spending.get(record.vendor, 0.0) + (record.amount or 0.0)
    breakdown = [VendorSpending(name, amount) for name, amount in spending.items()]

    top_vendor = VendorSpending("N/A", 0.0)
    if breakdown:
        # Last vendor wins ties; max returns the first maximal item.
        top_vendor = max(reversed(breakdown), key=lambda vendor: vendor.spending)

    dated = sorted((r for r in records if _sort_key(r)[0] == 0), key=_sort_key, reverse=True)
    undated = [r for r in records if _sort_key(r)[0] == 1]

    return AnalyticsSummary(
        total_amount=total,
        invoice_count=len(records),
        top_vendor=top_vendor,
        vendor_breakdown=breakdown,
        points=[SpendPoint(r.date, r.amount or 0.0, r.vendor) for r in records],
        recent=(dated + undated)[:RECENT_INVOICES_SHOWN],
    )
