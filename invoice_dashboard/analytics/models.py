from dataclasses import dataclass, field

from invoice_dashboard.analyst.models import AnalystRecord


@dataclass(frozen=True)
class VendorSpending:
    name: str
    spending: float


@dataclass(frozen=True)
class SpendPoint:
    """One invoice plotted as date against amount."""

    date: str | None
    amount: float
    vendor: str | None


@dataclass(frozen=True)
class DashboardTotals:
    cumulative_total: float
    invoice_count: int


@dataclass(frozen=True)
class AnalyticsSummary:
    total_amount: float = 0.0
    invoice_count: int = 0
    top_vendor: VendorSpending = field(default_factory=lambda: VendorSpending("N/A", 0.0))
    vendor_breakdown: list[VendorSpending] = field(default_factory=list)
    points: list[SpendPoint] = field(default_factory=list)
    recent: list[AnalystRecord] = field(default_factory=list)
