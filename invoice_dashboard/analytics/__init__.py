from invoice_dashboard.analytics.summary import (
    build_analytics,
    since_for_range,
    summarize_dashboard,
)

__all__ = ["build_analytics", "since_for_range", "summarize_dashboard"]
