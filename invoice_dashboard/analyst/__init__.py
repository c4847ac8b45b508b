from invoice_dashboard.analyst.analyst import AnalystQueryClient
from invoice_dashboard.analyst.models import AnalystRecord

__all__ = ["AnalystQueryClient", "AnalystRecord"]
