from invoice_dashboard.review.models import EditableInvoiceDraft, ReviewStatus
from invoice_dashboard.review.state import ReviewState

__all__ = ["EditableInvoiceDraft", "ReviewState", "ReviewStatus"]
