from invoice_dashboard.extraction.extractor import ExtractionClient
from invoice_dashboard.extraction.models import ExtractionResult
from invoice_dashboard.extraction.request_builder import ExtractionRequest, ExtractionRequestBuilder

__all__ = [
    "ExtractionClient",
    "ExtractionRequest",
    "ExtractionRequestBuilder",
    "ExtractionResult",
]
