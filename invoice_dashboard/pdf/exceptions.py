from invoice_dashboard.ingestion.exceptions import IngestionError


class PdfExtractionError(IngestionError):
    """Raised when text cannot be pulled out of a PDF."""
