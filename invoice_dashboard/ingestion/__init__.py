from invoice_dashboard.ingestion.models import (
    BinaryContent,
    NormalizedContent,
    TextContent,
    UploadedDocument,
)
from invoice_dashboard.ingestion.normalizer import FormatNormalizer

__all__ = [
    "BinaryContent",
    "FormatNormalizer",
    "NormalizedContent",
    "TextContent",
    "UploadedDocument",
]
