"""Turns arbitrary uploads into one of the two canonical model inputs."""

from collections.abc import Mapping

from invoice_dashboard.ingestion.base import BaseTextReader
from invoice_dashboard.ingestion.csv_reader import CsvTextReader
from invoice_dashboard.ingestion.docx_reader import DocxReader
from invoice_dashboard.ingestion.exceptions import UnsupportedFormatError
from invoice_dashboard.ingestion.models import (
    BinaryContent,
    NormalizedContent,
    TextContent,
    UploadedDocument,
)
from invoice_dashboard.ingestion.spreadsheet_reader import XlsReader, XlsxReader
from invoice_dashboard.logging.logger import Log


def default_readers() -> dict[str, BaseTextReader]:
    return {
        ".docx": DocxReader(),
        ".xlsx": XlsxReader(),
        ".xls": XlsReader(),
        ".csv": CsvTextReader(),
    }


class FormatNormalizer:
    """Dispatches an upload to binary pass-through or a text reader.

    Images and PDFs are matched on MIME type first and never re-encoded.
    Everything else is matched on the lowercased file extension.
    """

    def __init__(self, readers: Mapping[str, BaseTextReader] | None = None) -> None:
        self._readers = dict(readers) if readers is not None else default_readers()

    def normalize(self, document: UploadedDocument) -> NormalizedContent:
        mime_type = document.mime_type.lower()
        if mime_type.startswith("image/") or mime_type == "application/pdf":
            Log.debug(f"Passing {document.name} through as {document.mime_type}")
            return BinaryContent(data=document.data, mime_type=document.mime_type)

        reader = self._readers.get(document.extension)
        if reader is None:
            raise UnsupportedFormatError(
                f"Unsupported file format for '{document.name}'. "
                "Please upload an image, PDF, DOCX, XLSX, XLS, or CSV."
            )
        text = reader.read(document.data)
        Log.debug(f"Flattened {document.name} to {len(text)} chars")
        return TextContent(value=text)
