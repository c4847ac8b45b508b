import io

import pdfplumber

from invoice_dashboard.pdf.base import BasePdfExtractor
from invoice_dashboard.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    engine = "pdfplumber"

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
        return "\n\n".join(page.strip() for page in pages).strip()
