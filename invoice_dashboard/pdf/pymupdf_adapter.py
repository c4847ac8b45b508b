import pymupdf

from invoice_dashboard.pdf.base import BasePdfExtractor
from invoice_dashboard.pdf.exceptions import PdfExtractionError


class PyMuPdfAdapter(BasePdfExtractor):
    engine = "pymupdf"

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc
        return "\n\n".join(page.strip() for page in pages).strip()
