from invoice_dashboard.config.settings import Settings
from invoice_dashboard.pdf.base import BasePdfExtractor
from invoice_dashboard.pdf.pdfplumber_adapter import PdfPlumberAdapter
from invoice_dashboard.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Picks the PDF text engine for providers without PDF input."""

    ADAPTERS: dict[str, type[BasePdfExtractor]] = {
        adapter.engine: adapter for adapter in (PdfPlumberAdapter, PyMuPdfAdapter)
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {sorted(cls.ADAPTERS)}"
            )
        return adapter_cls()
