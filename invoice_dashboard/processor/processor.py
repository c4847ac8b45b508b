from invoice_dashboard.analyst.analyst import AnalystQueryClient
from invoice_dashboard.config.settings import Settings
from invoice_dashboard.extraction.extractor import ExtractionClient
from invoice_dashboard.extraction.models import ExtractionResult
from invoice_dashboard.ingestion.exceptions import UnsupportedFormatError
from invoice_dashboard.ingestion.models import (
    BinaryContent,
    NormalizedContent,
    TextContent,
    UploadedDocument,
)
from invoice_dashboard.ingestion.normalizer import FormatNormalizer
from invoice_dashboard.llm.client_base import BaseModelClient
from invoice_dashboard.llm.factory import ModelClientFactory
from invoice_dashboard.logging.logger import Log
from invoice_dashboard.pdf.base import BasePdfExtractor
from invoice_dashboard.pdf.factory import PdfExtractorFactory


class InvoiceProcessor:
    """Orchestrates one extraction attempt.

    Pipeline: size gate -> normalize -> adapt to model capabilities -> extract.
    Nothing is retained between calls.
    """

    def __init__(
        self,
        normalizer: FormatNormalizer,
        extraction_client: ExtractionClient,
        pdf_extractor: BasePdfExtractor | None = None,
    ) -> None:
        self._normalizer = normalizer
        self._extraction_client = extraction_client
        self._pdf_extractor = pdf_extractor

    def process_upload(self, name: str, mime_type: str, data: bytes) -> ExtractionResult:
        """Extract invoice fields from an uploaded file.

        Raises:
            FileTooLargeError: before any parsing or model call.
            UnsupportedFormatError: if the format is not recognized.
        """
        document = UploadedDocument.from_bytes(name, mime_type, data)
        Log.info(f"Processing upload {name!r} ({document.size_bytes} bytes, {mime_type or 'no type'})")

        content = self._normalizer.normalize(document)
        content = self._adapt_to_model(content)
        return self._extraction_client.extract_content(content)

    def process_text(self, text: str) -> ExtractionResult:
        """Extract invoice fields from pasted text."""
        Log.info(f"Processing pasted text ({len(text)} chars)")
        return self._extraction_client.extract(text=text)

    def _adapt_to_model(self, content: NormalizedContent) -> NormalizedContent:
        if not isinstance(content, BinaryContent) or self._extraction_client.accepts_attachments:
            return content
        if content.mime_type.lower() != "application/pdf" or self._pdf_extractor is None:
            raise UnsupportedFormatError(
                f"The configured model cannot read {content.mime_type} attachments"
            )
        text = self._pdf_extractor.extract(content.data)
        if not text:
            raise UnsupportedFormatError("The PDF has no extractable text layer")
        Log.info(f"Flattened PDF to {len(text)} chars with {self._pdf_extractor.engine}")
        return TextContent(value=text)


def build_processor(
    settings: Settings,
    client: BaseModelClient | None = None,
) -> InvoiceProcessor:
    """Build an InvoiceProcessor with all configured adapters."""
    if client is None:
        client = ModelClientFactory.create(settings)
    extraction_client = ExtractionClient(
        client=client,
        model=settings.extraction_model_name,
        temperature=settings.extraction_temperature,
    )
    pdf_extractor = None if client.supports_attachments else PdfExtractorFactory.create(settings)
    return InvoiceProcessor(
        normalizer=FormatNormalizer(),
        extraction_client=extraction_client,
        pdf_extractor=pdf_extractor,
    )


def build_analyst(
    settings: Settings,
    client: BaseModelClient | None = None,
) -> AnalystQueryClient:
    if client is None:
        client = ModelClientFactory.create(settings)
    return AnalystQueryClient(
        client=client,
        model=settings.analyst_model_name,
        temperature=settings.analyst_temperature,
    )
