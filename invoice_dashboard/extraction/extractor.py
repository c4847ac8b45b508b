"""AI-powered invoice field extraction."""

from invoice_dashboard.extraction.models import ExtractionResult
from invoice_dashboard.extraction.request_builder import ExtractionRequestBuilder
from invoice_dashboard.extraction.response import parse_response, repair_payload
from invoice_dashboard.ingestion.models import BinaryContent, NormalizedContent, TextContent
from invoice_dashboard.llm.client_base import BaseModelClient
from invoice_dashboard.logging.logger import Log


class ExtractionClient:
    """Sends one extraction request and returns the repaired result.

    A single attempt is made per call. Retrying is left to the caller.
    """

    def __init__(
        self,
        *,
        client: BaseModelClient,
        model: str,
        temperature: float = 0.0,
        request_builder: ExtractionRequestBuilder | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature
        self._request_builder = request_builder or ExtractionRequestBuilder()

    @property
    def accepts_attachments(self) -> bool:
        return self._client.supports_attachments

    def extract(
        self,
        *,
        binary: BinaryContent | None = None,
        text: str | None = None,
    ) -> ExtractionResult:
        request = self._request_builder.build(binary=binary, text=text)
        Log.debug(f"Extraction prompt:\n{request.prompt}")

        raw_response = self._client.generate(
            model=self._model,
            temperature=self._temperature,
            prompt=request.prompt,
            attachments=request.attachments,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        payload = parse_response(raw_response)
        result = ExtractionResult(repair_payload(payload, source_text=text))

        if result.missing_fields:
            Log.warning(f"Model omitted fields: {', '.join(result.missing_fields)}")
        Log.info(
            f"Extraction complete: invoice {result.invoice_id!r} "
            f"from {result.vendor_name!r}, total {result.total_amount}"
        )
        return result

    def extract_content(self, content: NormalizedContent) -> ExtractionResult:
        """Route a normalized document to the binary or text path."""
        if isinstance(content, BinaryContent):
            return self.extract(binary=content)
        if isinstance(content, TextContent):
            return self.extract(text=content.value)
        raise TypeError(f"Unsupported normalized content: {type(content).__name__}")
