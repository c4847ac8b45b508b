import json
from unittest.mock import MagicMock

import pytest

from invoice_dashboard.config.settings import Settings
from invoice_dashboard.extraction.extractor import ExtractionClient
from invoice_dashboard.extraction.request_builder import ExtractionRequestBuilder
from invoice_dashboard.ingestion.exceptions import FileTooLargeError, UnsupportedFormatError
from invoice_dashboard.ingestion.normalizer import FormatNormalizer
from invoice_dashboard.llm.example_client_adapter import ExampleClientAdapter
from invoice_dashboard.pdf.pdfplumber_adapter import PdfPlumberAdapter
from invoice_dashboard.processor.processor import (
    InvoiceProcessor,
    build_analyst,
    build_processor,
)


def _make_processor(
    model_client: ExampleClientAdapter,
    pdf_extractor: PdfPlumberAdapter | None = None,
) -> InvoiceProcessor:
    extraction = ExtractionClient(
        client=model_client,
        model="m",
        request_builder=ExtractionRequestBuilder(instruction="EXTRACT"),
    )
    return InvoiceProcessor(
        normalizer=FormatNormalizer(),
        extraction_client=extraction,
        pdf_extractor=pdf_extractor,
    )


class TestProcessUpload:
    def test_csv_upload_backfills_raw_text(self) -> None:
        rows = "\n".join(f"item-{i},{i}.00" for i in range(400))
        csv_text = f"vendor,Acme\ninvoice,INV-9\n{rows}\n"
        assert 4000 <= len(csv_text.encode()) <= 8000
        model_client = ExampleClientAdapter(
            response=json.dumps(
                {
                    "vendor_name": "Acme",
                    "invoice_id": "INV-9",
                    "invoice_date": "2024-02-01",
                    "total_amount": 99.5,
                    "currency": "EUR",
                    "raw_text": "",
                }
            )
        )

        result = _make_processor(model_client).process_upload(
            "invoice.csv", "text/csv", csv_text.encode()
        )

        assert result.raw_text == csv_text
        assert result.total_amount == 99.5
        assert model_client.calls[0]["prompt"] == f"EXTRACT\n\nInvoice Text:\n{csv_text}"

    def test_image_upload_sends_identical_bytes(self) -> None:
        model_client = ExampleClientAdapter()
        data = b"\x89PNG\r\n\x1a\n" + bytes(range(256))

        _make_processor(model_client).process_upload("scan.png", "image/png", data)

        attachment = model_client.calls[0]["attachments"][0]
        assert attachment.data == data
        assert attachment.mime_type == "image/png"

    def test_oversized_upload_never_reaches_the_model(self) -> None:
        model_client = ExampleClientAdapter()
        with pytest.raises(FileTooLargeError):
            _make_processor(model_client).process_upload(
                "big.pdf", "application/pdf", b"x" * (6 * 1024 * 1024)
            )
        assert model_client.calls == []

    def test_unsupported_format_never_reaches_the_model(self) -> None:
        model_client = ExampleClientAdapter()
        with pytest.raises(UnsupportedFormatError):
            _make_processor(model_client).process_upload("a.zip", "application/zip", b"PK")
        assert model_client.calls == []


class TestTextOnlyModels:
    def test_pdf_is_flattened_to_text(self, sample_pdf_bytes: bytes) -> None:
        model_client = ExampleClientAdapter(supports_attachments=False)
        processor = _make_processor(model_client, pdf_extractor=PdfPlumberAdapter())

        result = processor.process_upload("invoice.pdf", "application/pdf", sample_pdf_bytes)

        call = model_client.calls[0]
        assert call["attachments"] == []
        assert "Invoice INV-42 from Acme Supplies" in call["prompt"]
        assert "Invoice INV-42" in result.raw_text

    def test_blank_pdf_is_rejected(self, empty_pdf_bytes: bytes) -> None:
        model_client = ExampleClientAdapter(supports_attachments=False)
        processor = _make_processor(model_client, pdf_extractor=PdfPlumberAdapter())
        with pytest.raises(UnsupportedFormatError, match="no extractable text"):
            processor.process_upload("invoice.pdf", "application/pdf", empty_pdf_bytes)
        assert model_client.calls == []

    def test_image_is_rejected(self) -> None:
        model_client = ExampleClientAdapter(supports_attachments=False)
        processor = _make_processor(model_client, pdf_extractor=PdfPlumberAdapter())
        with pytest.raises(UnsupportedFormatError, match="cannot read image/png"):
            processor.process_upload("scan.png", "image/png", b"\x89PNG")


class TestProcessText:
    def test_text_goes_straight_to_extraction(self) -> None:
        model_client = ExampleClientAdapter()
        result = _make_processor(model_client).process_text("Acme INV-1 total 5")
        assert result.raw_text == "Acme INV-1 total 5"


class TestBuilders:
    def test_build_processor_with_multimodal_client(self) -> None:
        settings = Settings(model_provider="example")
        processor = build_processor(settings, ExampleClientAdapter())
        assert processor._pdf_extractor is None

    def test_build_processor_with_text_only_client(self) -> None:
        settings = Settings(model_provider="example", pdf_engine="pdfplumber")
        processor = build_processor(settings, ExampleClientAdapter(supports_attachments=False))
        assert isinstance(processor._pdf_extractor, PdfPlumberAdapter)

    def test_build_processor_creates_client_from_settings(self) -> None:
        processor = build_processor(Settings(model_provider="example"))
        result = processor.process_text("hello")
        assert result.vendor_name == "Example Corp"

    def test_build_analyst_uses_analyst_model(self) -> None:
        model_client = MagicMock()
        model_client.generate.return_value = "answer"
        settings = Settings(analyst_model_name="big-model", analyst_temperature=0.2)
        analyst = build_analyst(settings, model_client)

        analyst.ask("q", [MagicMock(to_dict=lambda: {"vendor": "A"})])

        kwargs = model_client.generate.call_args.kwargs
        assert kwargs["model"] == "big-model"
        assert kwargs["temperature"] == 0.2
