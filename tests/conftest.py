import io

import docx
import openpyxl
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from invoice_dashboard.llm.example_client_adapter import ExampleClientAdapter


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page invoice PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Invoice INV-42 from Acme Supplies")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """Word document with two paragraphs and a 2x2 table between them."""
    document = docx.Document()
    document.add_paragraph("Invoice INV-7")
    table = document.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "Item"
    table.cell(0, 1).text = "Price"
    table.cell(1, 0).text = "Widget"
    table.cell(1, 1).text = "12.50"
    document.add_paragraph("Total due: 12.50")
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def sample_xlsx_bytes() -> bytes:
    """Workbook with two sheets: line items and a one-cell summary."""
    workbook = openpyxl.Workbook()
    items = workbook.active
    items.title = "Items"
    items.append(["Item", "Qty", "Price"])
    items.append(["Widget", 2, 12.5])
    items.append(["Gadget, large", 1, 30])
    summary = workbook.create_sheet("Summary")
    summary.append(["Total", 55])
    buf = io.BytesIO()
    workbook.save(buf)
    return buf.getvalue()


@pytest.fixture()
def example_client() -> ExampleClientAdapter:
    return ExampleClientAdapter()
