import io
from collections.abc import Iterator

import docx
from docx.document import Document
from docx.table import Table
from docx.text.paragraph import Paragraph

from invoice_dashboard.ingestion.base import BaseTextReader
from invoice_dashboard.ingestion.exceptions import DocumentReadError


class DocxReader(BaseTextReader):
    """Extracts the raw text of a Word document body using python-docx.

    Only linear text survives: paragraphs in document order, table cells
    flattened to their paragraphs. Formatting and embedded objects are dropped.
    """

    def read(self, data: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(data))
        except Exception as exc:
            raise DocumentReadError(f"python-docx could not open document: {exc}") from exc
        return "\n\n".join(self._iter_paragraph_text(document)).strip()

    def _iter_paragraph_text(self, document: Document) -> Iterator[str]:
        for block in document.iter_inner_content():
            if isinstance(block, Paragraph):
                yield block.text
            elif isinstance(block, Table):
                yield from self._iter_table_text(block)

    @staticmethod
    def _iter_table_text(table: Table) -> Iterator[str]:
        for row in table.rows:
            seen: set[int] = set()
            for cell in row.cells:
                # Merged cells are returned once per grid column they span.
                if id(cell._tc) in seen:
                    continue
                seen.add(id(cell._tc))
                for paragraph in cell.paragraphs:
                    yield paragraph.text
