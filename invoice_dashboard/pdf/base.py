from abc import ABC, abstractmethod
from typing import ClassVar


class BasePdfExtractor(ABC):
    """Contract for PDF-to-text engines used when a model cannot read PDFs."""

    engine: ClassVar[str]

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Return the text of every page, pages separated by a blank line.

        Raises:
            PdfExtractionError: if the engine cannot read the document.
        """
