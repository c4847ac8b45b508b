from abc import ABC, abstractmethod


class BaseTextReader(ABC):
    """Contract for format-specific document-to-text readers."""

    @abstractmethod
    def read(self, data: bytes) -> str:
        """Flatten document bytes into linear text.

        Args:
            data: Raw file content.

        Returns:
            The document's textual representation.

        Raises:
            DocumentReadError: if the document cannot be decoded.
        """
