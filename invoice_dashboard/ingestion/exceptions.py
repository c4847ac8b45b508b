class IngestionError(Exception):
    """Raised when an uploaded document cannot be turned into model input."""


class UnsupportedFormatError(IngestionError):
    """Raised when a document matches none of the recognized formats."""


class FileTooLargeError(IngestionError):
    """Raised when an upload exceeds the maximum accepted size."""

    def __init__(self, size_bytes: int, max_bytes: int) -> None:
        self.size_bytes = size_bytes
        self.max_bytes = max_bytes
        super().__init__(
            f"File is too large ({size_bytes} bytes). Max size is {max_bytes} bytes."
        )


class DocumentReadError(IngestionError):
    """Raised when a recognized document is corrupt or cannot be decoded."""
