from dataclasses import dataclass, field
from pathlib import PurePath

from invoice_dashboard.ingestion.exceptions import FileTooLargeError

MAX_UPLOAD_BYTES = 5_242_880


@dataclass(frozen=True)
class UploadedDocument:
    """A file as received from the user. Immutable once constructed."""

    name: str
    mime_type: str
    size_bytes: int
    data: bytes = field(repr=False)

    def __post_init__(self) -> None:
        if self.size_bytes > MAX_UPLOAD_BYTES:
            raise FileTooLargeError(self.size_bytes, MAX_UPLOAD_BYTES)

    @classmethod
    def from_bytes(cls, name: str, mime_type: str, data: bytes) -> "UploadedDocument":
        return cls(name=name, mime_type=mime_type, size_bytes=len(data), data=data)

    @property
    def extension(self) -> str:
        """Lowercased file suffix including the dot, e.g. ``.xlsx``."""
        return PurePath(self.name.lower()).suffix


@dataclass(frozen=True)
class TextContent:
    """Flattened textual representation of a document."""

    value: str


@dataclass(frozen=True)
class BinaryContent:
    """Document bytes passed through untouched for multimodal models."""

    data: bytes = field(repr=False)
    mime_type: str


NormalizedContent = TextContent | BinaryContent
