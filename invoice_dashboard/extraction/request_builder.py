from dataclasses import dataclass
from pathlib import Path

from invoice_dashboard.extraction.exceptions import MissingInputError
from invoice_dashboard.ingestion.models import BinaryContent
from invoice_dashboard.llm.client_base import Attachment
from invoice_dashboard.prompt_loader import load_prompt

TEXT_SECTION_LABEL = "Invoice Text:"


@dataclass(frozen=True)
class ExtractionRequest:
    """Exact payload handed to the model client."""

    prompt: str
    attachments: tuple[Attachment, ...] = ()


class ExtractionRequestBuilder:
    """Combines the fixed extraction instruction with one piece of input.

    The instruction is a stable contract with the model and is never
    reformatted here.
    """

    def __init__(
        self,
        instruction: str | None = None,
        prompt_path: Path | None = None,
    ) -> None:
        if instruction is None:
            instruction = load_prompt("extraction_prompt.txt", prompt_path)
        self._instruction = instruction

    @property
    def instruction(self) -> str:
        return self._instruction

    def build(
        self,
        *,
        binary: BinaryContent | None = None,
        text: str | None = None,
    ) -> ExtractionRequest:
        """Build a binary (attachment) or text (appended section) request.

        Raises:
            MissingInputError: unless exactly one of ``binary``/``text`` is set.
        """
        if binary is not None and text:
            raise MissingInputError("Provide either a file or text to parse, not both.")
        if binary is not None:
            attachment = Attachment(data=binary.data, mime_type=binary.mime_type)
            return ExtractionRequest(prompt=self._instruction, attachments=(attachment,))
        if text:
            return ExtractionRequest(
                prompt=f"{self._instruction}\n\n{TEXT_SECTION_LABEL}\n{text}"
            )
        raise MissingInputError("You must provide either a file or text to parse.")
