from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Attachment:
    """Inline binary part sent alongside a prompt."""

    data: bytes = field(repr=False)
    mime_type: str


class BaseModelClient(ABC):
    """Contract for provider-specific generative model clients."""

    supports_attachments: bool = True

    @abstractmethod
    def generate(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        attachments: Sequence[Attachment] = (),
    ) -> str:
        """Return the provider response as plain text.

        Raises:
            ModelNetworkError: on transport or API failures.
            ModelError: when the provider returns no text.
        """
