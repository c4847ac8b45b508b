"""Deterministic model client for local development and tests.

Implement BaseModelClient and register the provider in ModelClientFactory
when adding a real provider.
"""

import json
from collections.abc import Sequence
from typing import ClassVar

from invoice_dashboard.llm.client_base import Attachment, BaseModelClient


class ExampleClientAdapter(BaseModelClient):
    """Returns a fixed response and records every call. No network access."""

    DEFAULT_RESPONSE: ClassVar[str] = json.dumps(
        {
            "vendor_name": "Example Corp",
            "invoice_id": "INV-123",
            "invoice_date": "2023-10-28",
            "total_amount": 450.75,
            "currency": "$",
            "raw_text": "",
        },
        separators=(",", ":"),
    )

    def __init__(self, response: str | None = None, supports_attachments: bool = True) -> None:
        self._response = self.DEFAULT_RESPONSE if response is None else response
        self.supports_attachments = supports_attachments
        self.calls: list[dict[str, object]] = []

    def generate(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        attachments: Sequence[Attachment] = (),
    ) -> str:
        self.calls.append(
            {
                "model": model,
                "temperature": temperature,
                "prompt": prompt,
                "attachments": list(attachments),
            }
        )
        return self._response
