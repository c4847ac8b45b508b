import base64
from collections.abc import Sequence

import httpx
import openai

from invoice_dashboard.llm.client_base import Attachment, BaseModelClient
from invoice_dashboard.llm.exceptions import ModelError, ModelNetworkError


class OpenAIClientAdapter(BaseModelClient):
    """Model client built on the OpenAI-compatible chat completions API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        supports_attachments: bool = True,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )
        self.supports_attachments = supports_attachments

    def generate(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        attachments: Sequence[Attachment] = (),
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=[{"role": "user", "content": self._build_content(prompt, attachments)}],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ModelNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise ModelNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise ModelError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise ModelError("AI returned empty response")
        return content

    @staticmethod
    def _build_content(
        prompt: str, attachments: Sequence[Attachment]
    ) -> str | list[dict[str, object]]:
        if not attachments:
            return prompt
        parts: list[dict[str, object]] = [{"type": "text", "text": prompt}]
        for attachment in attachments:
            encoded = base64.b64encode(attachment.data).decode("ascii")
            data_url = f"data:{attachment.mime_type};base64,{encoded}"
            if attachment.mime_type.startswith("image/"):
                parts.append({"type": "image_url", "image_url": {"url": data_url}})
            else:
                parts.append(
                    {
                        "type": "file",
                        "file": {"filename": "invoice.pdf", "file_data": data_url},
                    }
                )
        return parts
