from collections.abc import Sequence

import httpx
from google import genai
from google.genai import errors, types

from invoice_dashboard.llm.client_base import Attachment, BaseModelClient
from invoice_dashboard.llm.exceptions import ModelError, ModelNetworkError


class GeminiClientAdapter(BaseModelClient):
    """Model client built on the Google Gen AI SDK (Gemini)."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        supports_attachments: bool = True,
    ) -> None:
        # HttpOptions.timeout is expressed in milliseconds.
        self._client = genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=timeout_seconds * 1000),
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
        contents: list[object] = [prompt]
        contents.extend(
            types.Part.from_bytes(data=attachment.data, mime_type=attachment.mime_type)
            for attachment in attachments
        )
        try:
            response = self._client.models.generate_content(
                model=model,
                contents=contents,
                config=types.GenerateContentConfig(temperature=temperature),
            )
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ModelNetworkError(f"AI provider network error: {exc}") from exc
        except errors.APIError as exc:
            raise ModelNetworkError(f"AI provider API error: {exc}") from exc

        text = response.text
        if text is None:
            raise ModelError("AI returned empty response")
        return text
