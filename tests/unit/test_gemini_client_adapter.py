from unittest.mock import MagicMock, patch

import httpx
import pytest
from google.genai import errors

from invoice_dashboard.llm.client_base import Attachment
from invoice_dashboard.llm.exceptions import ModelError, ModelNetworkError
from invoice_dashboard.llm.gemini_client_adapter import GeminiClientAdapter


def _make_adapter(mock_client: MagicMock) -> GeminiClientAdapter:
    with patch(
        "invoice_dashboard.llm.gemini_client_adapter.genai.Client",
        return_value=mock_client,
    ):
        return GeminiClientAdapter(api_key="k", timeout_seconds=30)


class TestGeminiClientAdapter:
    def test_returns_text(self) -> None:
        mock_client = MagicMock()
        mock_client.models.generate_content.return_value.text = '{"ok": true}'
        adapter = _make_adapter(mock_client)

        assert adapter.generate(model="gemini-x", temperature=0.0, prompt="p") == '{"ok": true}'
        kwargs = mock_client.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-x"
        assert kwargs["contents"] == ["p"]
        assert kwargs["config"].temperature == 0.0

    def test_attachments_follow_prompt(self) -> None:
        mock_client = MagicMock()
        mock_client.models.generate_content.return_value.text = "{}"
        adapter = _make_adapter(mock_client)

        adapter.generate(
            model="m",
            temperature=0.0,
            prompt="p",
            attachments=[Attachment(data=b"%PDF", mime_type="application/pdf")],
        )

        contents = mock_client.models.generate_content.call_args.kwargs["contents"]
        assert contents[0] == "p"
        assert contents[1].inline_data.data == b"%PDF"
        assert contents[1].inline_data.mime_type == "application/pdf"

    def test_timeout_is_in_milliseconds(self) -> None:
        with patch("invoice_dashboard.llm.gemini_client_adapter.genai.Client") as mock_cls:
            GeminiClientAdapter(api_key="k", timeout_seconds=45)
        assert mock_cls.call_args.kwargs["http_options"].timeout == 45_000

    def test_none_text_raises(self) -> None:
        mock_client = MagicMock()
        mock_client.models.generate_content.return_value.text = None
        adapter = _make_adapter(mock_client)
        with pytest.raises(ModelError, match="empty response"):
            adapter.generate(model="m", temperature=0.0, prompt="p")

    def test_connection_failure(self) -> None:
        mock_client = MagicMock()
        mock_client.models.generate_content.side_effect = httpx.ConnectError("down")
        adapter = _make_adapter(mock_client)
        with pytest.raises(ModelNetworkError, match="network error"):
            adapter.generate(model="m", temperature=0.0, prompt="p")

    def test_api_error(self) -> None:
        mock_client = MagicMock()
        mock_client.models.generate_content.side_effect = errors.APIError(
            429, {"error": {"message": "quota", "status": "RESOURCE_EXHAUSTED"}}
        )
        adapter = _make_adapter(mock_client)
        with pytest.raises(ModelNetworkError, match="API error"):
            adapter.generate(model="m", temperature=0.0, prompt="p")
