"""
Tests for the Gemini and summarization model clients.

System role: Verification of model call wrapping and response parsing
"""

import json
from unittest.mock import MagicMock

import httpx
import pytest

from podcast_analytics.boundary.providers.gemini_client import GeminiClient
from podcast_analytics.boundary.providers.summarizer_client import (
    SummarizerClient,
    extract_summary,
)
from podcast_analytics.core.exceptions import ProviderError

API_URL = "https://api-inference.huggingface.co/models/facebook/bart-large-cnn"


class TestGeminiClient:
    @pytest.mark.asyncio
    async def test_returns_response_text(self) -> None:
        genai_client = MagicMock()
        genai_client.models.generate_content.return_value = MagicMock(text="Grow on Tuesdays.")
        client = GeminiClient(model="gemini-test", client=genai_client)

        text = await client.generate("prompt")

        assert text == "Grow on Tuesdays."
        genai_client.models.generate_content.assert_called_once_with(
            model="gemini-test",
            contents="prompt",
        )

    @pytest.mark.asyncio
    async def test_transport_error_mapped(self) -> None:
        genai_client = MagicMock()
        genai_client.models.generate_content.side_effect = httpx.ConnectError("offline")

        with pytest.raises(ProviderError, match="Gemini request failed"):
            await GeminiClient(client=genai_client).generate("prompt")

    @pytest.mark.asyncio
    async def test_empty_text(self) -> None:
        genai_client = MagicMock()
        genai_client.models.generate_content.return_value = MagicMock(text=None)

        with pytest.raises(ProviderError, match="empty response"):
            await GeminiClient(client=genai_client).generate("prompt")


@pytest.mark.parametrize(
    "payload,expected",
    [
        ([{"summary_text": " Short. "}], "Short."),
        ({"generated_text": "Generated"}, "Generated"),
        (["plain"], "plain"),
        ([], ""),
        (42, ""),
    ],
)
def test_extract_summary(payload, expected) -> None:
    assert extract_summary(payload) == expected


def _summarizer(handler) -> SummarizerClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return SummarizerClient(API_URL, token="hf_test", http_client=http_client)


class TestSummarizerClient:
    @pytest.mark.asyncio
    async def test_posts_inputs_and_parameters(self) -> None:
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["body"] = json.loads(request.content)
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(200, json=[{"summary_text": "A summary."}])

        summary = await _summarizer(handler).summarize("Long text")

        assert summary == "A summary."
        assert seen["body"]["inputs"] == "Long text"
        assert seen["body"]["parameters"]["max_length"] == 130
        assert seen["auth"] == "Bearer hf_test"

    @pytest.mark.asyncio
    async def test_http_status_error(self) -> None:
        client = _summarizer(lambda request: httpx.Response(503, json={"error": "loading"}))

        with pytest.raises(ProviderError, match="Summarization request failed"):
            await client.summarize("text")

    @pytest.mark.asyncio
    async def test_model_error_payload(self) -> None:
        client = _summarizer(lambda request: httpx.Response(200, json={"error": "quota"}))

        with pytest.raises(ProviderError, match="Summarization model error"):
            await client.summarize("text")

    @pytest.mark.asyncio
    async def test_non_json_body(self) -> None:
        client = _summarizer(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(ProviderError):
            await client.summarize("text")
