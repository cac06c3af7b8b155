"""
Hugging Face inference client for text summarization.

Dependencies: httpx
System role: Summarization model provider
"""

import logging
from typing import Any

import httpx

from podcast_analytics.core.exceptions import ProviderError
from podcast_analytics.observability.log_utils import short_error

logger = logging.getLogger(__name__)

SUMMARY_PARAMETERS = {
    "max_length": 130,
    "min_length": 30,
    "do_sample": False,
}


def extract_summary(payload: Any) -> str:
    """
    Pull summary text out of an inference response.

    Accepts summarization output (summary_text), text-generation output
    (generated_text), or a bare string, as a list item or a single object.

    Returns:
        str: Summary text, empty when none was found
    """
    item = payload[0] if isinstance(payload, list) and payload else payload
    if isinstance(item, str):
        return item.strip()
    if isinstance(item, dict):
        text = item.get("summary_text") or item.get("generated_text") or ""
        return str(text).strip()
    return ""


class SummarizerClient:
    """
    POSTs text to a summarization inference endpoint.

    Args:
        api_url: Inference endpoint URL
        token: Optional Hugging Face API token
        timeout: Request timeout in seconds
        http_client: Shared AsyncClient (injected in tests); a short-lived
            client is opened per call otherwise
    """

    def __init__(
        self,
        api_url: str,
        token: str | None = None,
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.api_url = api_url
        self.timeout = timeout
        self._headers = {"Content-Type": "application/json"}
        if token:
            self._headers["Authorization"] = f"Bearer {token}"
        self._http_client = http_client

    async def _post(self, client: httpx.AsyncClient, body: dict[str, Any]) -> httpx.Response:
        return await client.post(
            self.api_url,
            json=body,
            headers=self._headers,
            timeout=self.timeout,
        )

    async def summarize(self, text: str) -> str:
        """
        Summarize text.

        Args:
            text: Input text

        Returns:
            str: Summary, empty when the model returned nothing usable

        Raises:
            ProviderError: On transport errors, non-2xx responses, or model errors
        """
        body = {"inputs": text, "parameters": SUMMARY_PARAMETERS}
        try:
            if self._http_client is not None:
                response = await self._post(self._http_client, body)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._post(client, body)
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"{__name__}:summarize - request failed - {type(e).__name__}: {e}")
            raise ProviderError(
                "Summarization request failed",
                provider="huggingface",
                details={"error": short_error(e)},
            ) from e

        if isinstance(payload, dict) and payload.get("error"):
            # Model cold start or quota responses arrive as 200 on some endpoints
            raise ProviderError(
                "Summarization model error",
                provider="huggingface",
                details={"error": str(payload["error"])[:200]},
            )

        return extract_summary(payload)
