"""
Google Gemini text generation client.

Dependencies: google-genai, httpx, asyncio
System role: Generative model provider for AI insights
"""

import asyncio
import logging
from typing import Any

import httpx
from google import genai
from google.genai import errors as genai_errors

from podcast_analytics.core.exceptions import ProviderError
from podcast_analytics.observability.log_utils import short_error

logger = logging.getLogger(__name__)


class GeminiClient:
    """
    Single-prompt text generation.

    Args:
        api_key: Gemini API key
        model: Model ID (e.g. gemini-2.5-flash)
        client: Prebuilt genai.Client (injected in tests)
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gemini-2.5-flash",
        client: Any = None,
    ) -> None:
        self.model = model
        self._client = client or genai.Client(api_key=api_key)

    async def generate(self, prompt: str) -> str:
        """
        Generate text for a prompt.

        Args:
            prompt: Full prompt text

        Returns:
            str: Model output text

        Raises:
            ProviderError: If the API call fails or returns no text
        """
        logger.info(f"{__name__}:generate - START model={self.model} prompt_len={len(prompt)}")
        try:
            response = await asyncio.to_thread(
                self._client.models.generate_content,
                model=self.model,
                contents=prompt,
            )
        except (genai_errors.APIError, httpx.HTTPError) as e:
            logger.error(
                f"{__name__}:generate - FAILED - {type(e).__name__}: {e}",
                exc_info=True,
            )
            raise ProviderError(
                "Gemini request failed",
                provider="gemini",
                details={"error": short_error(e)},
            ) from e

        text = response.text
        if not text:
            raise ProviderError("Gemini returned an empty response", provider="gemini")

        logger.info(f"{__name__}:generate - END text_len={len(text)}")
        return text
