"""
Client for the Perplexity chat-completions API.
"""
import logging
from typing import Any, Dict, List, Optional

import httpx

from ..core.config import settings

logger = logging.getLogger(__name__)

PERPLEXITY_API_URL = "https://api.perplexity.ai/chat/completions"


class PerplexityError(Exception):
    """Raised when the API key is missing or the API call fails."""


class PerplexityClient:
    """
    Thin async wrapper around one chat-completion call. No retries.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.PERPLEXITY_API_KEY
        self.model = model or settings.PERPLEXITY_MODEL
        self.timeout = timeout if timeout is not None else settings.PERPLEXITY_TIMEOUT_SECONDS
        self.transport = transport

    async def chat(
        self,
        messages: List[Dict[str, str]],
        temperature: float = 0.2,
        max_tokens: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Send a chat completion request.

        Args:
            messages: [{"role": "system"|"user"|"assistant", "content": ...}]
            temperature: Sampling temperature
            max_tokens: Optional completion limit

        Returns:
            The decoded JSON response

        Raises:
            PerplexityError: If no API key is configured or the request fails
        """
        if not self.api_key:
            raise PerplexityError("PERPLEXITY_API_KEY environment variable is not set")

        payload = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
            "frequency_penalty": 1,
            "presence_penalty": 0,
            "top_p": 0.9,
            "top_k": 0,
            "stream": False,
            "return_images": False,
            "return_related_questions": False,
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(PERPLEXITY_API_URL, json=payload, headers=headers)
        except httpx.HTTPError as e:
            raise PerplexityError(f"Perplexity request failed: {e}") from e

        if response.is_error:
            raise PerplexityError(f"Perplexity API error: {response.status_code} {response.text}")

        try:
            return response.json()
        except ValueError as e:
            raise PerplexityError("Perplexity API returned invalid JSON") from e

    async def complete(self, messages: List[Dict[str, str]], temperature: float = 0.2) -> str:
        """
        Send messages and return the content of the first choice.
        """
        data = await self.chat(messages, temperature=temperature)
        try:
            return data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise PerplexityError("Perplexity API response has no choices") from e
