from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from openai import APIStatusError, AsyncOpenAI

from crosscheck.errors import ProviderRequestError
from crosscheck.providers.payloads import parse_chat_completion_text

if TYPE_CHECKING:
    from crosscheck.config.models import Credentials

logger = logging.getLogger(__name__)


class ChatGPTClient:
    """Ask ChatGPT a single question through the Chat Completions API.

    Args:
        credentials: Must carry ``openai_api_key``.
        model: Model to use (default: gpt-4o-mini).
        temperature: Sampling temperature (default: 0.2).
        timeout: HTTP timeout in seconds.
        client: Pre-built SDK client, mainly for tests.
    """

    name = "ChatGPT"

    def __init__(
        self,
        credentials: Credentials,
        *,
        model: str = "gpt-4o-mini",
        temperature: float = 0.2,
        timeout: float = 30.0,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self._credentials = credentials
        self._model = model
        self._temperature = temperature
        self._timeout = timeout
        self._client = client

    async def fetch(self, query: str) -> str:
        api_key = self._credentials.require("openai_api_key")
        if self._client is None:
            self._client = AsyncOpenAI(api_key=api_key, max_retries=0, timeout=self._timeout)

        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[{"role": "user", "content": query}],
                temperature=self._temperature,
            )
        except APIStatusError as e:
            logger.debug(f"OpenAI API error: {e.status_code} - {e.message}")
            raise ProviderRequestError(self.name, e.status_code) from e

        return parse_chat_completion_text(response)
