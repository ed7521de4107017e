from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import anthropic

from crosscheck.errors import ProviderRequestError
from crosscheck.providers.payloads import parse_claude_text

if TYPE_CHECKING:
    from crosscheck.config.models import Credentials

logger = logging.getLogger(__name__)


class ClaudeClient:
    """Ask Claude a single question through Anthropic's Messages API.

    The SDK client is created on first use, once the API key is known to be
    configured, with SDK retries disabled.

    Args:
        credentials: Must carry ``anthropic_api_key``.
        model: Model to use (default: claude-3-5-sonnet-20240620).
        max_tokens: Response token limit (default: 512).
        timeout: HTTP timeout in seconds.
        client: Pre-built SDK client, mainly for tests.
    """

    name = "Claude"

    def __init__(
        self,
        credentials: Credentials,
        *,
        model: str = "claude-3-5-sonnet-20240620",
        max_tokens: int = 512,
        timeout: float = 30.0,
        client: anthropic.AsyncAnthropic | None = None,
    ) -> None:
        self._credentials = credentials
        self._model = model
        self._max_tokens = max_tokens
        self._timeout = timeout
        self._client = client

    async def fetch(self, query: str) -> str:
        api_key = self._credentials.require("anthropic_api_key")
        if self._client is None:
            self._client = anthropic.AsyncAnthropic(
                api_key=api_key, max_retries=0, timeout=self._timeout
            )

        try:
            response = await self._client.messages.create(
                model=self._model,
                max_tokens=self._max_tokens,
                messages=[{"role": "user", "content": query}],
            )
        except anthropic.APIStatusError as e:
            logger.debug(f"Anthropic API error: {e.status_code} - {e.message}")
            raise ProviderRequestError(self.name, e.status_code) from e

        return parse_claude_text(response)
