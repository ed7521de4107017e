"""Google Custom Search and Gemini clients over plain HTTP."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from crosscheck.data import SearchItem
from crosscheck.providers.base import ensure_success
from crosscheck.providers.payloads import parse_gemini_text, parse_search_items

if TYPE_CHECKING:
    from crosscheck.config.models import Credentials

GOOGLE_SEARCH_URL = "https://www.googleapis.com/customsearch/v1"
GEMINI_API_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

logger = logging.getLogger(__name__)


class GoogleSearchClient:
    """Web search through the Google Custom Search JSON API.

    Args:
        credentials: Must carry ``google_api_key`` and ``google_search_cx``.
        url: Search endpoint.
        timeout: HTTP timeout in seconds.
    """

    name = "Google Search"

    def __init__(
        self,
        credentials: Credentials,
        *,
        url: str = GOOGLE_SEARCH_URL,
        timeout: float = 30.0,
    ) -> None:
        self._credentials = credentials
        self._url = url
        self._timeout = timeout

    async def fetch(self, query: str) -> list[SearchItem]:
        """Return the search hits for ``query`` in ranked order."""
        params = {
            "key": self._credentials.require("google_api_key"),
            "cx": self._credentials.require("google_search_cx"),
            "q": query,
        }

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.get(self._url, params=params)
        ensure_success(response, self.name)

        items = parse_search_items(response.json())
        logger.debug(f"{self.name} returned {len(items)} items")
        return items


class GeminiClient:
    """Single-turn generation through the Gemini ``generateContent`` API.

    Args:
        credentials: Must carry ``gemini_api_key``.
        model: Gemini model name (default: gemini-1.5-flash).
        timeout: HTTP timeout in seconds.
    """

    name = "Gemini"

    def __init__(
        self,
        credentials: Credentials,
        *,
        model: str = "gemini-1.5-flash",
        timeout: float = 30.0,
    ) -> None:
        self._credentials = credentials
        self._model = model
        self._timeout = timeout

    async def fetch(self, query: str) -> str:
        api_key = self._credentials.require("gemini_api_key")
        body = {"contents": [{"role": "user", "parts": [{"text": query}]}]}

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.post(
                GEMINI_API_URL.format(model=self._model),
                params={"key": api_key},
                json=body,
            )
        ensure_success(response, self.name)

        return parse_gemini_text(response.json())
