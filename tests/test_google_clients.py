"""Tests for GoogleSearchClient and GeminiClient."""

from typing import Any

import httpx
import pytest

from crosscheck.config import Credentials
from crosscheck.data import SearchItem
from crosscheck.errors import ConfigurationError, ProviderRequestError
from crosscheck.providers.google import GEMINI_API_URL, GeminiClient, GoogleSearchClient


@pytest.fixture
def search_response_data() -> dict[str, Any]:
    """Sample Custom Search response."""
    return {
        "items": [
            {
                "title": "Is the Earth flat?",
                "link": "https://example.com/flat",
                "snippet": "No.",
            },
            {"title": "Earth", "link": "https://example.org/earth"},
        ]
    }


@pytest.fixture
def gemini_response_data() -> dict[str, Any]:
    """Sample generateContent response."""
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": "It is round."}]}}]}


class TestGoogleSearchClient:
    async def test_fetch_returns_items(
        self,
        credentials: Credentials,
        search_response_data: dict[str, Any],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        captured: dict[str, Any] = {}

        async def mock_get(self: Any, url: str, **kwargs: Any) -> httpx.Response:
            captured["url"] = url
            captured.update(kwargs)
            return httpx.Response(200, json=search_response_data)

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        items = await GoogleSearchClient(credentials).fetch("is the earth flat")

        assert items == [
            SearchItem(title="Is the Earth flat?", link="https://example.com/flat", snippet="No."),
            SearchItem(title="Earth", link="https://example.org/earth", snippet=""),
        ]
        assert captured["url"] == "https://www.googleapis.com/customsearch/v1"
        assert captured["params"] == {"key": "google-key", "cx": "search-cx", "q": "is the earth flat"}

    async def test_fetch_without_items(
        self, credentials: Credentials, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def mock_get(*args: Any, **kwargs: Any) -> httpx.Response:
            return httpx.Response(200, json={"searchInformation": {"totalResults": "0"}})

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        assert await GoogleSearchClient(credentials).fetch("nothing") == []

    async def test_fetch_error_status(
        self, credentials: Credentials, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def mock_get(*args: Any, **kwargs: Any) -> httpx.Response:
            return httpx.Response(403, json={"error": {"message": "forbidden"}})

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        with pytest.raises(ProviderRequestError, match="Google Search request failed.") as info:
            await GoogleSearchClient(credentials).fetch("q")
        assert info.value.status_code == 403

    @pytest.mark.parametrize(
        ("missing", "message"),
        [
            ("google_api_key", "Google API key is not configured."),
            ("google_search_cx", "Google Search CX is not configured."),
        ],
    )
    async def test_missing_credentials_fail_before_network(
        self,
        credentials: Credentials,
        monkeypatch: pytest.MonkeyPatch,
        missing: str,
        message: str,
    ) -> None:
        calls = 0

        async def mock_get(*args: Any, **kwargs: Any) -> httpx.Response:
            nonlocal calls
            calls += 1
            return httpx.Response(200, json={})

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)
        partial = credentials.model_copy(update={missing: None})

        with pytest.raises(ConfigurationError, match=message):
            await GoogleSearchClient(partial).fetch("q")
        assert calls == 0


class TestGeminiClient:
    async def test_fetch_returns_text(
        self,
        credentials: Credentials,
        gemini_response_data: dict[str, Any],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        captured: dict[str, Any] = {}

        async def mock_post(self: Any, url: str, **kwargs: Any) -> httpx.Response:
            captured["url"] = url
            captured.update(kwargs)
            return httpx.Response(200, json=gemini_response_data)

        monkeypatch.setattr(httpx.AsyncClient, "post", mock_post)

        text = await GeminiClient(credentials).fetch("shape of the earth")

        assert text == "It is round."
        assert captured["url"] == GEMINI_API_URL.format(model="gemini-1.5-flash")
        assert captured["params"] == {"key": "gemini-key"}
        assert captured["json"] == {
            "contents": [{"role": "user", "parts": [{"text": "shape of the earth"}]}]
        }

    async def test_custom_model(
        self,
        credentials: Credentials,
        gemini_response_data: dict[str, Any],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        captured: dict[str, Any] = {}

        async def mock_post(self: Any, url: str, **kwargs: Any) -> httpx.Response:
            captured["url"] = url
            return httpx.Response(200, json=gemini_response_data)

        monkeypatch.setattr(httpx.AsyncClient, "post", mock_post)

        await GeminiClient(credentials, model="gemini-2.0-flash").fetch("q")
        assert "models/gemini-2.0-flash:generateContent" in captured["url"]

    async def test_empty_candidates(
        self, credentials: Credentials, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def mock_post(*args: Any, **kwargs: Any) -> httpx.Response:
            return httpx.Response(200, json={"promptFeedback": {"blockReason": "SAFETY"}})

        monkeypatch.setattr(httpx.AsyncClient, "post", mock_post)

        assert await GeminiClient(credentials).fetch("q") == ""

    async def test_error_status(
        self, credentials: Credentials, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def mock_post(*args: Any, **kwargs: Any) -> httpx.Response:
            return httpx.Response(500)

        monkeypatch.setattr(httpx.AsyncClient, "post", mock_post)

        with pytest.raises(ProviderRequestError, match="Gemini request failed."):
            await GeminiClient(credentials).fetch("q")

    async def test_missing_key(self) -> None:
        with pytest.raises(ConfigurationError, match="Gemini API key is not configured."):
            await GeminiClient(Credentials()).fetch("q")
