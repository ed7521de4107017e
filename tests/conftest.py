"""Shared fixtures."""

import pytest

from crosscheck.config import CREDENTIAL_SOURCES, Credentials


@pytest.fixture(autouse=True)
def clean_credential_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep real API keys in the environment out of every test."""
    for env_var, _label in CREDENTIAL_SOURCES.values():
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture
def credentials() -> Credentials:
    """Credentials with every key set."""
    return Credentials(
        google_api_key="google-key",
        google_search_cx="search-cx",
        gemini_api_key="gemini-key",
        openai_api_key="openai-key",
        anthropic_api_key="anthropic-key",
        fact_check_api_key="fact-check-key",
    )
