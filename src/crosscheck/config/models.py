"""Pydantic configuration models for crosscheck."""

import os
from typing import Any

from pydantic import BaseModel, Field, model_validator

from crosscheck.data import CredentialCheck
from crosscheck.errors import ConfigurationError

# ============================================================
# Credentials
# ============================================================

# field name -> (environment variable, label used in error messages)
CREDENTIAL_SOURCES: dict[str, tuple[str, str]] = {
    "google_api_key": ("GOOGLE_API_KEY", "Google API key"),
    "google_search_cx": ("GOOGLE_SEARCH_CX", "Google Search CX"),
    "gemini_api_key": ("GEMINI_API_KEY", "Gemini API key"),
    "openai_api_key": ("OPENAI_API_KEY", "OpenAI API key"),
    "anthropic_api_key": ("ANTHROPIC_API_KEY", "Anthropic API key"),
    "fact_check_api_key": ("FACT_CHECK_API_KEY", "Fact Check API key"),
}


class Credentials(BaseModel):
    """API credentials for every provider.

    Keys accept both snake_case names and the camelCase names used by the
    browser extension's ``config.js`` (``googleApiKey``, ...). Keys that are
    not given fall back to environment variables.
    """

    google_api_key: str | None = Field(default=None, alias="googleApiKey")
    google_search_cx: str | None = Field(default=None, alias="googleSearchCx")
    gemini_api_key: str | None = Field(default=None, alias="geminiApiKey")
    openai_api_key: str | None = Field(default=None, alias="openaiApiKey")
    anthropic_api_key: str | None = Field(default=None, alias="anthropicApiKey")
    fact_check_api_key: str | None = Field(default=None, alias="factCheckApiKey")

    model_config = {"frozen": True, "populate_by_name": True}

    @model_validator(mode="before")
    @classmethod
    def fill_from_environment(cls, data: Any) -> Any:
        if data is None:
            data = {}
        if not isinstance(data, dict):
            return data
        resolved = dict(data)
        for name, (env_var, _label) in CREDENTIAL_SOURCES.items():
            alias = cls.model_fields[name].alias
            if resolved.get(name) or (alias and resolved.get(alias)):
                continue
            value = os.environ.get(env_var)
            if value:
                resolved[name] = value
        return resolved

    def require(self, name: str) -> str:
        """Return a credential, raising ConfigurationError if it is unset."""
        value = getattr(self, name)
        if not value:
            _env_var, label = CREDENTIAL_SOURCES[name]
            raise ConfigurationError(name, label)
        return value

    def check(self) -> CredentialCheck:
        """Report which credentials are missing without raising."""
        missing = tuple(name for name in CREDENTIAL_SOURCES if not getattr(self, name))
        return CredentialCheck(missing=missing)


# ============================================================
# Provider Configs
# ============================================================


class GoogleSearchConfig(BaseModel):
    """Configuration for GoogleSearchClient."""

    url: str = "https://www.googleapis.com/customsearch/v1"

    model_config = {"frozen": True}


class GeminiConfig(BaseModel):
    """Configuration for GeminiClient."""

    model: str = "gemini-1.5-flash"

    model_config = {"frozen": True}


class ChatGPTConfig(BaseModel):
    """Configuration for ChatGPTClient."""

    model: str = Field(default="gpt-4o-mini", alias="openaiModel")
    temperature: float = 0.2

    model_config = {"frozen": True, "populate_by_name": True}


class ClaudeConfig(BaseModel):
    """Configuration for ClaudeClient."""

    model: str = Field(default="claude-3-5-sonnet-20240620", alias="anthropicModel")
    max_tokens: int = 512

    model_config = {"frozen": True, "populate_by_name": True}


class FactCheckConfig(BaseModel):
    """Configuration for FactCheckClient."""

    url: str = "https://factchecktools.googleapis.com/v1alpha1/claims:search"
    page_size: int = 10

    model_config = {"frozen": True}


class ProvidersConfig(BaseModel):
    """Per-provider settings."""

    google: GoogleSearchConfig = Field(default_factory=GoogleSearchConfig)
    gemini: GeminiConfig = Field(default_factory=GeminiConfig)
    chatgpt: ChatGPTConfig = Field(default_factory=ChatGPTConfig)
    claude: ClaudeConfig = Field(default_factory=ClaudeConfig)
    fact_check: FactCheckConfig = Field(default_factory=FactCheckConfig)

    model_config = {"frozen": True}


# ============================================================
# Transport Config
# ============================================================


class HttpConfig(BaseModel):
    """Settings shared by every outbound HTTP call."""

    timeout_seconds: float = 30.0

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class CrosscheckConfig(BaseModel):
    """Root configuration for crosscheck."""

    credentials: Credentials = Field(default_factory=Credentials)
    providers: ProvidersConfig = Field(default_factory=ProvidersConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)

    model_config = {"frozen": True}
