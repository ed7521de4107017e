"""Factory functions to create components from configuration."""

from crosscheck.config.models import CrosscheckConfig
from crosscheck.data import SourceId
from crosscheck.pipeline.orchestrator import Panel, QueryOrchestrator
from crosscheck.presentation.base import Presenter
from crosscheck.presentation.formatting import format_search_results, format_text_response
from crosscheck.providers import (
    ChatGPTClient,
    ClaudeClient,
    FactCheckClient,
    GeminiClient,
    GoogleSearchClient,
)


def create_fact_checker(config: CrosscheckConfig) -> FactCheckClient:
    """Create the fact-check client from config."""
    return FactCheckClient(
        config.credentials,
        url=config.providers.fact_check.url,
        page_size=config.providers.fact_check.page_size,
        timeout=config.http.timeout_seconds,
    )


def create_panels(config: CrosscheckConfig) -> list[Panel]:
    """Create the four provider panels in display order."""
    credentials = config.credentials
    providers = config.providers
    timeout = config.http.timeout_seconds

    return [
        Panel(
            source=SourceId.GEMINI,
            client=GeminiClient(credentials, model=providers.gemini.model, timeout=timeout),
            formatter=format_text_response,
            loading_message="Loading Gemini response...",
        ),
        Panel(
            source=SourceId.GOOGLE,
            client=GoogleSearchClient(credentials, url=providers.google.url, timeout=timeout),
            formatter=format_search_results,
            loading_message="Loading Google results...",
        ),
        Panel(
            source=SourceId.CLAUDE,
            client=ClaudeClient(
                credentials,
                model=providers.claude.model,
                max_tokens=providers.claude.max_tokens,
                timeout=timeout,
            ),
            formatter=format_text_response,
            loading_message="Loading Claude response...",
        ),
        Panel(
            source=SourceId.CHATGPT,
            client=ChatGPTClient(
                credentials,
                model=providers.chatgpt.model,
                temperature=providers.chatgpt.temperature,
                timeout=timeout,
            ),
            formatter=format_text_response,
            loading_message="Loading ChatGPT response...",
        ),
    ]


def create_from_config(config: CrosscheckConfig, presenter: Presenter) -> QueryOrchestrator:
    """Create a complete orchestrator from root config.

    Args:
        config: Root configuration.
        presenter: Sink for display updates.

    Returns:
        Orchestrator whose ``credential_check`` reports missing keys.
    """
    return QueryOrchestrator(
        fact_checker=create_fact_checker(config),
        panels=create_panels(config),
        presenter=presenter,
        credentials=config.credentials,
    )
