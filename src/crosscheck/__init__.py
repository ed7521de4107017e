"""crosscheck: ask one question to several sources and score it against published fact checks."""

from crosscheck.aggregator import build_summary, map_rating_to_score
from crosscheck.config import CrosscheckConfig, Credentials, create_from_config, load_config
from crosscheck.data import (
    Claim,
    ClaimReview,
    ClaimSummaryItem,
    CredentialCheck,
    FactCheckSummary,
    Failure,
    ProviderResult,
    Query,
    SearchItem,
    SourceId,
    Success,
)
from crosscheck.errors import ConfigurationError, CrosscheckError, ProviderRequestError
from crosscheck.pipeline import Panel, QueryOrchestrator, RunState
from crosscheck.presentation import ConsolePresenter, Presenter, RecordingPresenter
from crosscheck.providers import (
    ChatGPTClient,
    ClaudeClient,
    FactCheckClient,
    GeminiClient,
    GoogleSearchClient,
    ProviderClient,
)

__all__ = [
    # Models
    "Claim",
    "ClaimReview",
    "ClaimSummaryItem",
    "CredentialCheck",
    "FactCheckSummary",
    "Failure",
    "ProviderResult",
    "Query",
    "SearchItem",
    "SourceId",
    "Success",
    # Errors
    "ConfigurationError",
    "CrosscheckError",
    "ProviderRequestError",
    # Config
    "CrosscheckConfig",
    "Credentials",
    "create_from_config",
    "load_config",
    # Aggregation
    "build_summary",
    "map_rating_to_score",
    # Providers
    "ChatGPTClient",
    "ClaudeClient",
    "FactCheckClient",
    "GeminiClient",
    "GoogleSearchClient",
    "ProviderClient",
    # Orchestration
    "ConsolePresenter",
    "Panel",
    "Presenter",
    "QueryOrchestrator",
    "RecordingPresenter",
    "RunState",
]
