"""Configuration module for crosscheck."""

from crosscheck.config.factory import create_fact_checker, create_from_config, create_panels
from crosscheck.config.loader import get_default_config_path, load_config
from crosscheck.config.models import (
    CREDENTIAL_SOURCES,
    ChatGPTConfig,
    ClaudeConfig,
    Credentials,
    CrosscheckConfig,
    FactCheckConfig,
    GeminiConfig,
    GoogleSearchConfig,
    HttpConfig,
    ProvidersConfig,
)

__all__ = [
    "CREDENTIAL_SOURCES",
    "ChatGPTConfig",
    "ClaudeConfig",
    "Credentials",
    "CrosscheckConfig",
    "FactCheckConfig",
    "GeminiConfig",
    "GoogleSearchConfig",
    "HttpConfig",
    "ProvidersConfig",
    "create_fact_checker",
    "create_from_config",
    "create_panels",
    "get_default_config_path",
    "load_config",
]
