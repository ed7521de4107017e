from crosscheck.providers.base import ProviderClient
from crosscheck.providers.chatgpt import ChatGPTClient
from crosscheck.providers.claude import ClaudeClient
from crosscheck.providers.factcheck import FactCheckClient
from crosscheck.providers.google import GeminiClient, GoogleSearchClient

__all__ = [
    "ChatGPTClient",
    "ClaudeClient",
    "FactCheckClient",
    "GeminiClient",
    "GoogleSearchClient",
    "ProviderClient",
]
