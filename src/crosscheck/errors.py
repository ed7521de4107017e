"""Exception types raised by provider clients."""


class CrosscheckError(Exception):
    """Base class for crosscheck errors."""


class ConfigurationError(CrosscheckError):
    """A required credential is missing.

    Raised before any network call is made.

    Args:
        credential: Config field name of the missing credential.
        label: Human-readable credential name used in the message.
    """

    def __init__(self, credential: str, label: str) -> None:
        super().__init__(f"{label} is not configured.")
        self.credential = credential
        self.label = label


class ProviderRequestError(CrosscheckError):
    """A provider answered with a non-success HTTP status.

    Args:
        provider: Display name of the provider (e.g. "Gemini").
        status_code: HTTP status code, if known.
    """

    def __init__(self, provider: str, status_code: int | None = None) -> None:
        super().__init__(f"{provider} request failed.")
        self.provider = provider
        self.status_code = status_code
