from typing import Protocol, TypeVar

import httpx

from crosscheck.errors import ProviderRequestError

T_co = TypeVar("T_co", covariant=True)


class ProviderClient(Protocol[T_co]):
    """Interface for a single information source.

    Implementations perform exactly one outbound call per ``fetch`` and never
    retry.
    """

    name: str

    async def fetch(self, query: str) -> T_co:
        """Ask the provider about ``query``.

        Args:
            query: Trimmed, non-empty user query.

        Returns:
            Provider-specific payload.

        Raises:
            ConfigurationError: If a required credential is missing. Raised
                before any network call.
            ProviderRequestError: If the provider answered with a
                non-success status.
        """
        ...


def ensure_success(response: httpx.Response, provider: str) -> None:
    """Raise ProviderRequestError unless ``response`` has a 2xx status."""
    if not response.is_success:
        raise ProviderRequestError(provider, response.status_code)
