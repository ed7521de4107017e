"""Google Fact Check Tools claim search."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from crosscheck.data import Claim
from crosscheck.providers.base import ensure_success
from crosscheck.providers.payloads import parse_claims

if TYPE_CHECKING:
    from crosscheck.config.models import Credentials

FACT_CHECK_API_URL = "https://factchecktools.googleapis.com/v1alpha1/claims:search"

logger = logging.getLogger(__name__)


class FactCheckClient:
    """Search published fact checks matching a query.

    Returns the raw claims; scoring is left to the aggregator.

    Args:
        credentials: Must carry ``fact_check_api_key``.
        url: Claim search endpoint.
        page_size: Number of claims to request (default 10).
        timeout: HTTP timeout in seconds.
    """

    name = "Fact Check"

    def __init__(
        self,
        credentials: Credentials,
        *,
        url: str = FACT_CHECK_API_URL,
        page_size: int = 10,
        timeout: float = 30.0,
    ) -> None:
        self._credentials = credentials
        self._url = url
        self._page_size = page_size
        self._timeout = timeout

    async def fetch(self, query: str) -> list[Claim]:
        params: dict[str, str | int] = {
            "key": self._credentials.require("fact_check_api_key"),
            "query": query,
            "pageSize": self._page_size,
        }

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.get(self._url, params=params)
        ensure_success(response, self.name)

        claims = parse_claims(response.json())
        logger.debug(f"{self.name} returned {len(claims)} claims")
        return claims
