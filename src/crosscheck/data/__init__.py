"""Data models for crosscheck."""

from crosscheck.data.models import (
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

__all__ = [
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
]
