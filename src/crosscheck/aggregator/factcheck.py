"""Reduce fact-check claims to a truth score and a coverage score."""

import logging
import math
from collections.abc import Sequence

from crosscheck.aggregator.ratings import map_rating_to_score
from crosscheck.data import Claim, ClaimSummaryItem, FactCheckSummary

logger = logging.getLogger(__name__)

MAX_CLAIM_COUNT = 10
MAX_DISPLAYED_CLAIMS = 3
NO_CLAIMS_MESSAGE = "No claims found."
UNRATED = "Unrated"
UNKNOWN_PUBLISHER = "Unknown source"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def compute_truth_score(ratings: Sequence[str]) -> int | None:
    """Average the normalized scores of ``ratings``.

    Returns None when there are no ratings.
    """
    if not ratings:
        return None
    scores = [map_rating_to_score(rating) for rating in ratings]
    return _round_half_up(sum(scores) / len(scores))


def compute_coverage_score(claim_count: int) -> str:
    """Percentage of ``MAX_CLAIM_COUNT`` claims found, e.g. ``"40%"``."""
    capped = min(claim_count, MAX_CLAIM_COUNT)
    return f"{_round_half_up(capped * 100 / MAX_CLAIM_COUNT)}%"


def build_summary(claims: Sequence[Claim]) -> FactCheckSummary:
    """Build the presentation summary for a list of claims.

    Only the first ``MAX_DISPLAYED_CLAIMS`` claims are displayed, and the
    truth score is averaged over those displayed claims alone. Coverage
    counts every claim received, capped at ``MAX_CLAIM_COUNT``.

    Args:
        claims: Claims in the order the provider returned them.

    Returns:
        The fact-check summary. Never raises.
    """
    if not claims:
        return FactCheckSummary(
            truth_score=None,
            coverage_score="0%",
            message=NO_CLAIMS_MESSAGE,
        )

    ratings: list[str] = []
    items: list[ClaimSummaryItem] = []
    for claim in claims[:MAX_DISPLAYED_CLAIMS]:
        review = claim.review
        rating = (review.rating if review else None) or UNRATED
        publisher = (review.publisher_name if review else None) or UNKNOWN_PUBLISHER
        ratings.append(rating)
        items.append(ClaimSummaryItem(text=claim.text, rating=rating, publisher=publisher))

    summary = FactCheckSummary(
        truth_score=compute_truth_score(ratings),
        coverage_score=compute_coverage_score(len(claims)),
        items=tuple(items),
    )
    logger.debug(
        f"Fact check summary: {len(claims)} claims, truth {summary.truth_score_display}, "
        f"coverage {summary.coverage_score}"
    )
    return summary
