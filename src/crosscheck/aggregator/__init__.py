from crosscheck.aggregator.factcheck import (
    MAX_CLAIM_COUNT,
    MAX_DISPLAYED_CLAIMS,
    build_summary,
    compute_coverage_score,
    compute_truth_score,
)
from crosscheck.aggregator.ratings import (
    FALLBACK_SCORE,
    RATING_BUCKETS,
    RatingBucket,
    map_rating_to_score,
)

__all__ = [
    "FALLBACK_SCORE",
    "MAX_CLAIM_COUNT",
    "MAX_DISPLAYED_CLAIMS",
    "RATING_BUCKETS",
    "RatingBucket",
    "build_summary",
    "compute_coverage_score",
    "compute_truth_score",
    "map_rating_to_score",
]
