"""Normalization of free-text fact-check ratings to numeric scores."""

from dataclasses import dataclass

FALLBACK_SCORE = 50


@dataclass(frozen=True)
class RatingBucket:
    """Keyword synonyms that share one canonical score."""

    keywords: tuple[str, ...]
    score: int


# First match wins: narrower phrases are declared before the broad
# "false" / "true" buckets whose keywords they contain.
RATING_BUCKETS: tuple[RatingBucket, ...] = (
    RatingBucket(("mostly true", "mostly correct"), 85),
    RatingBucket(("half true", "half-true", "partly true"), 60),
    RatingBucket(("mixed", "partly false", "partly incorrect"), 50),
    RatingBucket(("misleading", "unsupported", "unproven"), 35),
    RatingBucket(("mostly false", "mostly incorrect"), 20),
    RatingBucket(("false", "incorrect", "inaccurate", "pants on fire"), 5),
    RatingBucket(("true", "correct", "accurate"), 100),
)


def map_rating_to_score(rating: str) -> int:
    """Map a rating label such as "Mostly True" to a score in [0, 100].

    Labels that match no bucket are treated as uncertain and score
    ``FALLBACK_SCORE``.
    """
    normalized = rating.lower()
    for bucket in RATING_BUCKETS:
        if any(keyword in normalized for keyword in bucket.keywords):
            return bucket.score
    return FALLBACK_SCORE
