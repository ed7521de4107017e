"""Core data models for crosscheck."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class SourceId(StrEnum):
    """Presentation areas, one per source."""

    GEMINI = "gemini"
    GOOGLE = "google"
    CLAUDE = "claude"
    CHATGPT = "chatgpt"
    FACT_CHECK = "fact-check"


@dataclass(frozen=True)
class Query:
    """A single user query. Always non-empty and trimmed."""

    text: str

    def __post_init__(self) -> None:
        if not self.text or self.text != self.text.strip():
            raise ValueError("Query text must be non-empty and trimmed")

    @classmethod
    def parse(cls, raw: str) -> "Query | None":
        """Build a query from raw user input, or None if it is blank."""
        text = raw.strip()
        if not text:
            return None
        return cls(text=text)


@dataclass(frozen=True)
class SearchItem:
    """A single web search hit."""

    title: str = ""
    link: str = ""
    snippet: str = ""


@dataclass(frozen=True)
class ClaimReview:
    """First review attached to a fact-checked claim."""

    rating: str | None = None
    publisher_name: str | None = None


@dataclass(frozen=True)
class Claim:
    """A claim returned by the fact-check provider."""

    text: str = ""
    review: ClaimReview | None = None


@dataclass(frozen=True)
class ClaimSummaryItem:
    """Display row for one claim in a fact-check summary."""

    text: str
    rating: str
    publisher: str


@dataclass(frozen=True)
class FactCheckSummary:
    """Aggregate fact-check result for one query.

    ``truth_score`` is None when no ratings were available; it is displayed
    as ``"--"``.
    """

    truth_score: int | None
    coverage_score: str
    items: tuple[ClaimSummaryItem, ...] = ()
    message: str | None = None

    @property
    def truth_score_display(self) -> str:
        if self.truth_score is None:
            return "--"
        return f"{self.truth_score}%"


@dataclass(frozen=True)
class Success(Generic[T]):
    """Provider call that produced a payload."""

    payload: T


@dataclass(frozen=True)
class Failure:
    """Provider call that failed."""

    error: BaseException

    @property
    def message(self) -> str:
        return str(self.error) or "Request failed."


ProviderResult = Success[T] | Failure


@dataclass(frozen=True)
class CredentialCheck:
    """Outcome of validating configured credentials."""

    missing: tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.missing
