"""Vendor response models and the pure functions that normalize them.

Every field is optional at every level. Absent, null or wrongly typed fields
resolve to empty values, and list entries that are not objects are skipped,
so one bad entry never hides its siblings. Parsing never raises.
"""

import logging
from typing import Annotated, Any, TypeVar

from anthropic.types import Message, TextBlock
from openai.types.chat import ChatCompletion
from pydantic import BaseModel, BeforeValidator, Field, ValidationError

from crosscheck.data import Claim, ClaimReview, SearchItem

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class _VendorModel(BaseModel):
    model_config = {"frozen": True, "extra": "ignore", "populate_by_name": True}


def _validate(model: type[M], data: Any) -> M:
    """Validate ``data`` against ``model``, or return an empty instance."""
    try:
        return model.model_validate(data if data is not None else {})
    except ValidationError as e:
        logger.warning(f"Malformed {model.__name__} payload, using defaults. Error: {e}")
        return model()


def _validate_each(model: type[M], entries: list[Any]) -> list[M]:
    """Validate list entries one at a time, skipping those that are not objects."""
    parsed: list[M] = []
    for entry in entries:
        if not isinstance(entry, dict):
            logger.warning(f"Skipping malformed {model.__name__} entry: {entry!r}")
            continue
        parsed.append(_validate(model, entry))
    return parsed


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _dict_or_none(value: Any) -> dict[str, Any] | None:
    return value if isinstance(value, dict) else None


def _list_or_empty(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


LenientStr = Annotated[str | None, BeforeValidator(_str_or_none)]
RawList = Annotated[list[Any], BeforeValidator(_list_or_empty)]
RawObject = Annotated[dict[str, Any] | None, BeforeValidator(_dict_or_none)]


def _first(model: type[M], entries: list[Any]) -> M | None:
    """Validate only the first entry; ``None`` if absent or not an object."""
    if not entries or not isinstance(entries[0], dict):
        return None
    return _validate(model, entries[0])


# ============================================================
# Google Custom Search
# ============================================================


class GoogleSearchHit(_VendorModel):
    title: LenientStr = None
    link: LenientStr = None
    snippet: LenientStr = None


class GoogleSearchResponse(_VendorModel):
    items: RawList = Field(default_factory=list)


def parse_search_items(data: Any) -> list[SearchItem]:
    """Extract ``items[]`` from a Custom Search response."""
    response = _validate(GoogleSearchResponse, data)
    return [
        SearchItem(title=hit.title or "", link=hit.link or "", snippet=hit.snippet or "")
        for hit in _validate_each(GoogleSearchHit, response.items)
    ]


# ============================================================
# Gemini
# ============================================================


class GeminiPart(_VendorModel):
    text: LenientStr = None


class GeminiContent(_VendorModel):
    parts: RawList = Field(default_factory=list)


class GeminiCandidate(_VendorModel):
    content: RawObject = None


class GeminiResponse(_VendorModel):
    candidates: RawList = Field(default_factory=list)


def parse_gemini_text(data: Any) -> str:
    """Extract ``candidates[0].content.parts[0].text``."""
    response = _validate(GeminiResponse, data)
    candidate = _first(GeminiCandidate, response.candidates)
    if candidate is None or candidate.content is None:
        return ""
    part = _first(GeminiPart, _validate(GeminiContent, candidate.content).parts)
    if part is None:
        return ""
    return part.text or ""


# ============================================================
# Chat SDK responses
# ============================================================


def parse_chat_completion_text(response: ChatCompletion) -> str:
    """Extract ``choices[0].message.content`` from an OpenAI completion."""
    if not response.choices:
        return ""
    message = response.choices[0].message
    if message is None:
        return ""
    return message.content or ""


def parse_claude_text(response: Message) -> str:
    """Extract ``content[0].text`` from an Anthropic message."""
    if not response.content:
        return ""
    block = response.content[0]
    if not isinstance(block, TextBlock):
        return ""
    return block.text or ""


# ============================================================
# Fact Check Tools
# ============================================================


class FactCheckPublisher(_VendorModel):
    name: LenientStr = None


class FactCheckReview(_VendorModel):
    textual_rating: LenientStr = Field(default=None, alias="textualRating")
    publisher: RawObject = None


class FactCheckClaim(_VendorModel):
    text: LenientStr = None
    claim_review: RawList = Field(default_factory=list, alias="claimReview")


class FactCheckResponse(_VendorModel):
    claims: RawList = Field(default_factory=list)


def parse_claims(data: Any) -> list[Claim]:
    """Extract ``claims[]`` with the first review of each claim."""
    response = _validate(FactCheckResponse, data)
    claims: list[Claim] = []
    for item in _validate_each(FactCheckClaim, response.claims):
        review: ClaimReview | None = None
        first = _first(FactCheckReview, item.claim_review)
        if first is not None:
            publisher = _validate(FactCheckPublisher, first.publisher)
            review = ClaimReview(rating=first.textual_rating, publisher_name=publisher.name)
        claims.append(Claim(text=item.text or "", review=review))
    return claims
