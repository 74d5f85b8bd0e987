"""Search result models and enums."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

from pydantic import BaseModel, Field


T = TypeVar("T")


class MatchType(StrEnum):
    """How a candidate matched the query."""

    EXACT = "exact"
    STARTS_WITH = "starts_with"
    CONTAINS = "contains"
    WORD_MATCH = "word_match"
    SIMILAR = "similar"
    ALL = "all"


class ScoreBucket(StrEnum):
    """Coarse score bucket used for UI styling."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    WEAK = "weak"


@dataclass(frozen=True)
class MatchResult(Generic[T]):
    """One ranked search result.

    `item` is the caller's candidate itself, never a copy.
    """

    item: T
    score: float
    similarity: float
    match_type: MatchType
    text: str


class MatchTypeInfo(BaseModel):
    """Display label and color hint for a match type."""

    label: str = Field(..., description="Human-readable label (e.g., 'Starts with')")
    color: str = Field(..., description="Presentation color hint (e.g., 'text-green-600')")
