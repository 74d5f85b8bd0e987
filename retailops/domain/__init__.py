"""Domain models and DTOs."""

from retailops.domain.product import Product
from retailops.domain.search import MatchResult, MatchType, MatchTypeInfo, ScoreBucket


__all__ = [
    "MatchResult",
    "MatchType",
    "MatchTypeInfo",
    "Product",
    "ScoreBucket",
]
