"""Static display lookups for search results.

Labels and color hints live here so the dashboard vocabulary can change in
one place.
"""

from retailops.core.config import constants
from retailops.domain.search import MatchType, MatchTypeInfo, ScoreBucket


_MATCH_TYPE_INFO: dict[MatchType, MatchTypeInfo] = {
    MatchType.EXACT: MatchTypeInfo(label="Exact match", color="text-green-700"),
    MatchType.STARTS_WITH: MatchTypeInfo(label="Starts with", color="text-green-600"),
    MatchType.CONTAINS: MatchTypeInfo(label="Contains", color="text-blue-600"),
    MatchType.WORD_MATCH: MatchTypeInfo(label="Word match", color="text-purple-600"),
    MatchType.SIMILAR: MatchTypeInfo(label="Similar", color="text-yellow-600"),
    MatchType.ALL: MatchTypeInfo(label="All products", color="text-gray-500"),
}

_DEFAULT_MATCH_TYPE_INFO = MatchTypeInfo(label="Match", color="text-gray-600")

_SCORE_BUCKET_COLORS: dict[ScoreBucket, str] = {
    ScoreBucket.HIGH: "text-green-600",
    ScoreBucket.MEDIUM: "text-blue-600",
    ScoreBucket.LOW: "text-yellow-600",
    ScoreBucket.WEAK: "text-gray-600",
}


def get_match_type_info(match_type: MatchType | str | None) -> MatchTypeInfo:
    """Get the display label and color hint for a match type.

    Unknown tags fall back to a generic "Match" label.
    """
    try:
        return _MATCH_TYPE_INFO[MatchType(match_type)]
    except ValueError:
        return _DEFAULT_MATCH_TYPE_INFO


def get_score_bucket(score: float) -> ScoreBucket:
    """Map a similarity (or score) to a coarse presentation bucket."""
    if score >= constants.SCORE_BUCKET_HIGH:
        return ScoreBucket.HIGH
    if score >= constants.SCORE_BUCKET_MEDIUM:
        return ScoreBucket.MEDIUM
    if score >= constants.SCORE_BUCKET_LOW:
        return ScoreBucket.LOW
    return ScoreBucket.WEAK


def get_score_color(score: float) -> str:
    """Map a similarity (or score) to the color hint of its bucket."""
    return _SCORE_BUCKET_COLORS[get_score_bucket(score)]
