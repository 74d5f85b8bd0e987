"""Ranked fuzzy matching for search-as-you-type product lookups.

Pipeline: edit distance -> similarity -> match class + score -> sort and truncate.
Match classes outrank raw similarity so that prefix and substring hits beat
long near-duplicates:

    exact > starts_with > contains > word_match > similar

Every candidate gets a result; nothing is dropped for being dissimilar unless
a caller passes a non-zero threshold.
"""

import itertools
import logging
from collections.abc import Callable, Mapping, Sequence
from typing import TypeVar

from rapidfuzz.distance import Levenshtein

from retailops.core.config import constants, settings
from retailops.core.logging import log_with_context
from retailops.domain.search import MatchResult, MatchType


logger = logging.getLogger(__name__)

T = TypeVar("T")


def levenshtein_distance(first: str | None, second: str | None) -> int:
    """Compute the edit distance between two strings.

    Counts the minimum number of single-character insertions, deletions and
    substitutions turning one string into the other. Comparison is
    case-sensitive; callers fold case first when they need to.

    Args:
        first: First string (None is treated as empty)
        second: Second string (None is treated as empty)

    Returns:
        Non-negative distance, 0 only when the strings are identical
    """
    return Levenshtein.distance(first or "", second or "")


def calculate_similarity(first: str | None, second: str | None) -> float:
    """Normalize edit distance into a case-insensitive similarity in [0, 1].

    Two empty strings are identical (similarity 1).
    """
    return Levenshtein.normalized_similarity((first or "").lower(), (second or "").lower())


def _word_match(query: str, text: str) -> bool:
    """Return True if any query word is a prefix or substring of any text word."""
    text_words = text.split()
    return any(
        text_word.startswith(query_word) or query_word in text_word
        for query_word in query.split()
        for text_word in text_words
    )


def classify_match(query: str, text: str) -> tuple[MatchType, float, float]:
    """Classify how a candidate text matches a query and score its band.

    The first rule that holds wins:
    exact > starts_with > contains > word_match > similar.

    Args:
        query: Trimmed, lower-cased query
        text: Candidate comparison text (any casing)

    Returns:
        Tuple of (match type, band score, similarity). The band score does not
        include the length bonus.
    """
    text_lower = text.lower()
    similarity = calculate_similarity(query, text_lower)

    if text_lower == query:
        return MatchType.EXACT, constants.SCORE_EXACT, similarity
    if text_lower.startswith(query):
        return MatchType.STARTS_WITH, constants.SCORE_STARTS_WITH + similarity, similarity
    if query in text_lower:
        return MatchType.CONTAINS, constants.SCORE_CONTAINS + similarity, similarity
    if _word_match(query, text_lower):
        return MatchType.WORD_MATCH, constants.SCORE_WORD_MATCH + similarity, similarity
    return MatchType.SIMILAR, similarity, similarity


def length_bonus(text: str) -> float:
    """Small bonus favoring shorter candidate texts; never negative."""
    return max(0.0, (constants.LENGTH_BONUS_PIVOT - len(text)) / constants.LENGTH_BONUS_DIVISOR)


def _to_text(value: object) -> str:
    """Coerce an extracted value to comparison text; non-strings become empty."""
    return value if isinstance(value, str) else ""


def _build_extractor(
    key: str | None,
    text_of: Callable[[T], object] | None,
) -> Callable[[T], str]:
    """Build the single candidate -> comparison text projection for a search."""
    if key is not None and text_of is not None:
        msg = "Pass either key or text_of to fuzzy_search, not both"
        raise ValueError(msg)

    if text_of is not None:
        return lambda item: _to_text(text_of(item))

    if key is not None:

        def by_key(item: T) -> str:
            if isinstance(item, Mapping):
                return _to_text(item.get(key))
            return _to_text(getattr(item, key, None))

        return by_key

    return _to_text


def validate_candidates(candidates: object) -> None:
    """Raise TypeError unless candidates is a sequence of records."""
    if isinstance(candidates, str | bytes | Mapping) or not isinstance(candidates, Sequence):
        msg = f"candidates must be a sequence of records, got {type(candidates).__name__}"
        raise TypeError(msg)


def fuzzy_search(
    query: str | None,
    candidates: Sequence[T],
    *,
    key: str | None = None,
    text_of: Callable[[T], object] | None = None,
    threshold: float | None = None,
    limit: int | None = None,
) -> list[MatchResult[T]]:
    """Rank candidates against a free-text query.

    Results are ordered by score (descending), then by comparison text length
    (shorter first); remaining ties keep input order. The whole candidate set
    is ranked before truncating to `limit`.

    A blank query short-circuits: the first `limit` candidates are returned in
    input order with match type "all" and score/similarity 1.

    Missing fields, non-string values and a None query are treated as empty
    strings and never raise.

    Args:
        query: User's search text
        candidates: Records to search (list, tuple or other sequence)
        key: Field holding the comparison text (dict key or attribute name)
        text_of: Projection returning the comparison text for a candidate
        threshold: Minimum final score to include (defaults to settings, 0 disables)
        limit: Maximum number of results (defaults to settings)

    Returns:
        Ranked list of MatchResult, at most `limit` long

    Raises:
        TypeError: If candidates is not a sequence
        ValueError: If limit is negative, or both key and text_of are given
    """
    validate_candidates(candidates)
    extract = _build_extractor(key, text_of)

    if limit is None:
        limit = settings.search_default_limit
    if threshold is None:
        threshold = settings.search_default_threshold
    if limit < 0:
        msg = f"limit must be non-negative, got {limit}"
        raise ValueError(msg)

    query_normalized = _to_text(query).strip().lower()

    if not query_normalized:
        return [
            MatchResult(item=item, score=1.0, similarity=1.0, match_type=MatchType.ALL, text=extract(item))
            for item in itertools.islice(candidates, limit)
        ]

    results: list[MatchResult[T]] = []
    for item in candidates:
        text = extract(item)
        match_type, score, similarity = classify_match(query_normalized, text)
        score += length_bonus(text)
        if score < threshold:
            continue
        results.append(
            MatchResult(item=item, score=score, similarity=similarity, match_type=match_type, text=text)
        )

    results.sort(key=lambda result: (-result.score, len(result.text)))

    log_with_context(
        logger,
        "debug",
        "Fuzzy search ranked candidates",
        candidate_count=len(candidates),
        match_count=len(results),
        limit=limit,
    )

    return results[:limit]


def best_match(
    query: str | None,
    candidates: Sequence[T],
    *,
    key: str | None = None,
    text_of: Callable[[T], object] | None = None,
) -> MatchResult[T] | None:
    """Return the top-ranked result for a query, or None if there are no candidates."""
    results = fuzzy_search(query, candidates, key=key, text_of=text_of, limit=1)
    return results[0] if results else None
