"""Fuzzy matching of stop names."""

from collections.abc import Iterable

from fuzzywuzzy import fuzz, process  # type: ignore[import-untyped]


def suggest_stop_names(
    query: str, candidates: Iterable[str], limit: int = 3, threshold: int = 70
) -> list[str]:
    """Suggest known stop names close to a misspelled query.

    Matching is case-insensitive, e.g. "park st" suggests "Park Street".

    Args:
        query: Stop name as typed by the user
        candidates: Known stop names
        limit: Maximum number of suggestions
        threshold: Minimum fuzzy match score (0-100)

    Returns:
        Candidate names ordered by descending score
    """
    choices = list(candidates)
    if not query or not choices:
        return []

    matches = process.extract(
        query, choices, limit=limit, scorer=fuzz.token_set_ratio
    )
    return [name for name, score in matches if score >= threshold]
