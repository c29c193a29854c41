# Ranked lookup of words in a frequency table. A query may use shell-style
# wildcards ("*" for any run, "?" for one character); words that match none of
# the literal or wildcard tiers can still match by edit-distance similarity.

from __future__ import annotations

import math
import re

from data_designer_text_metrics.frequency import FrequencyTable

DEFAULT_SEARCH_LIMIT = 50
DEFAULT_SIMILARITY_THRESHOLD = 0.6

EXACT_SCORE = 1000
PREFIX_SCORE = 800
SUBSTRING_SCORE = 600
WILDCARD_SCORE = 400
FUZZY_SCALE = 200


def levenshtein_distance(a: str, b: str) -> int:
    """Edit distance with unit-cost insertions, deletions and substitutions."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            current.append(min(current[j - 1] + 1, previous[j] + 1, previous[j - 1] + cost))
        previous = current
    return previous[-1]


def similarity(a: str, b: str) -> float:
    """Normalized similarity in [0, 1]; two empty strings are identical."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return (longest - levenshtein_distance(a, b)) / longest


def compile_wildcard(query: str) -> re.Pattern[str]:
    escaped = re.escape(query)
    return re.compile(escaped.replace(r"\*", ".*").replace(r"\?", "."), re.IGNORECASE)


def _score(word: str, count: int, term: str, pattern: re.Pattern[str], threshold: float) -> int:
    lower = word.lower()
    if lower == term:
        return EXACT_SCORE + count
    if lower.startswith(term):
        return PREFIX_SCORE + count
    if term in lower:
        return SUBSTRING_SCORE + count
    if pattern.search(word):
        return WILDCARD_SCORE + count
    ratio = similarity(lower, term)
    if ratio > threshold:
        return math.floor(ratio * FUZZY_SCALE) + count
    return 0


def search(
    query: str | None,
    table: FrequencyTable,
    limit: int = DEFAULT_SEARCH_LIMIT,
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> FrequencyTable:
    """Rank the entries of ``table`` against ``query``.

    Exact matches outrank prefix matches, which outrank substring matches,
    then wildcard matches, then fuzzy matches. Within a tier the word's count
    breaks ties. A blank query returns the first ``limit`` entries unchanged.

    Args:
        query: Search text, optionally containing ``*`` and ``?`` wildcards.
        table: Frequency table, usually from :func:`frequency`.
        limit: Maximum number of entries to return.
        threshold: Minimum similarity a fuzzy match must exceed.

    Returns:
        ``(word, count)`` pairs, best match first.
    """
    if not table:
        return []
    if not isinstance(query, str) or not query.strip():
        return table[:limit]

    term = query.strip().lower()
    pattern = compile_wildcard(term)
    scored = []
    for word, count in table:
        score = _score(word, count, term, pattern, threshold)
        if score > 0:
            scored.append((word, count, score))

    scored.sort(key=lambda entry: entry[2], reverse=True)
    return [(word, count) for word, count, _ in scored[:limit]]
