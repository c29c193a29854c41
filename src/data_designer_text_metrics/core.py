# Single entry point that runs every text metric and returns one record.
#
# Each component function is pure and can be called on its own; analyze_text
# computes the frequency table once and reuses it for the word summaries.

from __future__ import annotations

from dataclasses import dataclass

from data_designer_text_metrics._text import coerce_text
from data_designer_text_metrics.characters import character_counts
from data_designer_text_metrics.frequency import (
    filter_stop_words,
    frequency,
    longest_word,
    most_common_word,
    shortest_word,
    unique_word_count,
)
from data_designer_text_metrics.metrics import (
    DEFAULT_PASSIVE_LOOKAHEAD,
    DEFAULT_WORDS_PER_MINUTE,
    passive_voice_band,
    passive_voice_percentage,
    reading_time_minutes,
    reading_time_readable,
)
from data_designer_text_metrics.platforms import platform_status
from data_designer_text_metrics.readability import readability_summary
from data_designer_text_metrics.search import DEFAULT_SEARCH_LIMIT, DEFAULT_SIMILARITY_THRESHOLD, search
from data_designer_text_metrics.sentences import paragraph_count, segment

# ---------------------------------------------------------------------------
# Hyperparameters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Hyperparameters:
    """Tunable defaults used by the analyzer."""

    words_per_minute: float = DEFAULT_WORDS_PER_MINUTE
    passive_lookahead: int = DEFAULT_PASSIVE_LOOKAHEAD
    search_limit: int = DEFAULT_SEARCH_LIMIT
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD
    top_words: int = 10
    average_precision: int = 2
    include_readability: bool = True


DEFAULT_HYPERPARAMETERS = Hyperparameters()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def analyze_text(text: str, hyperparameters: Hyperparameters | None = None) -> dict:
    """Compute every text metric for ``text``.

    Args:
        text: The prose to analyze. Non-string input is treated as empty text.
        hyperparameters: Optional tuning overrides. Uses sensible defaults if omitted.

    Returns:
        Dict with keys: characters, word_count, sentence_count, paragraph_count,
        unique_word_count, most_common_word, longest_word, shortest_word,
        reading_time_minutes, reading_time, average_words_per_sentence,
        average_chars_per_word, average_sentences_per_paragraph,
        passive_voice_percentage, passive_voice_description, readability,
        top_words, platforms.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    text = coerce_text(text)
    blank = not text.strip()

    characters = character_counts(text)
    table = frequency(text)
    words = sum(count for _, count in table)
    sentences = len(segment(text))
    paragraphs = paragraph_count(text)
    passive = passive_voice_percentage(text, hp.passive_lookahead)

    def _ratio(numerator: int, denominator: int) -> float:
        if blank or denominator == 0:
            return 0.0
        return round(numerator / denominator, hp.average_precision)

    readability = readability_summary(text) if hp.include_readability else None

    return {
        "characters": characters,
        "word_count": words,
        "sentence_count": sentences,
        "paragraph_count": paragraphs,
        "unique_word_count": unique_word_count(table),
        "most_common_word": most_common_word(table),
        "longest_word": longest_word(table),
        "shortest_word": shortest_word(table),
        "reading_time_minutes": round(reading_time_minutes(text, hp.words_per_minute), 4),
        "reading_time": reading_time_readable(text, hp.words_per_minute),
        "average_words_per_sentence": _ratio(words, sentences),
        "average_chars_per_word": _ratio(characters["char_count_no_spaces"], words),
        "average_sentences_per_paragraph": _ratio(sentences, paragraphs),
        "passive_voice_percentage": passive,
        "passive_voice_description": None if blank else passive_voice_band(passive).label,
        "readability": readability,
        "top_words": [
            {"word": word, "count": count} for word, count in filter_stop_words(table)[: hp.top_words]
        ],
        "platforms": [status.to_payload() for status in platform_status(text)],
    }


def find_words(text: str, query: str, hyperparameters: Hyperparameters | None = None) -> list[tuple[str, int]]:
    """Search the words of ``text`` for ``query`` using the ranked fuzzy search."""
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    return search(query, frequency(text), limit=hp.search_limit, threshold=hp.similarity_threshold)
