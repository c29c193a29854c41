# SPDX-License-Identifier: Apache-2.0
"""Text metrics plugin for NeMo Data Designer.

Adds a ``text-metrics`` column type that derives statistics from text columns:
character, word, sentence and paragraph counts, reading time, readability,
passive voice and word frequency. No LLM calls, no API dependencies.

Usage::

    from data_designer_text_metrics import TextMetricsColumnConfig

    builder.add_column(TextMetricsColumnConfig(
        name="article_metrics",
        target_columns=["article"],
        words_per_minute=200,
    ))

The engine functions are also usable on their own::

    from data_designer_text_metrics import analyze_text, segment

    segment("Dr. Smith went home. He slept.")
"""

from data_designer_text_metrics.characters import character_counts
from data_designer_text_metrics.config import TextMetricsColumnConfig
from data_designer_text_metrics.core import Hyperparameters, analyze_text, find_words
from data_designer_text_metrics.frequency import filter_stop_words, frequency
from data_designer_text_metrics.metrics import (
    average_chars_per_word,
    average_words_per_sentence,
    passive_voice_description,
    passive_voice_extended_description,
    passive_voice_percentage,
    reading_time_minutes,
    reading_time_readable,
)
from data_designer_text_metrics.search import search
from data_designer_text_metrics.sentences import paragraph_count, paragraphs, segment, sentence_count
from data_designer_text_metrics.tokenize import tokenize, word_count

__all__ = [
    "TextMetricsColumnConfig",
    "Hyperparameters",
    "analyze_text",
    "find_words",
    "character_counts",
    "tokenize",
    "word_count",
    "segment",
    "sentence_count",
    "paragraphs",
    "paragraph_count",
    "frequency",
    "filter_stop_words",
    "search",
    "reading_time_minutes",
    "reading_time_readable",
    "average_words_per_sentence",
    "average_chars_per_word",
    "passive_voice_percentage",
    "passive_voice_description",
    "passive_voice_extended_description",
]
