from __future__ import annotations

import re

from data_designer_text_metrics._text import coerce_text

# A word starts with a word character and may continue through apostrophes,
# hyphens and periods so that "don't", "well-known" and "U.S" stay whole.
_WORD_RE = re.compile(r"\b\w[\w'\-.]*\b")


def tokenize(text: object) -> list[str]:
    """Split text into words, preserving the original case."""
    return _WORD_RE.findall(coerce_text(text))


def word_count(text: object) -> int:
    return len(tokenize(text))
