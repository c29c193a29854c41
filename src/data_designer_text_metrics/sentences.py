# Sentence and paragraph segmentation.
#
# Sentences are found by splitting on runs of terminal punctuation and then
# deciding, for every run, whether it really closes a sentence. A period after
# a known abbreviation, an initial, a short acronym or a list number does not.

from __future__ import annotations

import re

from data_designer_text_metrics._text import coerce_text

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

ABBREVIATIONS = frozenset({
    # titles
    "mr", "mrs", "ms", "dr", "prof", "sr", "jr", "capt", "gen", "col", "maj", "lt",
    # business
    "vs", "etc", "inc", "ltd", "corp", "co", "llc", "llp",
    # addresses and references
    "st", "ave", "blvd", "rd", "apt", "no", "vol", "pp", "ch", "sec", "fig", "ref",
    # academic ("i.e" and "e.g" are stored with their periods removed)
    "ie", "eg", "cf", "al", "approx", "ca", "circa", "est", "max", "min",
    # months and days
    "jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec",
    "mon", "tue", "wed", "thu", "fri", "sat", "sun",
    # units
    "ft", "in", "lb", "oz", "kg", "cm", "mm", "km", "mph", "rpm",
    # government and legal
    "gov", "dept", "div", "assn", "org", "admin",
})

_WHITESPACE_RUN_RE = re.compile(r"\s+")
_TERMINAL_SPLIT_RE = re.compile(r"([.!?]+|\.\.\.|…)")
_TERMINAL_PART_RE = re.compile(r"^(?:[.!?]+|…)$")
_TRAILING_TERMINALS_RE = re.compile(r"[.!?]+$")
_QUESTION_EXCLAIM_RE = re.compile(r"[!?]$")
_PUNCTUATION_ONLY_RE = re.compile(r"^[.!?…\s]+$")
_NON_LETTER_RE = re.compile(r"[^a-z]")
_EDGE_PUNCT_RE = re.compile(r"^[^\w]+|[^\w]+$")
_ACRONYM_RE = re.compile(r"^[A-Z]{1,4}$")
_NUMBER_RE = re.compile(r"^\d+$")
_PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _is_punctuation_only(value: str) -> bool:
    return bool(_PUNCTUATION_ONLY_RE.match(value))


def should_end_sentence(sentence: str, abbreviations: frozenset[str] = ABBREVIATIONS) -> bool:
    """Decide whether the punctuation at the end of ``sentence`` closes it."""
    if sentence.endswith("...") or sentence.endswith("…"):
        return True
    if _QUESTION_EXCLAIM_RE.search(sentence):
        return True
    if not sentence.endswith("."):
        return False

    words = _TRAILING_TERMINALS_RE.sub("", sentence).split()
    if not words:
        return True
    last_word = _EDGE_PUNCT_RE.sub("", words[-1])
    clean = _NON_LETTER_RE.sub("", last_word.lower())

    if clean in abbreviations:
        return False
    # initials such as "J. R. R."
    if len(clean) == 1:
        return False
    if _ACRONYM_RE.match(last_word):
        return False
    # list numbering such as "1."
    if _NUMBER_RE.match(last_word):
        return False
    return True


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def segment(text: object, abbreviations: frozenset[str] = ABBREVIATIONS) -> list[str]:
    """Split text into sentences.

    Whitespace runs are collapsed to single spaces before splitting, so the
    returned sentences are normalized rather than verbatim substrings. Text
    after the last terminal punctuation is returned as a final sentence.
    """
    text = coerce_text(text)
    normalized = _WHITESPACE_RUN_RE.sub(" ", text.strip())
    if not normalized:
        return []

    parts = [p.strip() for p in _TERMINAL_SPLIT_RE.split(normalized) if p.strip()]
    sentences: list[str] = []
    current = ""

    for i, part in enumerate(parts):
        if not _TERMINAL_PART_RE.match(part):
            if current and not current.endswith(" "):
                current += " "
            current += part
            continue

        current += part
        if should_end_sentence(current, abbreviations):
            cleaned = current.strip()
            if cleaned and not _is_punctuation_only(cleaned):
                sentences.append(cleaned)
            current = ""
        elif i < len(parts) - 1:
            current += " "

    remainder = current.strip()
    if remainder and not _is_punctuation_only(remainder):
        sentences.append(remainder)
    return sentences


def sentence_count(text: object) -> int:
    return len(segment(text))


def paragraphs(text: object) -> list[str]:
    """Split text on line breaks, dropping blank paragraphs."""
    return [p.strip() for p in _PARAGRAPH_SPLIT_RE.split(coerce_text(text)) if p.strip()]


def paragraph_count(text: object) -> int:
    return len(paragraphs(text))
