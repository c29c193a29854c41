# Character-level counters. Each function is a single scan over the text and
# returns 0 for empty or non-string input.

from __future__ import annotations

import re
import unicodedata

from data_designer_text_metrics._text import coerce_text

# ---------------------------------------------------------------------------
# Compiled patterns
# ---------------------------------------------------------------------------

PUNCTUATION_CHARS = frozenset(".,;:!?'\"()[]{}-")

_WHITESPACE_RE = re.compile(r"\s")
_DIGIT_RE = re.compile(r"\d")
_PUNCTUATION_RE = re.compile(r"[.,;:!?'\"()\[\]{}\-]")

_EMOJI_RANGES = (
    (0x1F300, 0x1FAFF),
    (0x2600, 0x27BF),
)

# "y" is a vowel unless it starts a word or is followed by a vowel.
_VOWEL_RE = re.compile(r"[aeiou]|\By(?![aeiou])", re.IGNORECASE)
# "y" is a consonant at a word start or right after a vowel. A "y" that follows
# a vowel and is not followed by one matches both patterns.
_CONSONANT_RE = re.compile(r"[b-df-hj-np-tv-xz]|\by|(?<=[aeiou])y", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _count(pattern: re.Pattern[str], text: object) -> int:
    return sum(1 for _ in pattern.finditer(coerce_text(text)))


def _is_special(char: str) -> bool:
    return not (char.isalpha() or char.isdecimal() or char.isspace() or char in PUNCTUATION_CHARS)


def _is_emoji(char: str) -> bool:
    code = ord(char)
    if any(lo <= code <= hi for lo, hi in _EMOJI_RANGES):
        return True
    if code <= 0x7F or char.isalnum() or char in PUNCTUATION_CHARS:
        return False
    return unicodedata.category(char).startswith("S")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def char_count(text: object) -> int:
    return len(coerce_text(text))


def char_count_no_spaces(text: object) -> int:
    text = coerce_text(text)
    return len(text) - whitespace_count(text)


def letters_count(text: object) -> int:
    return sum(1 for c in coerce_text(text) if c.isalpha())


def upper_count(text: object) -> int:
    return sum(1 for c in coerce_text(text) if c.isupper())


def lower_count(text: object) -> int:
    return sum(1 for c in coerce_text(text) if c.islower())


def digit_count(text: object) -> int:
    return _count(_DIGIT_RE, text)


def whitespace_count(text: object) -> int:
    return _count(_WHITESPACE_RE, text)


def space_count(text: object) -> int:
    return coerce_text(text).count(" ")


def tab_count(text: object) -> int:
    return coerce_text(text).count("\t")


def newline_count(text: object) -> int:
    return coerce_text(text).count("\n")


def punctuation_count(text: object) -> int:
    return _count(_PUNCTUATION_RE, text)


def special_count(text: object) -> int:
    """Count characters that are not letters, digits, whitespace or common punctuation."""
    return sum(1 for c in coerce_text(text) if _is_special(c))


def emoji_count(text: object) -> int:
    """Count emoji code points.

    Covers the pictograph block (U+1F300 to U+1FAFF), the miscellaneous symbols
    and dingbats block (U+2600 to U+27BF), and any other non-ASCII symbol that is
    neither a word character nor common punctuation. Variation selectors and
    zero-width joiners inside emoji sequences are not symbols and are skipped.
    """
    return sum(1 for c in coerce_text(text) if _is_emoji(c))


def ascii_count(text: object) -> int:
    return sum(1 for c in coerce_text(text) if ord(c) <= 0x7F)


def non_ascii_count(text: object) -> int:
    return sum(1 for c in coerce_text(text) if ord(c) > 0x7F)


def vowel_count(text: object) -> int:
    return _count(_VOWEL_RE, text)


def consonant_count(text: object) -> int:
    return _count(_CONSONANT_RE, text)


CHARACTER_COUNTERS = {
    "char_count": char_count,
    "char_count_no_spaces": char_count_no_spaces,
    "letters": letters_count,
    "uppercase": upper_count,
    "lowercase": lower_count,
    "digits": digit_count,
    "whitespace": whitespace_count,
    "spaces": space_count,
    "tabs": tab_count,
    "newlines": newline_count,
    "punctuation": punctuation_count,
    "special": special_count,
    "emoji": emoji_count,
    "ascii": ascii_count,
    "non_ascii": non_ascii_count,
    "vowels": vowel_count,
    "consonants": consonant_count,
}


def character_counts(text: object) -> dict[str, int]:
    """Run every character counter over ``text``."""
    text = coerce_text(text)
    return {name: counter(text) for name, counter in CHARACTER_COUNTERS.items()}
