# Metrics composed from the tokenizer, segmenter and character counters:
# reading time, averages and the passive voice estimate.

from __future__ import annotations

import math
from dataclasses import dataclass

from data_designer_text_metrics._text import coerce_text
from data_designer_text_metrics.characters import char_count_no_spaces
from data_designer_text_metrics.sentences import paragraph_count, segment, sentence_count
from data_designer_text_metrics.tokenize import tokenize, word_count

DEFAULT_WORDS_PER_MINUTE = 250
DEFAULT_PASSIVE_LOOKAHEAD = 5

# ---------------------------------------------------------------------------
# Reading time
# ---------------------------------------------------------------------------


def reading_time_minutes(text: object, words_per_minute: float = DEFAULT_WORDS_PER_MINUTE) -> float:
    if words_per_minute <= 0:
        return 0.0
    return word_count(text) / words_per_minute


def reading_time_readable(text: object, words_per_minute: float = DEFAULT_WORDS_PER_MINUTE) -> str:
    """Format the reading time with its two largest units, e.g. ``"2h 5m"``."""
    if words_per_minute <= 0:
        return "0m 0s"

    total = reading_time_minutes(text, words_per_minute)
    minutes = math.floor(total)
    seconds = math.floor((total - minutes) * 60 + 0.5)
    if seconds == 60:
        minutes += 1
        seconds = 0

    hours, minutes = divmod(minutes, 60)
    days, hours = divmod(hours, 24)

    if days > 0:
        return f"{days}d {hours}h"
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m {seconds}s"


# ---------------------------------------------------------------------------
# Averages
# ---------------------------------------------------------------------------


def average_words_per_sentence(text: object) -> float:
    text = coerce_text(text)
    if not text.strip():
        return 0.0
    sentences = sentence_count(text)
    if sentences == 0:
        return 0.0
    return word_count(text) / sentences


def average_chars_per_word(text: object) -> float:
    text = coerce_text(text)
    if not text.strip():
        return 0.0
    words = word_count(text)
    if words == 0:
        return 0.0
    return char_count_no_spaces(text) / words


def average_sentences_per_paragraph(text: object) -> float:
    text = coerce_text(text)
    paragraphs = paragraph_count(text)
    if paragraphs == 0:
        return 0.0
    return sentence_count(text) / paragraphs


# ---------------------------------------------------------------------------
# Passive voice
# ---------------------------------------------------------------------------

AUXILIARIES = frozenset({
    "am", "is", "are", "was", "were", "be", "been", "being",
    "get", "gets", "got", "gotten", "getting",
    "isn't", "aren't", "wasn't", "weren't",
    "has been", "have been", "had been",
    "will be", "would be", "could be", "should be", "might be", "must be",
    "can be", "may be", "shall be",
    "is being", "are being", "was being", "were being",
    "will have been", "would have been", "could have been", "should have been",
    "might have been", "must have been", "may have been", "shall have been",
})

PASSIVE_SKIP_ADVERBS = frozenset({
    "not", "never", "also", "already", "always", "often", "still", "just", "only",
    "very", "really", "quite", "rather", "too", "so", "then", "now", "even",
    "quickly", "slowly", "carefully", "easily", "badly", "well", "widely", "largely",
    "fully", "partly", "partially", "completely", "entirely", "finally", "recently",
    "previously", "usually", "frequently", "rarely", "seldom", "sometimes", "generally",
    "typically", "commonly", "clearly", "certainly", "probably", "possibly", "likely",
    "currently", "immediately", "eventually", "originally", "initially", "actually",
    "apparently", "reportedly", "allegedly", "newly", "heavily", "highly", "deeply",
    "strongly", "poorly", "properly", "successfully", "automatically", "regularly",
})

IRREGULAR_PARTICIPLES = frozenset({
    "arisen", "awoken", "beaten", "become", "begun", "bent", "bet", "bid", "bitten",
    "bled", "blown", "borne", "born", "bought", "bound", "bred", "broken", "brought",
    "built", "burnt", "burst", "cast", "caught", "chosen", "clung", "come", "cost",
    "crept", "cut", "dealt", "done", "drawn", "dreamt", "driven", "drunk", "dug",
    "eaten", "fallen", "fed", "felt", "fought", "found", "fled", "flown", "flung",
    "forbidden", "forgiven", "forgotten", "frozen", "given", "gone", "ground", "grown",
    "heard", "held", "hidden", "hit", "hung", "hurt", "kept", "knelt", "known", "laid",
    "led", "left", "lent", "let", "lit", "lost", "made", "meant", "met", "mistaken",
    "overcome", "overtaken", "overthrown", "paid", "proven", "put", "quit", "read",
    "rid", "ridden", "risen", "run", "rung", "said", "sat", "seen", "sent", "set",
    "sewn", "shaken", "shed", "shot", "shown", "shrunk", "shut", "slain", "slung",
    "sold", "sought", "sown", "spent", "spilt", "spoken", "spread", "sprung", "spun",
    "stolen", "stood", "stricken", "struck", "strung", "stuck", "stung", "sung",
    "sunk", "swept", "sworn", "swum", "swung", "taken", "taught", "thought", "thrown",
    "told", "torn", "trodden", "understood", "undertaken", "undone", "upheld",
    "upset", "woken", "won", "worn", "woven", "wound", "written", "withdrawn",
})

_REGULAR_ENDINGS = (("ed", 4), ("en", 3), ("ne", 3), ("wn", 3), ("nt", 3))


def _is_participle(token: str) -> bool:
    if token in IRREGULAR_PARTICIPLES:
        return True
    return any(token.endswith(ending) and len(token) >= min_len for ending, min_len in _REGULAR_ENDINGS)


def _auxiliary_length(tokens: list[str], start: int) -> int:
    """Length of the longest auxiliary phrase starting at ``start``, or 0."""
    for size in (3, 2, 1):
        window = tokens[start : start + size]
        if len(window) == size and " ".join(window) in AUXILIARIES:
            return size
    return 0


def is_passive(sentence: str, lookahead: int = DEFAULT_PASSIVE_LOOKAHEAD) -> bool:
    """Heuristic check for an auxiliary followed by a past participle.

    After an auxiliary, up to ``lookahead`` tokens are scanned. Adverbs from
    :data:`PASSIVE_SKIP_ADVERBS` are skipped; the first other token decides.
    """
    tokens = [t.lower() for t in tokenize(sentence)]
    for i in range(len(tokens)):
        size = _auxiliary_length(tokens, i)
        if not size:
            continue
        for token in tokens[i + size : i + size + lookahead]:
            if token in PASSIVE_SKIP_ADVERBS:
                continue
            if _is_participle(token):
                return True
            break
    return False


def passive_voice_percentage(text: object, lookahead: int = DEFAULT_PASSIVE_LOOKAHEAD) -> float:
    sentences = segment(text)
    if not sentences:
        return 0.0
    passive = sum(1 for s in sentences if is_passive(s, lookahead))
    return round(passive / len(sentences) * 100, 2)


@dataclass(frozen=True)
class PassiveVoiceBand:
    upper_bound: float
    label: str
    explanation: str


PASSIVE_VOICE_BANDS = (
    PassiveVoiceBand(
        0,
        "No Passive Voice",
        "Your writing uses active voice throughout. Every sentence makes clear who is doing what, "
        "which keeps the text direct and easy to follow. Keep this up, and reach for the "
        "passive only when the actor is unknown or genuinely unimportant.",
    ),
    PassiveVoiceBand(
        5,
        "Excellent",
        "Passive voice appears only rarely. This is an excellent balance: the text reads as direct "
        "and confident, and the occasional passive construction can help emphasize a result or keep "
        "the focus on the subject that matters. No changes are needed.",
    ),
    PassiveVoiceBand(
        10,
        "Very Good",
        "A small share of your sentences use passive voice, well within the range editors recommend "
        "for clear writing. Review those sentences to confirm each passive construction is deliberate, "
        "but the overall tone remains active and readable.",
    ),
    PassiveVoiceBand(
        15,
        "Good",
        "Passive voice is noticeable but still acceptable for most content. Some sentences may hide "
        "who is responsible for an action. Consider rewriting a few of them so the subject performs "
        "the action, which will make the text feel more direct.",
    ),
    PassiveVoiceBand(
        25,
        "Moderate",
        "A moderate amount of passive voice is present. This level is common in reports and technical "
        "writing, but it can make general content feel distant and wordy. Rewrite the sentences where "
        "the actor is known to sharpen the message and improve readability.",
    ),
    PassiveVoiceBand(
        35,
        "High",
        "Passive voice appears in a large share of your sentences. Readers may find the text indirect "
        "and harder to follow, since actions often lack a clear subject. Identify who performs each "
        "action and move that subject to the front of the sentence.",
    ),
    PassiveVoiceBand(
        math.inf,
        "Very High",
        "More than a third of your sentences use passive voice. The text is likely to feel vague "
        "and slow to read. Rework most of these sentences into active voice by naming the actor "
        "first; this will make your writing clearer and more engaging.",
    ),
)


def passive_voice_band(percentage: float) -> PassiveVoiceBand:
    for band in PASSIVE_VOICE_BANDS:
        if percentage <= band.upper_bound:
            return band
    return PASSIVE_VOICE_BANDS[-1]


def passive_voice_description(text: object) -> str | None:
    text = coerce_text(text)
    if not text.strip():
        return None
    return passive_voice_band(passive_voice_percentage(text)).label


def passive_voice_extended_description(text: object) -> str | None:
    text = coerce_text(text)
    if not text.strip():
        return None
    return passive_voice_band(passive_voice_percentage(text)).explanation
