from __future__ import annotations

from collections import Counter

from data_designer_text_metrics.tokenize import tokenize

FrequencyTable = list[tuple[str, int]]

# ---------------------------------------------------------------------------
# Stop words
# ---------------------------------------------------------------------------

STOP_WORDS = frozenset({
    "a", "about", "above", "across", "after", "afterwards", "again", "against", "all",
    "almost", "alone", "along", "already", "also", "although", "always", "am", "among",
    "amongst", "an", "and", "another", "any", "anyhow", "anyone", "anything", "anyway",
    "anywhere", "are", "aren't", "around", "as", "at", "back", "be", "became", "because",
    "become", "becomes", "becoming", "been", "before", "beforehand", "behind", "being",
    "below", "beside", "besides", "between", "beyond", "both", "but", "by", "can",
    "can't", "cannot", "could", "couldn't", "did", "didn't", "do", "does", "doesn't",
    "doing", "don't", "done", "down", "due", "during", "each", "either", "else",
    "elsewhere", "enough", "even", "ever", "every", "everyone", "everything",
    "everywhere", "except", "few", "for", "former", "formerly", "from", "further",
    "get", "gets", "got", "had", "hadn't", "has", "hasn't", "have", "haven't", "having",
    "he", "he'd", "he'll", "he's", "hence", "her", "here", "here's", "hereafter",
    "hereby", "herein", "hers", "herself", "him", "himself", "his", "how", "how's",
    "however", "i", "i'd", "i'll", "i'm", "i've", "if", "in", "indeed", "into", "is",
    "isn't", "it", "it's", "its", "itself", "just", "last", "latter", "least", "less",
    "let", "let's", "like", "made", "make", "many", "may", "me", "meanwhile", "might",
    "mine", "more", "moreover", "most", "mostly", "much", "must", "mustn't", "my",
    "myself", "namely", "neither", "never", "nevertheless", "next", "no", "nobody",
    "none", "nor", "not", "nothing", "now", "nowhere", "of", "off", "often", "on",
    "once", "one", "only", "onto", "or", "other", "others", "otherwise", "ought", "our",
    "ours", "ourselves", "out", "over", "own", "per", "perhaps", "quite", "rather",
    "really", "same", "say", "says", "see", "seem", "seemed", "seeming", "seems",
    "several", "shall", "shan't", "she", "she'd", "she'll", "she's", "should",
    "shouldn't", "since", "so", "some", "somehow", "someone", "something", "sometime",
    "sometimes", "somewhere", "still", "such", "than", "that", "that's", "the", "their",
    "theirs", "them", "themselves", "then", "thence", "there", "there's", "thereafter",
    "thereby", "therefore", "therein", "thereupon", "these", "they", "they'd",
    "they'll", "they're", "they've", "this", "those", "though", "through", "throughout",
    "thru", "thus", "to", "together", "too", "toward", "towards", "under", "until",
    "up", "upon", "us", "used", "very", "via", "was", "wasn't", "we", "we'd", "we'll",
    "we're", "we've", "well", "were", "weren't", "what", "what's", "whatever", "when",
    "when's", "whence", "whenever", "where", "where's", "whereafter", "whereas",
    "whereby", "wherein", "whereupon", "wherever", "whether", "which", "while",
    "whither", "who", "who's", "whoever", "whole", "whom", "whose", "why", "why's",
    "will", "with", "within", "without", "won't", "would", "wouldn't", "yet", "you",
    "you'd", "you'll", "you're", "you've", "your", "yours", "yourself", "yourselves",
})


# ---------------------------------------------------------------------------
# Frequency table
# ---------------------------------------------------------------------------


def frequency(text: object) -> FrequencyTable:
    """Count lowercased words, most frequent first.

    Words with equal counts keep the order in which they first appear.
    """
    counts = Counter(word.lower() for word in tokenize(text))
    return counts.most_common()


def filter_stop_words(table: FrequencyTable, stop_words: frozenset[str] = STOP_WORDS) -> FrequencyTable:
    return [(word, count) for word, count in table if word.lower() not in stop_words]


# ---------------------------------------------------------------------------
# Summaries over a precomputed table
# ---------------------------------------------------------------------------


def unique_word_count(table: FrequencyTable) -> int:
    return len(table)


def most_common_word(table: FrequencyTable) -> str | None:
    """Most frequent word that is not a stop word, else the most frequent word."""
    filtered = filter_stop_words(table)
    if filtered:
        return filtered[0][0]
    if table:
        return table[0][0]
    return None


def longest_word(table: FrequencyTable) -> str | None:
    if not table:
        return None
    return max((word for word, _ in table), key=len)


def shortest_word(table: FrequencyTable) -> str | None:
    if not table:
        return None
    return min((word for word, _ in table), key=len)
