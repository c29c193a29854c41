import pytest

from data_designer_text_metrics.metrics import (
    PASSIVE_VOICE_BANDS,
    _auxiliary_length,
    average_chars_per_word,
    average_sentences_per_paragraph,
    average_words_per_sentence,
    is_passive,
    passive_voice_band,
    passive_voice_description,
    passive_voice_extended_description,
    passive_voice_percentage,
    reading_time_minutes,
    reading_time_readable,
)


class TestReadingTime:
    def test_one_minute(self):
        assert reading_time_readable("word " * 250, 250) == "1m 0s"
        assert reading_time_minutes("word " * 250, 250) == 1.0

    def test_seconds(self):
        assert reading_time_readable("word " * 125, 250) == "0m 30s"

    def test_hours(self):
        assert reading_time_readable("word " * 750, 10) == "1h 15m"

    def test_days(self):
        assert reading_time_readable("word " * 1500, 1) == "1d 1h"

    def test_seconds_carry_into_minutes(self):
        # 599 words at 300 wpm is 1.99666 minutes, which rounds to 2m 0s
        assert reading_time_readable("word " * 599, 300) == "2m 0s"

    def test_empty_text(self):
        assert reading_time_readable("") == "0m 0s"
        assert reading_time_minutes("") == 0.0

    @pytest.mark.parametrize("wpm", [0, -100])
    def test_non_positive_speed(self, wpm):
        assert reading_time_readable("some words here", wpm) == "0m 0s"
        assert reading_time_minutes("some words here", wpm) == 0.0


class TestAverages:
    def test_empty_text_is_zero(self):
        assert average_words_per_sentence("") == 0
        assert average_chars_per_word("") == 0
        assert average_sentences_per_paragraph("") == 0

    def test_punctuation_only_is_zero(self):
        assert average_words_per_sentence("...") == 0
        assert average_chars_per_word("?!") == 0

    def test_words_per_sentence(self):
        assert average_words_per_sentence("One two three. Four five.") == 2.5

    def test_chars_per_word(self):
        assert average_chars_per_word("ab cdef") == 3.0

    def test_sentences_per_paragraph(self):
        assert average_sentences_per_paragraph("One. Two.\n\nThree. Four.") == 2.0


class TestPassiveVoice:
    def test_active_sentence(self):
        assert passive_voice_percentage("The cat sat on the mat.") == 0

    def test_empty_text(self):
        assert passive_voice_percentage("") == 0
        assert passive_voice_description("") is None
        assert passive_voice_extended_description("   ") is None

    def test_irregular_participle(self):
        assert is_passive("The cake was eaten by the kids.")

    def test_regular_participle(self):
        assert is_passive("The results were published yesterday.")

    def test_adverbs_are_skipped(self):
        assert is_passive("The letter was quickly written.")

    def test_multi_word_auxiliary(self):
        assert is_passive("The bridge has been repaired.")

    def test_three_word_auxiliary(self):
        assert is_passive("The road will have been repaired.")
        assert _auxiliary_length(["will", "have", "been", "repaired"], 0) == 3

    def test_auxiliary_without_participle(self):
        assert not is_passive("The sky is blue today.")

    def test_short_ed_words_are_not_participles(self):
        assert not is_passive("The apple is red.")

    def test_percentage(self):
        text = "The report was written by Ana. She loves her job."
        assert passive_voice_percentage(text) == 50.0

    def test_percentage_rounding(self):
        text = "The door was opened. We left. They ran home."
        assert passive_voice_percentage(text) == 33.33

    def test_description_bands(self):
        assert passive_voice_description("The cat sat on the mat.") == "No Passive Voice"
        assert passive_voice_description("The report was written by Ana.") == "Very High"


class TestPassiveVoiceBands:
    @pytest.mark.parametrize(
        "percentage,label",
        [
            (0, "No Passive Voice"),
            (0.01, "Excellent"),
            (5, "Excellent"),
            (5.5, "Very Good"),
            (10, "Very Good"),
            (15, "Good"),
            (25, "Moderate"),
            (35, "High"),
            (35.01, "Very High"),
            (100, "Very High"),
        ],
    )
    def test_band_boundaries(self, percentage, label):
        assert passive_voice_band(percentage).label == label

    def test_every_band_has_explanation(self):
        assert all(band.explanation for band in PASSIVE_VOICE_BANDS)
