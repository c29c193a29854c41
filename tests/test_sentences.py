from data_designer_text_metrics.sentences import (
    paragraph_count,
    paragraphs,
    segment,
    sentence_count,
    should_end_sentence,
)
from data_designer_text_metrics.tokenize import tokenize, word_count


class TestTokenize:
    def test_empty_and_whitespace(self):
        assert tokenize("") == []
        assert tokenize("   \n\t ") == []
        assert word_count("") == 0

    def test_contractions_and_hyphens(self):
        assert tokenize("Don't over-think it.") == ["Don't", "over-think", "it"]

    def test_abbreviation_keeps_inner_periods(self):
        assert tokenize("The U.S. economy") == ["The", "U.S", "economy"]

    def test_surrounding_quotes_are_dropped(self):
        assert tokenize("'quoted' (words)") == ["quoted", "words"]

    def test_word_count_matches_tokenize(self):
        text = "It's a well-known fact, isn't it? Yes... 42 times."
        assert word_count(text) == len(tokenize(text))

    def test_non_string(self):
        assert tokenize(None) == []


class TestSegment:
    def test_empty_input(self):
        assert segment("") == []
        assert segment(None) == []
        assert sentence_count("") == 0

    def test_abbreviation_does_not_split(self):
        assert segment("Dr. Smith went home.") == ["Dr. Smith went home."]

    def test_ellipsis_and_exclamation(self):
        assert segment("Wait... What?! Really.") == ["Wait...", "What?!", "Really."]

    def test_unicode_ellipsis(self):
        assert segment("Well… That was odd.") == ["Well…", "That was odd."]

    def test_initials_do_not_split(self):
        assert sentence_count("J. Doe wrote the report. It was long.") == 2

    def test_acronym_does_not_split(self):
        assert sentence_count("He works for NASA. Mostly remotely.") == 1

    def test_list_numbers_do_not_split(self):
        assert segment("Step 1. Open the box.") == ["Step 1. Open the box."]

    def test_whitespace_is_normalized(self):
        assert segment("First  line\nhere.   Second\tone.") == ["First line here.", "Second one."]

    def test_trailing_text_without_punctuation(self):
        assert segment("One sentence. And a fragment") == ["One sentence.", "And a fragment"]

    def test_punctuation_only_is_dropped(self):
        assert segment("... !!! ???") == []

    def test_sentence_count_matches_segment(self):
        text = "Mr. Jones arrived at 5 p.m. today. Was he late? No!"
        assert sentence_count(text) == len(segment(text))


class TestShouldEndSentence:
    def test_question_and_exclamation(self):
        assert should_end_sentence("Really?")
        assert should_end_sentence("Stop!")

    def test_plain_period(self):
        assert should_end_sentence("The end.")

    def test_abbreviation(self):
        assert not should_end_sentence("Meet me on Main St.")

    def test_no_terminal(self):
        assert not should_end_sentence("no terminal")


class TestParagraphs:
    def test_blank_text(self):
        assert paragraphs("") == []
        assert paragraph_count("   ") == 0

    def test_blank_lines_are_dropped(self):
        text = "First paragraph.\n\n   \nSecond paragraph.\nThird."
        assert paragraphs(text) == ["First paragraph.", "Second paragraph.", "Third."]
        assert paragraph_count(text) == 3
