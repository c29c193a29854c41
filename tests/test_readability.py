import pytest

from data_designer_text_metrics.platforms import PLATFORM_LIMITS, platform_status
from data_designer_text_metrics.readability import (
    flesch_kincaid_grade,
    flesch_reading_ease,
    grade_level_label,
    readability_explanation,
    readability_label,
    readability_summary,
)

EASY_TEXT = "The cat sat on the mat. The dog ran to the park. We had fun in the sun."
HARD_TEXT = (
    "Notwithstanding considerable institutional heterogeneity, comprehensive organizational "
    "restructuring necessitates multidimensional evaluation of interdependent administrative "
    "responsibilities and jurisdictional accountability mechanisms."
)


class TestScores:
    def test_blank_text_has_no_scores(self):
        assert flesch_reading_ease("") is None
        assert flesch_kincaid_grade("  ") is None
        assert readability_summary("") is None

    def test_easy_text_scores_higher_than_hard_text(self):
        assert flesch_reading_ease(EASY_TEXT) > flesch_reading_ease(HARD_TEXT)
        assert flesch_kincaid_grade(EASY_TEXT) < flesch_kincaid_grade(HARD_TEXT)

    def test_summary_shape(self):
        summary = readability_summary(EASY_TEXT)
        assert set(summary) == {"flesch_reading_ease", "flesch_kincaid_grade", "label", "grade_level"}
        assert summary["label"] == readability_label(summary["flesch_reading_ease"])


class TestBands:
    @pytest.mark.parametrize(
        "score,label",
        [
            (-20, "Extremely difficult"),
            (9.9, "Extremely difficult"),
            (10, "Very Difficult"),
            (30, "Difficult"),
            (50, "Somewhat Challenging"),
            (60, "Plain English"),
            (70, "Easy"),
            (80, "Very Easy"),
            (120, "Very Easy"),
        ],
    )
    def test_label_boundaries(self, score, label):
        assert readability_label(score) == label

    def test_explanation(self):
        assert readability_explanation(65).startswith("Excellent work!")

    @pytest.mark.parametrize(
        "grade,label",
        [
            (-3.2, "1st Grade or Lower"),
            (1.9, "1st Grade or Lower"),
            (2.4, "2nd Grade"),
            (3.0, "3rd Grade"),
            (8.7, "8th Grade"),
            (11.5, "11th Grade"),
            (12.9, "12th Grade"),
            (13.0, "College or Higher"),
        ],
    )
    def test_grade_level(self, grade, label):
        assert grade_level_label(grade) == label


class TestPlatforms:
    def test_empty_text_is_ok_everywhere(self):
        statuses = platform_status("")
        assert [s.name for s in statuses] == [p.name for p in PLATFORM_LIMITS]
        assert all(s.status == "ok" and s.remaining == s.limit for s in statuses)

    def test_twitter_thresholds(self):
        def twitter(text):
            return next(s for s in platform_status(text) if s.name == "twitter")

        assert twitter("x" * 209).status == "ok"
        assert twitter("x" * 210).status == "warning"
        assert twitter("x" * 280).status == "warning"
        assert twitter("x" * 281).status == "over"
        assert twitter("x" * 281).remaining == -1

    def test_payload(self):
        payload = platform_status("hello")[0].to_payload()
        assert payload == {"name": "twitter", "limit": 280, "remaining": 275, "status": "ok"}
