# Readability scores come from textstat; this module maps them onto the fixed
# label, explanation and grade-level bands shown alongside the other metrics.

from __future__ import annotations

import math
from dataclasses import dataclass

import textstat

from data_designer_text_metrics._text import coerce_text


@dataclass(frozen=True)
class ReadabilityBand:
    """Flesch Reading Ease band; a score belongs to the first band whose bound exceeds it."""

    upper_bound: float
    label: str
    explanation: str


READABILITY_BANDS = (
    ReadabilityBand(
        10,
        "Extremely difficult",
        "This highly complex text requires advanced education and specialized knowledge to comprehend. "
        "Your content is best suited for academic research papers, legal documents, medical journals, "
        "scientific publications, and technical literature targeting PhD-level readers. While this "
        "complexity may be necessary for specialized fields, consider simplifying language where possible "
        "to improve accessibility and search engine optimization. Dense academic writing can limit your "
        "audience reach and may negatively impact SEO rankings due to reduced user engagement and higher "
        "bounce rates.",
    ),
    ReadabilityBand(
        30,
        "Very Difficult",
        "Your text demonstrates sophisticated vocabulary and complex sentence structures, making it "
        "appropriate for scholarly articles, professional journals, advanced textbooks, and detailed "
        "technical documentation. This content targets highly educated professionals and academics. While "
        "demonstrating expertise, consider breaking up long sentences and explaining technical terms to "
        "broaden your audience appeal. Search engines favor content that engages users longer, so improving "
        "readability can boost SEO performance while maintaining professional credibility and subject "
        "matter authority.",
    ),
    ReadabilityBand(
        50,
        "Difficult",
        "This moderately complex content is well-suited for academic textbooks, detailed business reports, "
        "professional communications, industry white papers, and specialized blog posts targeting educated "
        "audiences. Your content requires some concentration to read comfortably. This level works well for "
        "B2B marketing, thought leadership articles, and educational resources. To maximize SEO impact and "
        "user engagement, consider adding subheadings, bullet points, and shorter paragraphs while "
        "maintaining your professional tone and comprehensive coverage of topics.",
    ),
    ReadabilityBand(
        60,
        "Somewhat Challenging",
        "Your content strikes a good balance between professionalism and accessibility, making it perfect "
        "for news articles, business writing, educational content, and informative blog posts. This text is "
        "readable by most high school graduates and appeals to a broad professional audience. This "
        "readability level is excellent for content marketing, company communications, and informational "
        "websites. Your writing effectively communicates complex ideas without overwhelming readers, which "
        "can improve user engagement metrics and search engine rankings through better time-on-page and "
        "lower bounce rates.",
    ),
    ReadabilityBand(
        70,
        "Plain English",
        "Excellent work! Your content achieves optimal readability for web content, making it accessible to "
        "general audiences while maintaining credibility and depth. This readability level is ideal for most "
        "business communications, marketing materials, blog posts, social media content, and website copy. "
        "Your writing successfully balances clarity with substance, making complex topics understandable "
        "without sacrificing professionalism. This readability sweet spot typically generates higher user "
        "engagement, longer session durations, and better SEO performance, as search engines reward content "
        "that keeps users engaged and provides value to diverse audiences.",
    ),
    ReadabilityBand(
        80,
        "Easy",
        "Outstanding readability! Your content is perfectly optimized for maximum audience reach and "
        "engagement. This text is ideal for marketing copy, blog posts, social media content, email "
        "campaigns, and any material targeting broad consumer audiences. Your clear, concise writing style "
        "makes information easily digestible while maintaining professionalism and authority. This "
        "readability level typically performs exceptionally well in SEO rankings due to high user "
        "engagement, extended time-on-page, social sharing potential, and broad accessibility. Content at "
        "this level often sees improved conversion rates and better overall digital marketing performance.",
    ),
    ReadabilityBand(
        math.inf,
        "Very Easy",
        "Perfect for maximum accessibility and universal appeal! Your content achieves exceptional clarity, "
        "making it easily understood by virtually all readers, including children, non-native speakers, and "
        "individuals with varying literacy levels. This highly accessible writing is excellent for "
        "children's content, simple instructions, public health communications, safety information, and "
        "content requiring maximum inclusivity. While maintaining simplicity, ensure your content still "
        "provides value and expertise to avoid appearing unprofessional. This readability level can "
        "significantly boost SEO performance through increased engagement, social sharing, and broader "
        "audience appeal, though balance simplicity with authoritative, valuable information.",
    ),
)


def flesch_reading_ease(text: object) -> float | None:
    text = coerce_text(text)
    if not text.strip():
        return None
    return float(textstat.flesch_reading_ease(text))


def flesch_kincaid_grade(text: object) -> float | None:
    text = coerce_text(text)
    if not text.strip():
        return None
    return float(textstat.flesch_kincaid_grade(text))


def readability_band(score: float) -> ReadabilityBand:
    for band in READABILITY_BANDS:
        if score < band.upper_bound:
            return band
    return READABILITY_BANDS[-1]


def readability_label(score: float) -> str:
    return readability_band(score).label


def readability_explanation(score: float) -> str:
    return readability_band(score).explanation


def _ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def grade_level_label(grade: float) -> str:
    """Clamp a Flesch-Kincaid grade to a school-grade label."""
    level = math.floor(grade)
    if level <= 1:
        return "1st Grade or Lower"
    if level > 12:
        return "College or Higher"
    return f"{_ordinal(level)} Grade"


def readability_summary(text: object) -> dict | None:
    """Scores and labels for ``text``, or None when the text is blank."""
    ease = flesch_reading_ease(text)
    grade = flesch_kincaid_grade(text)
    if ease is None or grade is None:
        return None
    return {
        "flesch_reading_ease": round(ease, 2),
        "flesch_kincaid_grade": round(grade, 2),
        "label": readability_label(ease),
        "grade_level": grade_level_label(grade),
    }
