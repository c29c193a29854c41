from __future__ import annotations

from typing import Literal

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig


class TextMetricsColumnConfig(SingleColumnConfig):
    """Attach text statistics to each row: counts, reading time, readability and passive voice.

    The target columns of a row are joined with spaces and analyzed as one text.
    Every metric is computed locally; no LLM calls are made.

    Attributes:
        target_columns: Columns whose text content will be concatenated and analyzed.
        words_per_minute: Reading speed used for the reading time estimate.
        top_words: Number of most frequent non-stop words to include.
        include_readability: Include Flesch Reading Ease and Flesch-Kincaid grade.
        include_characters: Include the full per-category character counts.
    """

    target_columns: list[str]
    words_per_minute: int = Field(default=250, gt=0, description="Reading speed in words per minute")
    top_words: int = Field(default=10, ge=0, description="Number of most frequent words to include")
    include_readability: bool = Field(default=True, description="Include readability scores in output")
    include_characters: bool = Field(default=False, description="Include per-category character counts in output")
    column_type: Literal["text-metrics"] = "text-metrics"

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f4ca"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []
