from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_text_metrics.config import TextMetricsColumnConfig
from data_designer_text_metrics.core import Hyperparameters, analyze_text

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


class TextMetricsColumnGenerator(ColumnGeneratorFullColumn[TextMetricsColumnConfig]):
    """Column generator that attaches text statistics to every row."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f4ca Computing text metrics for column {self.config.name!r}")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   words per minute: {self.config.words_per_minute}")

        hp = Hyperparameters(
            words_per_minute=self.config.words_per_minute,
            top_words=self.config.top_words,
            include_readability=self.config.include_readability,
        )

        results = []
        for _, row in data[self.config.target_columns].iterrows():
            text = " ".join(str(v) for v in row.values if v is not None)
            analysis = analyze_text(text, hyperparameters=hp)
            if not self.config.include_characters:
                analysis.pop("characters")
            results.append(analysis)

        data = data.copy()
        data[self.config.name] = results
        return data
