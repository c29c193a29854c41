from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def coerce_text(text: object) -> str:
    """Return ``text`` unchanged if it is a string, otherwise an empty string."""
    if isinstance(text, str):
        return text
    if text is not None:
        logger.debug(f"Treating non-string input of type {type(text).__name__} as empty text")
    return ""
