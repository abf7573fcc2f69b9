from __future__ import annotations

import logging
from typing import Optional

from .config import ScannedThreshold
from .models import PageTexts

logger = logging.getLogger(__name__)


def is_scanned(page_texts: PageTexts, threshold: Optional[ScannedThreshold] = None) -> bool:
    """
    Guess whether a document is image-only: too few words per page on
    average, or too little text overall.
    """
    threshold = threshold or ScannedThreshold()
    total_pages = len(page_texts)
    if total_pages == 0:
        logger.warning("scan check on an empty page set; reporting not scanned")
        return False

    total_words = 0
    full_text = ""
    for page_num in sorted(page_texts):
        texts = " ".join(w.text for w in page_texts[page_num].words)
        full_text += f"{texts} "
        total_words += len(texts.split())

    average_words_per_page = total_words / total_pages
    logger.debug("scan check: %.1f words/page, %d chars", average_words_per_page, len(full_text))
    return average_words_per_page < threshold.words_per_page or len(full_text) < threshold.text_length
