from __future__ import annotations

import logging
from typing import Iterable, Optional

from .models import BBox, Dimension, Word, WordMetadata
from .text_utils import _is_list_marker

logger = logging.getLogger(__name__)

FONT_SIZE_TOLERANCE = 0.01
# Gaps narrower than this are kerning inside one token, not a word break.
KERNING_GAP = 1.0


def _is_artifact(w: Word) -> bool:
    if w.text == "" and (w.dimension.width == 0 or w.metadata.has_eol):
        return True
    if w.text == " " and w.metadata.font_size == 0 and not w.metadata.has_eol:
        return True
    return False


def _straddles_middle(group: Word, w: Word) -> bool:
    mid = group.bbox.middle_y
    return w.bbox.y0 <= mid <= w.bbox.y1


def _fold(group: Word, w: Word, *, list_lead: bool) -> Word:
    gap = w.bbox.x0 - group.bbox.x1
    sep = " "
    if gap < KERNING_GAP or group.text.endswith(" ") or w.text.startswith(" "):
        sep = ""
    return Word(
        text=group.text + sep + w.text,
        dimension=Dimension(
            width=w.bbox.x1 - group.bbox.x0,
            height=max(group.dimension.height, w.dimension.height),
        ),
        bbox=BBox(
            x0=group.bbox.x0,
            y0=min(group.bbox.y0, w.bbox.y0),
            x1=w.bbox.x1,
            y1=max(group.bbox.y1, w.bbox.y1),
        ),
        metadata=WordMetadata(
            direction=w.metadata.direction,
            font_name=w.metadata.font_name,
            font_size=w.metadata.font_size if list_lead else group.metadata.font_size,
            has_eol=w.metadata.has_eol,
            page_num=w.metadata.page_num,
        ),
    )


def merge_close_neighbors(words: Iterable[Word]) -> list[Word]:
    """
    Coalesce fragments of one token or short run that the extractor split apart.

    Input must already be in reading order. A word joins the open group when
    the group is a lone list bullet on the same row, or when it sits within one
    font size to the right, straddles the group's vertical middle, has the same
    font size, and the group is not terminated by an end-of-line.
    """
    result: list[Word] = []
    group: Optional[Word] = None

    for w in words:
        if _is_artifact(w):
            continue

        if group is None:
            group = w
        else:
            in_row = _straddles_middle(group, w)
            list_lead = in_row and _is_list_marker(group.text)
            near_x = w.bbox.x0 <= group.bbox.x1 + group.metadata.font_size
            same_size = abs(w.metadata.font_size - group.metadata.font_size) < FONT_SIZE_TOLERANCE

            if list_lead or (near_x and in_row and same_size and not group.metadata.has_eol):
                group = _fold(group, w, list_lead=list_lead)
            else:
                result.append(group)
                group = w

        if w.metadata.has_eol:
            result.append(group)
            group = None

    if group is not None:
        result.append(group)

    logger.debug("merged %d groups", len(result))
    return result
