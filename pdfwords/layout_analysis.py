from __future__ import annotations

from functools import cmp_to_key
from typing import Sequence

from .geometry_utils import Transform, apply_origin, compose
from .models import BBox, Dimension, Fragment, Word, WordMetadata
from .text_utils import _normalize_text


def map_fragments_to_words(
    fragments: Sequence[Fragment],
    page_transform: Transform,
    page_num: int,
    *,
    raw: bool = False,
) -> list[Word]:
    """
    Place each fragment in page space (y grows downward).

    The scale factor is the ratio of the composed x-translation to the
    fragment's own one, which absorbs whatever scale the viewport carries.
    """
    words: list[Word] = []
    for frag in fragments:
        x, y = apply_origin(compose(page_transform, frag.transform))
        own_x = float(frag.transform[4])
        scale = x / own_x if own_x != 0 else 1.0

        words.append(
            Word(
                text=frag.text if raw else _normalize_text(frag.text),
                bbox=BBox(
                    x0=x,
                    y0=y - frag.height * scale,
                    x1=x + frag.width * scale,
                    y1=y,
                ),
                dimension=Dimension(width=frag.width, height=frag.height),
                metadata=WordMetadata(
                    direction=frag.direction,
                    font_name=frag.font_name,
                    font_size=round(float(frag.height), 4),
                    has_eol=frag.has_eol,
                    page_num=page_num,
                ),
            )
        )
    return words


def _compare_rows(a: Word, b: Word) -> float:
    # Same row when the y0 jitter stays within half the average word height.
    avg_height = (abs(a.bbox.y1 - a.bbox.y0) + abs(b.bbox.y1 - b.bbox.y0)) / 2.0
    if abs(a.bbox.y0 - b.bbox.y0) <= avg_height * 0.5:
        return a.bbox.x0 - b.bbox.x0
    return a.bbox.y0 - b.bbox.y0


def sort_words_reading_order(words: list[Word], *, simple: bool = False) -> list[Word]:
    """Sort in place and return the same list."""
    if simple:
        words.sort(key=lambda w: (w.bbox.y0, w.bbox.x0))
    else:
        words.sort(key=cmp_to_key(_compare_rows))
    return words


def filter_page_regions(
    words: Sequence[Word],
    page_height: float,
    *,
    exclude_header: bool = True,
    exclude_footer: bool = True,
    header_from_height_percentage: float,
    footer_from_height_percentage: float,
) -> list[Word]:
    """Drop zero-size artifacts and header/footer bands, then number survivors from 0."""
    header_cut = page_height * header_from_height_percentage
    footer_cut = page_height * footer_from_height_percentage

    kept: list[Word] = []
    for w in words:
        if w.metadata.font_size == 0:
            continue
        if exclude_header and not (w.bbox.y0 > header_cut):
            continue
        if exclude_footer and not (w.bbox.y0 < footer_cut):
            continue
        kept.append(w)

    return [w.model_copy(update={"id": i}) for i, w in enumerate(kept)]
