from __future__ import annotations

from typing import Callable, Sequence, TypeVar, Union

from .config import COMPACT_Y0_TOLERANCE, CompactLineAlgorithm
from .geometry_utils import _union_bbox, _y_extent
from .models import CompactLine, CompactWord, Dimension, Line, Word

_W = TypeVar("_W", Word, CompactWord)


def _group_by_middle_y(words: Sequence[_W]) -> list[list[_W]]:
    """
    Greedy single pass: a word joins the first group (in creation order) whose
    current vertical middle it straddles. Groups are never merged afterwards.
    """
    groups: list[list[_W]] = []
    for word in words:
        for group in groups:
            y0, y1 = _y_extent(w.bbox for w in group)
            mid = (y0 + y1) / 2.0
            if word.bbox.y0 <= mid <= word.bbox.y1:
                group.append(word)
                break
        else:
            groups.append([word])
    return groups


def _finalize_line(words: list[Word]) -> Line:
    assert words, "line group must not be empty"
    bbox = _union_bbox(w.bbox for w in words)
    words = sorted(words, key=lambda w: w.bbox.x0)
    return Line(
        text=" ".join(w.text for w in words),
        bbox=bbox,
        dimension=Dimension(width=bbox.x1 - bbox.x0, height=bbox.y1 - bbox.y0),
        average_font_size=sum(w.metadata.font_size for w in words) / len(words),
        words=words,
    )


def assemble_lines(words: Sequence[Word]) -> list[Line]:
    return [_finalize_line(g) for g in _group_by_middle_y(words)]


def to_compact_words(words: Sequence[Word]) -> list[CompactWord]:
    return [CompactWord(text=w.text, bbox=w.bbox) for w in words]


def _finalize_compact_line(words: list[CompactWord]) -> CompactLine:
    assert words, "line group must not be empty"
    bbox = _union_bbox(w.bbox for w in words)
    words = sorted(words, key=lambda w: w.bbox.x0)
    return CompactLine(text=" ".join(w.text for w in words), bbox=bbox, words=words)


def compact_lines_by_middle_y(words: Sequence[CompactWord]) -> list[CompactLine]:
    return [_finalize_compact_line(g) for g in _group_by_middle_y(words)]


def _finalize_compact_line_y0(words: list[CompactWord]) -> CompactLine:
    assert words, "line group must not be empty"
    words = sorted(words, key=lambda w: w.bbox.x0)
    # x1/y1 start at 0 rather than -inf; historical output depends on it.
    bbox = _union_bbox((w.bbox for w in words), seed_max=0.0)
    return CompactLine(text=" ".join(w.text for w in words), bbox=bbox, words=words)


def compact_lines_by_y0(
    words: Sequence[CompactWord], *, tolerance: float = COMPACT_Y0_TOLERANCE
) -> list[CompactLine]:
    """Join the first line whose first word has a y0 within `tolerance`."""
    groups: list[list[CompactWord]] = []
    for word in words:
        for group in groups:
            if abs(group[0].bbox.y0 - word.bbox.y0) <= tolerance:
                group.append(word)
                break
        else:
            groups.append([word])
    return [_finalize_compact_line_y0(g) for g in groups]


_COMPACT_ALGORITHMS: dict[CompactLineAlgorithm, Callable[[Sequence[CompactWord]], list[CompactLine]]] = {
    CompactLineAlgorithm.MIDDLE_Y: compact_lines_by_middle_y,
    CompactLineAlgorithm.Y0: compact_lines_by_y0,
}


def assemble_compact_lines(
    words: Sequence[CompactWord],
    algorithm: Union[CompactLineAlgorithm, str] = CompactLineAlgorithm.MIDDLE_Y,
) -> list[CompactLine]:
    return _COMPACT_ALGORITHMS[CompactLineAlgorithm(algorithm)](words)
