from __future__ import annotations

import math
from typing import Iterable, Sequence

import fitz

from .models import BBox

Transform = Sequence[float]


def compose(outer: Transform, inner: Transform) -> tuple[float, float, float, float, float, float]:
    """
    Transform that applies `inner` first and `outer` second.
    PyMuPDF multiplies row vectors, so the left operand is applied first.
    """
    m = fitz.Matrix(*inner) * fitz.Matrix(*outer)
    return (float(m.a), float(m.b), float(m.c), float(m.d), float(m.e), float(m.f))


def apply_origin(transform: Transform) -> tuple[float, float]:
    p = fitz.Point(0, 0) * fitz.Matrix(*transform)
    return float(p.x), float(p.y)


def _union_bbox(boxes: Iterable[BBox], *, seed_max: float = -math.inf) -> BBox:
    x0 = y0 = math.inf
    x1 = y1 = seed_max
    for b in boxes:
        x0 = min(x0, b.x0)
        y0 = min(y0, b.y0)
        x1 = max(x1, b.x1)
        y1 = max(y1, b.y1)
    return BBox(x0=x0, y0=y0, x1=x1, y1=y1)


def _y_extent(boxes: Iterable[BBox]) -> tuple[float, float]:
    y0, y1 = math.inf, -math.inf
    for b in boxes:
        y0 = min(y0, b.y0)
        y1 = max(y1, b.y1)
    return y0, y1
