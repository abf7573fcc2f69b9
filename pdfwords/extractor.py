from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import fitz  # PyMuPDF

from .errors import DocumentOpenError, PageIndexError
from .models import Fragment, TextContent, Viewport

logger = logging.getLogger(__name__)

Source = Union[str, Path, bytes, bytearray, memoryview]


class PdfPage:
    def __init__(self, page: "fitz.Page", page_num: int):
        self._page = page
        self.page_num = page_num

    def get_viewport(self) -> Viewport:
        # Scale-1 viewport: flip PDF user space (y up) into page space (y down).
        w = float(self._page.rect.width)
        h = float(self._page.rect.height)
        return Viewport(width=w, height=h, transform=(1.0, 0.0, 0.0, -1.0, 0.0, h))

    def get_text_fragments(self, *, language: str = "") -> TextContent:
        """
        One fragment per PyMuPDF span, in extraction order.
        The fragment transform carries the font size as scale and the
        baseline origin in PDF user space; the last span of each line has EOL set.
        """
        h = float(self._page.rect.height)
        fragments: list[Fragment] = []
        page_dict = self._page.get_text("dict")
        for b in page_dict.get("blocks", []):
            lines = b.get("lines") or []
            for l in lines:
                spans = l.get("spans") or []
                direction = "rtl" if float((l.get("dir") or (1.0, 0.0))[0]) < 0 else "ltr"
                for i, s in enumerate(spans):
                    size = float(s.get("size", 0.0))
                    ox, oy = s.get("origin") or (s["bbox"][0], s["bbox"][3])
                    x0, _, x1, _ = s["bbox"]
                    fragments.append(
                        Fragment(
                            text=s.get("text", ""),
                            direction=direction,
                            width=float(x1) - float(x0),
                            height=size,
                            transform=(size, 0.0, 0.0, size, float(ox), h - float(oy)),
                            font_name=s.get("font", ""),
                            has_eol=(i == len(spans) - 1),
                        )
                    )
        return TextContent(fragments=fragments, language=language)


class PdfDocument:
    def __init__(self, doc: "fitz.Document"):
        self._doc = doc
        self.language: str = getattr(doc, "language", None) or ""

    @property
    def page_count(self) -> int:
        return int(self._doc.page_count)

    def get_page(self, page_num: int) -> PdfPage:
        if page_num < 1 or page_num > self.page_count:
            raise PageIndexError(page_num, self.page_count)
        return PdfPage(self._doc[page_num - 1], page_num)

    def get_text_fragments(self, page: PdfPage) -> TextContent:
        return page.get_text_fragments(language=self.language)

    def close(self) -> None:
        self._doc.close()

    def __enter__(self) -> "PdfDocument":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def open_document(source: Source, *, verbose: bool = False) -> PdfDocument:
    fitz.TOOLS.mupdf_display_errors(bool(verbose))
    fitz.TOOLS.mupdf_display_warnings(bool(verbose))
    try:
        if isinstance(source, (str, Path)):
            doc = fitz.open(str(source))
        else:
            doc = fitz.open(stream=bytes(source), filetype="pdf")
    except (OSError, RuntimeError, ValueError) as e:
        raise DocumentOpenError(f"cannot open PDF: {e}") from e
    if not doc.is_pdf:
        doc.close()
        raise DocumentOpenError("input is not a PDF document")
    logger.info("opened PDF with %d pages", doc.page_count)
    return PdfDocument(doc)
