from __future__ import annotations


class PdfWordsError(Exception):
    pass


class DocumentOpenError(PdfWordsError):
    """The input could not be opened as a PDF document."""


class PageIndexError(PdfWordsError, IndexError):
    def __init__(self, page_num: int, page_count: int):
        super().__init__(f"page {page_num} out of range (document has {page_count} pages)")
        self.page_num = page_num
        self.page_count = page_count


class ReadCancelled(PdfWordsError, RuntimeError):
    pass
