from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional, Union

from .config import CompactLineAlgorithm, ReaderOptions, ScannedThreshold
from .errors import ReadCancelled
from .extractor import PdfDocument, Source, open_document
from .heuristics import is_scanned
from .layout_analysis import filter_page_regions, map_fragments_to_words, sort_words_reading_order
from .lines import assemble_compact_lines, assemble_lines, to_compact_words
from .merging import merge_close_neighbors
from .models import CompactPageLines, PageLines, PageText, PageTexts, TextContent, Viewport

logger = logging.getLogger(__name__)


class PdfReader:
    def __init__(self, options: Optional[ReaderOptions] = None, **overrides):
        self.options = (options or ReaderOptions()).merged(**overrides)

    def open(self, source: Source) -> PdfDocument:
        return open_document(source, verbose=self.options.verbose)

    def get_texts(self, doc: PdfDocument, *, cancel: Optional[threading.Event] = None) -> PageTexts:
        """
        Extract and reconstruct words for every page.

        Extraction stays on the calling thread (PyMuPDF documents are not
        thread-safe); reconstruction of each page may run on a worker pool.
        """
        pages: PageTexts = {}
        workers = max(1, int(self.options.workers))
        if workers == 1:
            for page_num in range(1, doc.page_count + 1):
                viewport, content = self._extract(doc, page_num, cancel)
                pages[page_num] = self.reconstruct_page(content, viewport, page_num)
            return pages

        with ThreadPoolExecutor(max_workers=workers) as ex:
            futures: dict[int, Future] = {}
            try:
                for page_num in range(1, doc.page_count + 1):
                    viewport, content = self._extract(doc, page_num, cancel)
                    futures[page_num] = ex.submit(self.reconstruct_page, content, viewport, page_num)
            except ReadCancelled:
                for fut in futures.values():
                    fut.cancel()
                raise
            for page_num, fut in futures.items():
                pages[page_num] = fut.result()
        return pages

    def _extract(
        self, doc: PdfDocument, page_num: int, cancel: Optional[threading.Event]
    ) -> tuple[Viewport, TextContent]:
        if cancel is not None and cancel.is_set():
            raise ReadCancelled(f"canceled before page {page_num}")
        page = doc.get_page(page_num)
        return page.get_viewport(), doc.get_text_fragments(page)

    def reconstruct_page(self, content: TextContent, viewport: Viewport, page_num: int) -> PageText:
        opts = self.options
        words = map_fragments_to_words(content.fragments, viewport.transform, page_num, raw=opts.raw)
        words = sort_words_reading_order(words, simple=opts.simple_sort_algorithm)
        if opts.merge_close_text_neighbor:
            words = merge_close_neighbors(words)
        kept = filter_page_regions(
            words,
            viewport.height,
            exclude_header=opts.exclude_header,
            exclude_footer=opts.exclude_footer,
            header_from_height_percentage=opts.header_from_height_percentage,
            footer_from_height_percentage=opts.footer_from_height_percentage,
        )
        logger.debug(
            "page %d: %d fragments, %d words, %d kept",
            page_num, len(content.fragments), len(words), len(kept),
        )
        return PageText(words=kept, lang=content.language or "")

    def get_lines_from_texts(self, page_texts: PageTexts) -> PageLines:
        return {n: assemble_lines(page_texts[n].words) for n in sorted(page_texts)}

    def get_compact_lines_from_texts(
        self,
        page_texts: PageTexts,
        algorithm: Union[CompactLineAlgorithm, str] = CompactLineAlgorithm.MIDDLE_Y,
    ) -> CompactPageLines:
        algorithm = CompactLineAlgorithm(algorithm)
        return {
            n: assemble_compact_lines(to_compact_words(page_texts[n].words), algorithm)
            for n in sorted(page_texts)
        }

    def is_scanned(self, page_texts: PageTexts, threshold: Optional[ScannedThreshold] = None) -> bool:
        return is_scanned(page_texts, threshold)
