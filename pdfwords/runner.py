import argparse
import json
import logging
import sys

from .config import CompactLineAlgorithm, load_options
from .errors import PdfWordsError
from .pipeline import PdfReader


def main(argv=None):
    parser = argparse.ArgumentParser(description="Reconstruct words and lines from PDF text")

    parser.add_argument("pdf_path", help="Path to input PDF file")
    parser.add_argument("--page", type=int, default=None, help="Only print this 1-based page")

    # Output selection
    out = parser.add_mutually_exclusive_group()
    out.add_argument("--lines", action="store_true", help="Print lines instead of words")
    out.add_argument("--compact", choices=[a.value for a in CompactLineAlgorithm], help="Print compact lines")
    out.add_argument("--scanned", action="store_true", help="Only report whether the PDF looks scanned")

    # Reader options (defaults come from PDFWORDS_* env)
    parser.add_argument("--raw", action="store_true", default=None, help="Skip text normalization")
    parser.add_argument("--no-merge", dest="merge", action="store_false", default=None, help="Keep fragments unmerged")
    parser.add_argument("--simple-sort", action="store_true", default=None, help="Sort by (y0, x0) only")
    parser.add_argument("--keep-header", dest="exclude_header", action="store_false", default=None)
    parser.add_argument("--keep-footer", dest="exclude_footer", action="store_false", default=None)
    parser.add_argument("--header-pct", type=float, default=None, help="Header band as fraction of page height")
    parser.add_argument("--footer-pct", type=float, default=None, help="Footer band start as fraction of page height")
    parser.add_argument("--workers", type=int, default=None, help="Parallel workers for page reconstruction")
    parser.add_argument("--verbose", "-v", action="store_true", default=None)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    reader = PdfReader(
        load_options(),
        verbose=args.verbose,
        raw=args.raw,
        merge_close_text_neighbor=args.merge,
        simple_sort_algorithm=args.simple_sort,
        exclude_header=args.exclude_header,
        exclude_footer=args.exclude_footer,
        header_from_height_percentage=args.header_pct,
        footer_from_height_percentage=args.footer_pct,
        workers=args.workers,
    )
    try:
        with reader.open(args.pdf_path) as doc:
            texts = reader.get_texts(doc)
    except PdfWordsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.scanned:
        print(json.dumps({"scanned": reader.is_scanned(texts)}))
        return 0

    if args.lines:
        pages = reader.get_lines_from_texts(texts)
    elif args.compact:
        pages = reader.get_compact_lines_from_texts(texts, args.compact)
    else:
        pages = {n: t.words for n, t in texts.items()}

    if args.page is not None:
        pages = {args.page: pages.get(args.page, [])}

    payload = {str(n): [item.model_dump() for item in items] for n, items in pages.items()}
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
