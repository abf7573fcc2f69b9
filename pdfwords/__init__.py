from .config import CompactLineAlgorithm, ReaderOptions, ScannedThreshold, load_options
from .errors import DocumentOpenError, PageIndexError, PdfWordsError, ReadCancelled
from .models import CompactLine, CompactWord, Line, PageText, Word
from .pipeline import PdfReader

__all__ = [
    "PdfReader",
    "ReaderOptions",
    "ScannedThreshold",
    "CompactLineAlgorithm",
    "load_options",
    "Word",
    "Line",
    "CompactWord",
    "CompactLine",
    "PageText",
    "PdfWordsError",
    "DocumentOpenError",
    "PageIndexError",
    "ReadCancelled",
]
