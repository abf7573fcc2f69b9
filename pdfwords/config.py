from __future__ import annotations

import os
from dataclasses import dataclass, replace
from enum import Enum

HEADER_FROM_HEIGHT_PERCENTAGE = 0.09
FOOTER_FROM_HEIGHT_PERCENTAGE = 0.92
WORDS_PER_PAGE_THRESHOLD = 10
TEXT_LENGTH_THRESHOLD = 100

# Absolute y0 distance used by the legacy compact line clustering.
COMPACT_Y0_TOLERANCE = 5.0


class CompactLineAlgorithm(str, Enum):
    MIDDLE_Y = "middleY"
    Y0 = "y0"


@dataclass(frozen=True)
class ReaderOptions:
    verbose: bool = False
    exclude_header: bool = True
    exclude_footer: bool = True
    header_from_height_percentage: float = HEADER_FROM_HEIGHT_PERCENTAGE
    footer_from_height_percentage: float = FOOTER_FROM_HEIGHT_PERCENTAGE
    raw: bool = False
    merge_close_text_neighbor: bool = True
    simple_sort_algorithm: bool = False
    workers: int = 1

    def merged(self, **overrides) -> "ReaderOptions":
        # None means "keep the current value", so CLI flags can be passed straight through.
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


@dataclass(frozen=True)
class ScannedThreshold:
    words_per_page: float = WORDS_PER_PAGE_THRESHOLD
    text_length: int = TEXT_LENGTH_THRESHOLD


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env(name: str) -> str | None:
    raw = os.environ.get(name)
    if raw is None:
        return None
    raw = raw.strip()
    # Users often set env vars with quotes (e.g. cmd.exe: set PDFWORDS_RAW="1").
    if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in ("'", '"'):
        raw = raw[1:-1].strip()
    return raw or None


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    v = raw.lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"{name}: expected a boolean, got {raw!r}")


def _env_float(name: str, default: float) -> float:
    raw = _env(name)
    return default if raw is None else float(raw)


def load_options() -> ReaderOptions:
    d = ReaderOptions()
    return ReaderOptions(
        verbose=_env_bool("PDFWORDS_VERBOSE", d.verbose),
        exclude_header=_env_bool("PDFWORDS_EXCLUDE_HEADER", d.exclude_header),
        exclude_footer=_env_bool("PDFWORDS_EXCLUDE_FOOTER", d.exclude_footer),
        header_from_height_percentage=_env_float("PDFWORDS_HEADER_PCT", d.header_from_height_percentage),
        footer_from_height_percentage=_env_float("PDFWORDS_FOOTER_PCT", d.footer_from_height_percentage),
        raw=_env_bool("PDFWORDS_RAW", d.raw),
        merge_close_text_neighbor=_env_bool("PDFWORDS_MERGE_NEIGHBORS", d.merge_close_text_neighbor),
        simple_sort_algorithm=_env_bool("PDFWORDS_SIMPLE_SORT", d.simple_sort_algorithm),
        workers=max(1, int(_env_float("PDFWORDS_WORKERS", d.workers))),
    )
