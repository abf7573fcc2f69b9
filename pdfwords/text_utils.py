from __future__ import annotations

import re

# Leading glyphs of unordered list items; they get merged into the text that follows.
UNORDERED_LIST_MARKERS = frozenset({"•", "-", "◦", "▪", "▫"})

# "S U M M A R Y": single capitals separated by single spaces, emitted by some
# font encodings for letter-spaced headings.
_SPACED_LETTERS_RE = re.compile(r"^(?:[A-Z]\s)+[A-Z]$")


def _normalize_text(s: str) -> str:
    if _SPACED_LETTERS_RE.match(s):
        return re.sub(r"\s", "", s)
    return s


def _is_list_marker(s: str) -> bool:
    t = s.strip()
    return len(t) == 1 and t in UNORDERED_LIST_MARKERS
