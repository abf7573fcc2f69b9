import pytest

from pdfwords.config import ReaderOptions, load_options


def test_defaults():
    opts = ReaderOptions()
    assert opts.exclude_header and opts.exclude_footer
    assert opts.merge_close_text_neighbor
    assert not opts.raw and not opts.simple_sort_algorithm and not opts.verbose
    assert opts.header_from_height_percentage == 0.09
    assert opts.footer_from_height_percentage == 0.92
    assert opts.workers == 1


def test_merged_ignores_none():
    opts = ReaderOptions().merged(raw=True, exclude_footer=None, workers=3)
    assert opts.raw is True
    assert opts.exclude_footer is True
    assert opts.workers == 3


def test_load_options_from_env(monkeypatch):
    monkeypatch.setenv("PDFWORDS_RAW", "yes")
    monkeypatch.setenv("PDFWORDS_EXCLUDE_HEADER", '"0"')
    monkeypatch.setenv("PDFWORDS_HEADER_PCT", "0.1")
    monkeypatch.setenv("PDFWORDS_WORKERS", "4")
    opts = load_options()
    assert opts.raw is True
    assert opts.exclude_header is False
    assert opts.header_from_height_percentage == 0.1
    assert opts.workers == 4
    assert opts.exclude_footer is True


def test_load_options_rejects_bad_bool(monkeypatch):
    monkeypatch.setenv("PDFWORDS_SIMPLE_SORT", "maybe")
    with pytest.raises(ValueError):
        load_options()
