import threading

import fitz
import pytest

from pdfwords import CompactLineAlgorithm, DocumentOpenError, PageIndexError, PdfReader, ReadCancelled, ReaderOptions


@pytest.fixture
def sample_pdf(tmp_path):
    """Two pages: header/body/footer on the first, a spaced heading on the second."""
    pdf_path = tmp_path / "sample.pdf"
    doc = fitz.open()
    page = doc.new_page()  # 595 x 842
    page.insert_text((72, 40), "Running header", fontsize=10)
    page.insert_text((72, 400), "Hello", fontsize=12)
    page.insert_text((300, 400), "World", fontsize=12)
    page.insert_text((72, 500), "Second line", fontsize=12)
    page.insert_text((72, 820), "Page 1", fontsize=10)

    page = doc.new_page()
    page.insert_text((72, 300), "S U M M A R Y", fontsize=14)
    doc.save(str(pdf_path))
    doc.close()
    return pdf_path


@pytest.fixture
def blank_pdf(tmp_path):
    pdf_path = tmp_path / "blank.pdf"
    doc = fitz.open()
    doc.new_page()
    doc.save(str(pdf_path))
    doc.close()
    return pdf_path


def _texts(page_text):
    return [w.text for w in page_text.words]


def test_get_texts_drops_header_and_footer(sample_pdf):
    reader = PdfReader()
    with reader.open(sample_pdf) as doc:
        texts = reader.get_texts(doc)
    assert sorted(texts) == [1, 2]
    page1 = " ".join(_texts(texts[1]))
    assert "Hello" in page1 and "World" in page1 and "Second line" in page1
    assert "Running header" not in page1
    assert "Page 1" not in page1
    assert [w.id for w in texts[1].words] == list(range(len(texts[1].words)))
    assert all(w.metadata.page_num == 1 for w in texts[1].words)


def test_get_texts_keeps_bands_when_disabled(sample_pdf):
    reader = PdfReader(exclude_header=False, exclude_footer=False)
    with reader.open(sample_pdf) as doc:
        page1 = " ".join(_texts(reader.get_texts(doc)[1]))
    assert "Running header" in page1
    assert "Page 1" in page1


def test_words_are_in_page_space(sample_pdf):
    reader = PdfReader()
    with reader.open(sample_pdf) as doc:
        texts = reader.get_texts(doc)
    second = next(w for w in texts[1].words if w.text.startswith("Second"))
    assert second.bbox.y1 == pytest.approx(500.0, abs=0.5)
    assert second.bbox.y0 == pytest.approx(488.0, abs=0.5)
    assert second.bbox.x0 == pytest.approx(72.0, abs=0.5)
    assert second.metadata.font_size == pytest.approx(12.0)


def test_spaced_heading_is_collapsed(sample_pdf):
    reader = PdfReader()
    with reader.open(sample_pdf) as doc:
        assert _texts(reader.get_texts(doc)[2]) == ["SUMMARY"]

    raw_reader = PdfReader(raw=True)
    with raw_reader.open(sample_pdf) as doc:
        assert _texts(raw_reader.get_texts(doc)[2]) == ["S U M M A R Y"]


def test_lines_from_texts(sample_pdf):
    reader = PdfReader()
    with reader.open(sample_pdf) as doc:
        texts = reader.get_texts(doc)
    lines = reader.get_lines_from_texts(texts)
    assert sorted(lines) == [1, 2]
    page1 = [l.text for l in lines[1]]
    assert len(page1) == 2
    assert "Hello" in page1[0] and "World" in page1[0]
    assert page1[1] == "Second line"
    assert lines[1][0].average_font_size == pytest.approx(12.0)
    assert [l.text for l in lines[2]] == ["SUMMARY"]


def test_compact_lines_from_texts(sample_pdf):
    reader = PdfReader()
    with reader.open(sample_pdf) as doc:
        texts = reader.get_texts(doc)
    full = reader.get_lines_from_texts(texts)
    for algorithm in (CompactLineAlgorithm.MIDDLE_Y, "y0"):
        compact = reader.get_compact_lines_from_texts(texts, algorithm)
        assert [l.text for l in compact[1]] == [l.text for l in full[1]]
        assert [l.text for l in compact[2]] == ["SUMMARY"]


def test_open_from_bytes(sample_pdf):
    reader = PdfReader()
    with reader.open(sample_pdf.read_bytes()) as doc:
        assert doc.page_count == 2
        assert sorted(reader.get_texts(doc)) == [1, 2]


def test_open_rejects_garbage():
    with pytest.raises(DocumentOpenError):
        PdfReader().open(b"definitely not a pdf")


def test_open_missing_file(tmp_path):
    with pytest.raises(DocumentOpenError):
        PdfReader().open(tmp_path / "missing.pdf")


def test_page_index_is_one_based(sample_pdf):
    with PdfReader().open(sample_pdf) as doc:
        assert doc.get_page(1).page_num == 1
        with pytest.raises(PageIndexError):
            doc.get_page(0)
        with pytest.raises(PageIndexError):
            doc.get_page(3)


def test_worker_pool_gives_same_result(sample_pdf):
    serial = PdfReader()
    pooled = PdfReader(ReaderOptions(workers=3))
    with serial.open(sample_pdf) as doc:
        a = serial.get_texts(doc)
    with pooled.open(sample_pdf) as doc:
        b = pooled.get_texts(doc)
    assert a == b


@pytest.mark.parametrize("workers", [1, 2])
def test_cancel_between_pages(sample_pdf, workers):
    reader = PdfReader(workers=workers)
    cancel = threading.Event()
    cancel.set()
    with reader.open(sample_pdf) as doc:
        with pytest.raises(ReadCancelled):
            reader.get_texts(doc, cancel=cancel)


def test_is_scanned(sample_pdf, blank_pdf, tmp_path):
    reader = PdfReader()
    with reader.open(blank_pdf) as doc:
        assert reader.is_scanned(reader.get_texts(doc)) is True

    dense = tmp_path / "dense.pdf"
    doc = fitz.open()
    page = doc.new_page()
    for i in range(30):
        page.insert_text((72, 100 + i * 20), "lorem ipsum dolor sit amet consectetur", fontsize=10)
    doc.save(str(dense))
    doc.close()
    with reader.open(dense) as doc:
        assert reader.is_scanned(reader.get_texts(doc)) is False
