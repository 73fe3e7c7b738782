"""Pytest configuration and shared fixtures."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def make_pdf(tmp_path):
    """Return a factory that writes a PDF whose pages each say 'Page N'."""
    import fitz

    def _make_pdf(name, page_count):
        path = tmp_path / name
        doc = fitz.open()
        for number in range(1, page_count + 1):
            page = doc.new_page()
            page.insert_text((72, 72), f"Page {number}")
        doc.save(str(path))
        doc.close()
        return path

    return _make_pdf


@pytest.fixture
def ten_page_pdf(make_pdf):
    """Create a real 10-page PDF for end-to-end tests."""
    return make_pdf("ten.pdf", 10)


@pytest.fixture
def read_page_texts():
    """Return a helper that reads back the text of every page of a PDF."""
    import fitz

    def _read(path):
        with fitz.open(str(path)) as doc:
            return [page.get_text("text").strip() for page in doc]

    return _read


@pytest.fixture
def temp_pdf(tmp_path):
    """Create a placeholder PDF file for tests that mock PyMuPDF."""
    pdf_file = tmp_path / "test.pdf"
    pdf_file.write_bytes(b"%PDF-1.4")
    return pdf_file


@pytest.fixture
def mock_fitz():
    """Create a fake fitz module whose documents have 10 pages."""
    fitz_module = MagicMock()
    mock_doc = MagicMock()
    mock_doc.__len__ = MagicMock(return_value=10)
    fitz_module.open.return_value = mock_doc
    return fitz_module
