"""Core modules for PDF page extraction."""

from pdf_page_extractor.core.config import ExtractionConfig
from pdf_page_extractor.core.document import PDFDocument
from pdf_page_extractor.core.extractor import ExtractionResult, PageExtractor

__all__ = [
    "ExtractionConfig",
    "ExtractionResult",
    "PageExtractor",
    "PDFDocument",
]
