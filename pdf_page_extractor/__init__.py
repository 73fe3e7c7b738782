"""
PDF Page Extractor - Copy selected pages of a PDF into a new PDF.

Pages are chosen with a selector string such as "1-3,5,9-" and the
document is handled with PyMuPDF.
"""

from pdf_page_extractor.core.config import ExtractionConfig
from pdf_page_extractor.core.extractor import ExtractionResult, PageExtractor
from pdf_page_extractor.utils.page_range import (
    PageRangeError,
    PageSelection,
    parse_page_selection,
)

__version__ = "0.1.0"

__all__ = [
    "ExtractionConfig",
    "ExtractionResult",
    "PageExtractor",
    "PageRangeError",
    "PageSelection",
    "parse_page_selection",
    "__version__",
]
