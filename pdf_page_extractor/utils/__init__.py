"""Utility functions for PDF Page Extractor."""

from pdf_page_extractor.utils.page_range import (
    PageRange,
    PageRangeError,
    PageSelection,
    out_of_range_pages,
    pages_to_keep,
    pages_to_remove,
    parse_page_range,
    parse_page_selection,
)

__all__ = [
    "PageRange",
    "PageRangeError",
    "PageSelection",
    "out_of_range_pages",
    "pages_to_keep",
    "pages_to_remove",
    "parse_page_range",
    "parse_page_selection",
]
