"""Page extraction orchestrator."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path

from pdf_page_extractor.core.config import ExtractionConfig
from pdf_page_extractor.core.document import PDFDocument
from pdf_page_extractor.utils.page_range import (
    PageSelection,
    out_of_range_pages,
    pages_to_keep,
    pages_to_remove,
    parse_page_selection,
)


@dataclass
class ExtractionResult:
    """Summary of a finished extraction. Page numbers are 1-based."""

    output_path: Path
    total_pages: int
    kept_pages: list[int]
    removed_pages: list[int]


class PageExtractor:
    """
    Copies the selected pages of a PDF into a new PDF.

    Every page that was not requested is deleted from the loaded
    document before it is saved, so kept pages stay in their original
    order.

    Example:
        >>> from pdf_page_extractor import PageExtractor
        >>> extractor = PageExtractor()
        >>> extractor.extract("book.pdf", "chapter.pdf", "12-30")
    """

    def __init__(self, config: ExtractionConfig | None = None):
        """
        Initialize the extractor.

        Args:
            config: Extraction settings. If None, uses defaults.
        """
        self.config = config or ExtractionConfig()

    def extract(
        self,
        input_path: str | Path,
        output_path: str | Path,
        pages: str | PageSelection,
    ) -> ExtractionResult:
        """
        Extract pages into a new PDF.

        Args:
            input_path: Path to the input PDF
            output_path: Where to save the result. Must not exist unless
                the config allows overwriting
            pages: Selector string such as "1-3,5,9-", or an already
                parsed selection

        Returns:
            ExtractionResult describing what was kept and removed

        Raises:
            FileNotFoundError: If the input file does not exist
            FileExistsError: If the output file already exists
            PageRangeError: If the selector is malformed
            ValueError: If no page of the document would be kept, or a
                page is out of range in strict mode
        """
        input_path = Path(input_path)
        output_path = Path(output_path)

        # Cheap filesystem checks first, before any parsing or loading
        if not input_path.exists():
            raise FileNotFoundError(f"PDF not found: {input_path}")
        if output_path.exists() and not self.config.overwrite:
            raise FileExistsError(
                f"Output file already exists, please remove it first: {output_path}"
            )

        if isinstance(pages, PageSelection):
            selection = pages
        else:
            selection = parse_page_selection(pages)

        self._log_start(input_path, output_path, selection)
        total_start = time.time()

        with PDFDocument(input_path) as document:
            total_pages = document.page_count
            self._log(f"  PDF has {total_pages} pages")

            if self.config.strict:
                self._check_bounds(selection, total_pages)

            keep = pages_to_keep(selection, total_pages)
            remove = pages_to_remove(selection, total_pages)
            if not keep:
                raise ValueError("No valid pages to extract")

            self._log(f"  Keeping pages: {[i + 1 for i in keep]}")
            self._log(f"  Removing {len(remove)} pages\n")

            document.delete_pages(remove)

            self._log("Saving PDF...")
            start = time.time()
            document.save(output_path, **self.config.save_options)
            self._log(f"  Saved to {output_path}")
            self._log(f"  Done in {time.time() - start:.2f}s\n")

        self._log_complete(total_start, len(keep), output_path)

        return ExtractionResult(
            output_path=output_path,
            total_pages=total_pages,
            kept_pages=[i + 1 for i in keep],
            removed_pages=[i + 1 for i in remove],
        )

    def _check_bounds(self, selection: PageSelection, total_pages: int) -> None:
        """Reject explicit page numbers the document does not have."""
        outside = out_of_range_pages(selection, total_pages)
        if outside:
            listed = ", ".join(str(r) for r in outside)
            raise ValueError(
                f"Pages out of range for a {total_pages}-page document: {listed}"
            )

    def _log(self, message: str) -> None:
        """Print a progress line unless running quietly."""
        if self.config.verbose:
            print(message)

    def _log_start(
        self, input_path: Path, output_path: Path, selection: PageSelection
    ) -> None:
        """Print startup information."""
        self._log("=" * 50)
        self._log("PDF Page Extractor")
        self._log("=" * 50)
        self._log(f"Input:  {input_path}")
        self._log(f"Output: {output_path}")
        self._log(f"Pages: {str(selection) or '(none)'}")
        self._log(f"Strict: {self.config.strict}")
        self._log("=" * 50)
        self._log("")

    def _log_complete(
        self, start_time: float, num_pages: int, output_path: Path
    ) -> None:
        """Print completion summary."""
        elapsed = time.time() - start_time
        self._log("=" * 50)
        self._log("Complete!")
        self._log(f"Extracted {num_pages} pages in {elapsed:.2f}s")
        self._log(f"Output: {output_path}")
        self._log("=" * 50)
