"""PDF document access using PyMuPDF."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import fitz


class PDFDocument:
    """
    Thin wrapper around a PyMuPDF document.

    Exposes only what page extraction needs: the page count, deleting
    pages by index and saving to a new file.
    """

    def __init__(self, path: str | Path):
        """
        Open a PDF file.

        Args:
            path: Path to the PDF file
        """
        import fitz

        self.path = Path(path)
        self._doc: fitz.Document | None = fitz.open(str(self.path))

    def __enter__(self) -> PDFDocument:
        """Context manager entry."""
        return self

    def __exit__(self, *args: object) -> None:
        """Context manager exit - close the document."""
        self.close()

    def close(self) -> None:
        """Close the PDF document without saving."""
        if self._doc is not None:
            self._doc.close()
            self._doc = None

    @property
    def page_count(self) -> int:
        """Get the total number of pages."""
        if self._doc is None:
            raise RuntimeError("No document open")
        return len(self._doc)

    def delete_pages(self, indices: Sequence[int]) -> None:
        """
        Delete pages from the document.

        PyMuPDF also removes outline entries and links pointing at the
        deleted pages.

        Args:
            indices: 0-based page indices to remove
        """
        if self._doc is None:
            raise RuntimeError("No document open")
        if not indices:
            return

        for index in indices:
            if index < 0 or index >= len(self._doc):
                raise IndexError(f"Page index {index} out of range")

        self._doc.delete_pages(list(indices))

    def save(self, output_path: str | Path, **options: int | bool) -> Path:
        """
        Save the document to a new file.

        Args:
            output_path: Where to write the PDF
            **options: Extra keyword arguments for ``fitz.Document.save``

        Returns:
            Path to the saved file
        """
        if self._doc is None:
            raise RuntimeError("No document open")

        output_path = Path(output_path)
        self._doc.save(str(output_path), **options)
        return output_path
