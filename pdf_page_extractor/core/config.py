"""Configuration management for PDF Page Extractor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ExtractionConfig:
    """
    Configuration for page extraction.

    Attributes:
        strict: Treat page numbers outside the document as an error
            instead of ignoring them
        overwrite: Replace the output file if it already exists
        verbose: Print progress information to stdout
        garbage: PyMuPDF garbage collection level used when saving (0-4).
            Level 4 also drops objects only referenced by deleted pages
        deflate: Compress uncompressed streams when saving
    """

    strict: bool = False
    overwrite: bool = False
    verbose: bool = True
    garbage: int = 4
    deflate: bool = True

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not 0 <= self.garbage <= 4:
            raise ValueError(f"garbage must be between 0 and 4, got {self.garbage}")

    @property
    def save_options(self) -> dict[str, int | bool]:
        """Keyword arguments passed to the document save call."""
        return {"garbage": self.garbage, "deflate": self.deflate}

    @classmethod
    def quiet(cls) -> ExtractionConfig:
        """Config that prints nothing, for library use."""
        return cls(verbose=False)

    @classmethod
    def strict_mode(cls) -> ExtractionConfig:
        """Config that rejects pages the document does not have."""
        return cls(strict=True)
