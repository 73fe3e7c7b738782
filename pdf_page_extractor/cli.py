"""Command-line interface for PDF Page Extractor."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path

from pdf_page_extractor import __version__
from pdf_page_extractor.core.config import ExtractionConfig
from pdf_page_extractor.core.extractor import PageExtractor

# Selectors that begin with an open-start range, e.g. "-3" or "-2,9-"
_DASH_SELECTOR = re.compile(r"-[0-9][0-9,\-]*")


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pdf-page-extractor",
        description=(
            "Extracts given pages from an input PDF file "
            "and stores them in a new output PDF file."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pdf-page-extractor book.pdf chapter.pdf 12-30
  pdf-page-extractor book.pdf picks.pdf "1,3,5-10"
  pdf-page-extractor book.pdf tail.pdf 200-
  pdf-page-extractor book.pdf out.pdf 1-5 --force --quiet

Page Formats (1-based):
  5         Just page 5
  1-10      Pages 1 through 10
  9-        Page 9 to the last page
  -3        First page through page 3
  1,5,9     Pages 1, 5, and 9
  1-3,7-    Pages 1-3 and 7 to the end
        """,
    )

    parser.add_argument(
        "input_file",
        type=str,
        help="Path to the PDF file to read",
    )

    parser.add_argument(
        "output_file",
        type=str,
        help="Path of the new PDF file (must not exist)",
    )

    parser.add_argument(
        "pages",
        type=str,
        help="Pages to keep, e.g. 1-3,5,9-",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail if a page number is outside the document",
    )

    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite the output file if it exists",
    )

    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only print errors",
    )

    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def _protect_selector(argv: list[str]) -> list[str]:
    """
    Move a selector that starts with a dash behind "--".

    argparse only accepts plain negative numbers like "-3" as positionals,
    so "-3,5" would otherwise be read as an unknown option.
    """
    if "--" in argv:
        return argv
    for index, arg in enumerate(argv):
        if _DASH_SELECTOR.fullmatch(arg):
            return argv[:index] + argv[index + 1 :] + ["--", arg]
    return argv


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    args = parser.parse_args(_protect_selector(list(argv)))

    input_path = Path(args.input_file).resolve()
    output_path = Path(args.output_file).resolve()

    if not input_path.exists():
        print(f"Error: PDF not found: {input_path}", file=sys.stderr)
        return 1

    if output_path.exists() and not args.force:
        print(
            f"Error: Output file already exists, please remove it first: {output_path}",
            file=sys.stderr,
        )
        return 1

    config = ExtractionConfig(
        strict=args.strict,
        overwrite=args.force,
        verbose=not args.quiet,
    )

    try:
        extractor = PageExtractor(config)
        result = extractor.extract(input_path, output_path, args.pages)
        if not args.quiet:
            print(f"\nExtracted PDF saved to: {result.output_path}")
        return 0

    except (FileNotFoundError, FileExistsError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
