"""Allow running as ``python -m pdf_page_extractor``."""

import sys

from pdf_page_extractor.cli import main

sys.exit(main())
