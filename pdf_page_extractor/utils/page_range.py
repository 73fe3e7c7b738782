"""Page range parsing utilities."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Literal

RangeKind = Literal["single", "bounded", "open_start", "open_end"]

# Optional start digits, optional dash, optional end digits.
# ASCII digits only: int() would otherwise accept other numeral systems.
_TOKEN_PATTERN = re.compile(r"(?P<start>[0-9]*)(?P<dash>-?)(?P<end>[0-9]*)")

SEPARATOR = ","


class PageRangeError(ValueError):
    """
    Raised when a page selector does not match the grammar.

    Attributes:
        fragment: The offending token as it appeared in the input
        position: 0-based character offset of the token in the input
        reason: Short description of what is wrong with the token
    """

    def __init__(self, fragment: str, position: int, reason: str):
        self.fragment = fragment
        self.position = position
        self.reason = reason
        super().__init__(
            f"Invalid page range '{fragment}' at position {position}: {reason}"
        )


@dataclass(frozen=True)
class PageRange:
    """
    An inclusive range of 1-based page numbers.

    ``None`` on either side means the range is open on that side:
    ``PageRange(5, None)`` is "page 5 to the end of the document" and
    ``PageRange(None, 3)`` is "from the first page up to page 3".
    """

    start: int | None
    end: int | None

    def __post_init__(self) -> None:
        if self.start is None and self.end is None:
            raise ValueError("A page range needs at least one bound")
        if self.start is not None and self.end is not None and self.start > self.end:
            raise ValueError(f"Range start {self.start} is after end {self.end}")

    @property
    def kind(self) -> RangeKind:
        """Which of the four selector shapes this range came from."""
        if self.start is None:
            return "open_start"
        if self.end is None:
            return "open_end"
        if self.start == self.end:
            return "single"
        return "bounded"

    def __contains__(self, page: object) -> bool:
        if not isinstance(page, int):
            return False
        if self.start is not None and page < self.start:
            return False
        if self.end is not None and page > self.end:
            return False
        return True

    def __str__(self) -> str:
        if self.kind == "single":
            return str(self.start)
        start = "" if self.start is None else str(self.start)
        end = "" if self.end is None else str(self.end)
        return f"{start}-{end}"

    def clamp(self, page_count: int) -> range:
        """Return the 1-based page numbers of this range that exist in a document."""
        first = 1 if self.start is None else max(1, self.start)
        last = page_count if self.end is None else min(page_count, self.end)
        return range(first, last + 1)


@dataclass(frozen=True)
class PageSelection:
    """
    The set of pages denoted by a selector string.

    Ranges are kept sorted and merged, so two selections compare equal
    exactly when they denote the same pages ("1-3,2-5" == "1-5").
    Open ends are never expanded; use ``bounded`` to get concrete pages
    for a document of known length.

    ``requested`` keeps the ranges as they were given, before merging,
    so bounds checks still see every explicit page number.
    """

    ranges: tuple[PageRange, ...] = field(default_factory=tuple)
    requested: tuple[PageRange, ...] = field(
        default_factory=tuple, compare=False, repr=False
    )

    def __post_init__(self) -> None:
        if not self.requested:
            object.__setattr__(self, "requested", tuple(self.ranges))
        object.__setattr__(self, "ranges", _merge_ranges(self.ranges))

    def __contains__(self, page: object) -> bool:
        return any(page in r for r in self.ranges)

    def __str__(self) -> str:
        return SEPARATOR.join(str(r) for r in self.ranges)

    @property
    def is_empty(self) -> bool:
        """True when the selector requested no pages at all."""
        return not self.ranges

    def union(self, other: PageSelection) -> PageSelection:
        """Combine two selections."""
        return PageSelection(self.requested + other.requested)

    def bounded(self, page_count: int) -> set[int]:
        """
        Materialize the requested 1-based page numbers for a document.

        Args:
            page_count: Total number of pages in the document

        Returns:
            Requested page numbers within 1..page_count
        """
        pages: set[int] = set()
        for page_range in self.ranges:
            pages.update(page_range.clamp(page_count))
        return pages


def _merge_ranges(ranges: tuple[PageRange, ...]) -> tuple[PageRange, ...]:
    """Sort ranges and collapse overlapping or adjacent ones."""

    def sort_key(r: PageRange) -> tuple[int, float]:
        start = -1 if r.start is None else r.start
        end = float("inf") if r.end is None else r.end
        return (start, end)

    merged: list[PageRange] = []
    for current in sorted(ranges, key=sort_key):
        if not merged:
            merged.append(current)
            continue

        previous = merged[-1]
        if previous.end is None:
            # Open end swallows everything after it
            continue
        if current.start is None or current.start <= previous.end + 1:
            if current.end is None or current.end > previous.end:
                merged[-1] = PageRange(previous.start, current.end)
        else:
            merged.append(current)

    return tuple(merged)


def parse_page_selection(text: str) -> PageSelection:
    """
    Parse a page selector string into a PageSelection.

    Pages are 1-based. Tokens are separated by commas and each one is a
    single page ("7"), a range ("2-5"), a range to the end of the
    document ("9-") or a range from the first page ("-3"). A trailing
    comma and an empty string are accepted.

    Args:
        text: Selector such as "1-3,5,9-"

    Returns:
        The selection covering every requested page

    Raises:
        PageRangeError: If any token is malformed. Nothing is returned
            for the tokens that did parse.

    Examples:
        >>> 4 in parse_page_selection("1-3,2-5")
        True
        >>> parse_page_selection("2,4-6,9-").bounded(10) == {2, 4, 5, 6, 9, 10}
        True
        >>> parse_page_selection("").is_empty
        True
    """
    stripped = text.strip()
    if not stripped:
        return PageSelection()

    position = len(text) - len(text.lstrip())
    parts = stripped.split(SEPARATOR)
    last = len(parts) - 1

    ranges: list[PageRange] = []
    for index, part in enumerate(parts):
        # Only a single trailing separator is allowed to produce an empty part
        if not part and index == last and index > 0:
            break
        ranges.append(parse_page_range(part, position))
        position += len(part) + len(SEPARATOR)

    return PageSelection(tuple(ranges))


def parse_page_range(part: str, position: int = 0) -> PageRange:
    """
    Parse a single selector token like '5', '2-7', '9-' or '-3'.

    Args:
        part: One comma-free token
        position: Offset of the token in the full selector, for errors

    Returns:
        The PageRange the token denotes
    """
    match = _TOKEN_PATTERN.fullmatch(part)
    if match is None:
        raise PageRangeError(part, position, "expected a page number or range")

    start_str, dash, end_str = match.group("start", "dash", "end")
    try:
        start = int(start_str) if start_str else None
        end = int(end_str) if end_str else None
    except ValueError:
        # Beyond the interpreter's integer string conversion limit
        raise PageRangeError(part, position, "page number too large") from None

    if start is not None and not dash:
        return PageRange(start, start)
    if start is not None and end is None:
        return PageRange(start, None)
    if start is None and end is not None:
        return PageRange(None, end)
    if start is not None and end is not None:
        if start > end:
            raise PageRangeError(
                part, position, f"range start {start} is after end {end}"
            )
        return PageRange(start, end)

    if dash:
        raise PageRangeError(part, position, "a range needs a start or an end page")
    raise PageRangeError(part, position, "empty page range")


def pages_to_keep(selection: PageSelection, page_count: int) -> list[int]:
    """
    Get the 0-based indices of requested pages, in document order.

    Args:
        selection: Parsed page selection (1-based)
        page_count: Total number of pages in the document
    """
    return [index for index in range(page_count) if index + 1 in selection]


def pages_to_remove(selection: PageSelection, page_count: int) -> list[int]:
    """
    Get the 0-based indices of pages that were not requested.

    Page numbers past the end of the document, including open ends,
    simply match nothing here.

    Examples:
        >>> pages_to_remove(parse_page_selection("2,4-6,9-"), 10)
        [0, 2, 6, 7]
        >>> pages_to_remove(parse_page_selection(""), 3)
        [0, 1, 2]
    """
    return [index for index in range(page_count) if index + 1 not in selection]


def out_of_range_pages(selection: PageSelection, page_count: int) -> list[PageRange]:
    """Get the requested ranges whose explicit bounds fall outside 1..page_count."""
    outside: list[PageRange] = []
    for page_range in selection.requested:
        bounds = [b for b in (page_range.start, page_range.end) if b is not None]
        if any(b < 1 or b > page_count for b in bounds):
            outside.append(page_range)
    return outside
