"""Pure helper functions for paging and scroll indicators in the file table."""

from typing import Sequence

from termix.ui.state import FileEntry, Marker, Page

# Smallest number of table rows ever rendered, however short the terminal.
MIN_PAGE_SIZE = 5

# Rows used by header, footer and table chrome in the default layout.
DEFAULT_CHROME_ROWS = 12


def page_size_for_height(
    terminal_height: int, chrome_rows: int = DEFAULT_CHROME_ROWS
) -> int:
    """Derive how many table rows fit in a terminal of the given height.

    Args:
        terminal_height: Terminal height in rows
        chrome_rows: Rows used by everything other than table rows

    Returns:
        terminal_height - chrome_rows, never less than MIN_PAGE_SIZE

    Examples:
        >>> page_size_for_height(40)
        28
        >>> page_size_for_height(10)
        5
    """
    return max(MIN_PAGE_SIZE, terminal_height - chrome_rows)


def page(items: Sequence[FileEntry], page_size: int, view_offset: int) -> Page:
    """Slice the visible window out of the full item list.

    Args:
        items: Full ordered item list
        page_size: Window capacity (values below 1 are treated as 1)
        view_offset: Absolute index of the first visible item

    Returns:
        Page with at most page_size items starting at the clamped offset.
        An offset past the end of the list yields an empty window.
    """
    page_size = max(1, page_size)

    if view_offset >= len(items):
        return Page(items=[], start=max(0, view_offset))

    start = max(0, view_offset)
    return Page(items=list(items[start : start + page_size]), start=start)


def thumb_band(
    total_items: int, page_size: int, view_offset: int, visible_count: int
) -> tuple[int, int]:
    """Compute the window rows covered by the scrollbar thumb (inclusive).

    The band is proportional to where the window sits in the full list:
    int() truncation of the float ratio, matching floor for non-negative values.
    """
    thumb_start = int(view_offset / total_items * visible_count)
    thumb_end = int((view_offset + page_size) / total_items * visible_count)
    return thumb_start, thumb_end


def scroll_marker(
    row: int,
    total_items: int,
    page_size: int,
    view_offset: int,
    visible_count: int,
) -> Marker:
    """Pick the scrollbar marker for one visible row.

    Rules are evaluated in order; the first match wins:
    1. Everything fits: no scrollbar.
    2. First row with items above the window: scroll-up arrow.
    3. Last row with items below the window: scroll-down arrow.
    4. Inside the proportional thumb band: thumb, otherwise track.

    Args:
        row: Row position within the visible window (0-based)
        total_items: Length of the full item list
        page_size: Window capacity
        view_offset: Absolute index of the first visible item
        visible_count: Number of rows actually shown

    Returns:
        Marker for this row
    """
    if total_items <= page_size:
        return Marker.NONE

    if row == 0 and view_offset > 0:
        return Marker.SCROLL_UP

    if row == visible_count - 1 and view_offset + page_size < total_items:
        return Marker.SCROLL_DOWN

    thumb_start, thumb_end = thumb_band(
        total_items, page_size, view_offset, visible_count
    )
    if thumb_start <= row <= thumb_end:
        return Marker.THUMB

    return Marker.TRACK


def scroll_markers(
    total_items: int, page_size: int, view_offset: int, visible_count: int
) -> list[Marker]:
    """Markers for every visible row (empty when nothing is visible)."""
    return [
        scroll_marker(row, total_items, page_size, view_offset, visible_count)
        for row in range(visible_count)
    ]

