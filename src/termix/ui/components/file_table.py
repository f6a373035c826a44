"""File table: the paged, scroll-indicated list of directory entries."""

from typing import Optional

from loguru import logger
from rich.table import Table

from termix.ui.helpers.scrolling import page, scroll_markers
from termix.ui.state import FileEntry, Marker, StyledRow, StyledText, ViewportState
from termix.ui.styles.formatting import resolve_style, to_rich_text
from termix.ui.styles.palette import icon_for


def format_row(
    entry: FileEntry,
    is_selected: bool,
    marker: Marker,
    absolute_index: int,
    icon: Optional[str] = None,
) -> StyledRow:
    """
    Pure function: build the styled cells for one entry.

    Directories get emphasis on the name cell. A selected row gets the
    highlight style on every cell, on top of any emphasis.

    Args:
        entry: Entry to format
        is_selected: Whether the cursor is on this entry
        marker: Scrollbar marker for this row
        absolute_index: Index of the entry in the full item list
        icon: Glyph shown before the name (looked up from the entry if omitted)

    Returns:
        StyledRow with name, size, modified and marker cells
    """
    if icon is None:
        icon = icon_for(entry)

    name_styles = {"directory"} if entry.is_dir else set()
    row_styles = {"highlight"} if is_selected else set()

    return StyledRow(
        name=StyledText(f"{icon}  {entry.name}", frozenset(name_styles | row_styles)),
        size=StyledText(entry.formatted_size, frozenset(row_styles)),
        modified=StyledText(entry.formatted_date, frozenset(row_styles)),
        marker=StyledText(marker.glyph, frozenset(row_styles)),
        absolute_index=absolute_index,
    )


def build_rows(viewport: ViewportState, use_icons: bool = True) -> list[StyledRow]:
    """
    Pure function: page the item list and format every visible row.

    Args:
        viewport: Items, cursor, offset and page size for this frame

    Returns:
        One StyledRow per visible item, in display order
    """
    visible = page(viewport.items, viewport.page_size, viewport.view_offset)
    if visible.start != viewport.view_offset:
        logger.debug(
            f"View offset {viewport.view_offset} clamped to {visible.start} "
            f"({len(viewport.items)} items)"
        )

    if viewport.items and visible.items:
        if viewport.selected_index not in visible.absolute_indices:
            logger.debug(
                f"Selected index {viewport.selected_index} outside window "
                f"{visible.start}..{visible.start + len(visible.items) - 1}"
            )

    markers = scroll_markers(
        total_items=len(viewport.items),
        page_size=max(1, viewport.page_size),
        view_offset=visible.start,
        visible_count=len(visible.items),
    )

    return [
        format_row(
            entry,
            is_selected=index == viewport.selected_index,
            marker=marker,
            absolute_index=index,
            icon=icon_for(entry, use_icons),
        )
        for entry, index, marker in zip(
            visible.items, visible.absolute_indices, markers
        )
    ]


def render_file_table(rows: list[StyledRow]) -> Table:
    """Borderless, full-width table with Name, Size, Modified and marker columns."""
    table = Table(expand=True, box=None)
    table.add_column("Name", no_wrap=True, overflow="ellipsis")
    table.add_column("Size", justify="right", no_wrap=True)
    table.add_column("Modified", justify="right", no_wrap=True)
    table.add_column("", width=1, no_wrap=True)

    for row in rows:
        table.add_row(
            *(to_rich_text(cell) for cell in row.cells),
            style=resolve_style({"highlight"}) if row.highlighted else None,
        )

    return table
