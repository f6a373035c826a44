"""Render state for the file browser screen - immutable snapshots.

Everything here is rebuilt on every frame. The caller owns the authoritative
item list, cursor and offset between frames.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePath
from typing import NamedTuple, Optional, Union


@dataclass(frozen=True)
class FileEntry:
    """One directory listing entry, already formatted for display."""

    name: str
    is_dir: bool
    formatted_size: str = ""
    formatted_date: str = ""

    @property
    def extension(self) -> str:
        """Lower-cased suffix without the dot ("" for directories)."""
        if self.is_dir:
            return ""
        return PurePath(self.name).suffix.lower().lstrip(".")


@dataclass(frozen=True)
class ViewportState:
    """Items plus cursor and window position for a single frame."""

    items: tuple[FileEntry, ...] = ()
    selected_index: int = 0
    view_offset: int = 0
    page_size: int = 5


class Marker(Enum):
    """Scrollbar cell shown at the right edge of each visible row."""

    SCROLL_UP = "⬆"
    SCROLL_DOWN = "⬇"
    THUMB = "█"
    TRACK = "║"
    NONE = " "

    @property
    def glyph(self) -> str:
        return self.value


class Page(NamedTuple):
    """Visible slice of the item list."""

    items: list[FileEntry]
    start: int  # Absolute index of items[0]

    @property
    def absolute_indices(self) -> range:
        return range(self.start, self.start + len(self.items))


@dataclass(frozen=True)
class StyledText:
    """Plain text plus a set of semantic style names.

    Style names are resolved to terminal styles by the adapter in
    termix.ui.styles.formatting; text is never interpreted as markup.
    """

    text: str
    styles: frozenset[str] = field(default_factory=frozenset)

    def has_style(self, name: str) -> bool:
        return name in self.styles


@dataclass(frozen=True)
class StyledRow:
    """The four cells of one file table row."""

    name: StyledText
    size: StyledText
    modified: StyledText
    marker: StyledText
    absolute_index: int

    @property
    def cells(self) -> tuple[StyledText, StyledText, StyledText, StyledText]:
        return (self.name, self.size, self.modified, self.marker)

    @property
    def highlighted(self) -> bool:
        return all(cell.has_style("highlight") for cell in self.cells)


@dataclass(frozen=True)
class Status:
    """Transient status or error notice shown in the footer."""

    text: str


@dataclass(frozen=True)
class DefaultLegend:
    """Static key-binding legend shown when there is no status."""


FooterContent = Union[Status, DefaultLegend]


def footer_content(message: Optional[str]) -> FooterContent:
    """Map an optional footer message to footer content.

    Args:
        message: Status text, or None/"" for the default legend

    Returns:
        Status when message is non-empty, DefaultLegend otherwise
    """
    if message:
        return Status(message)
    return DefaultLegend()
