"""Render entry points for the file browser screen.

render() turns the caller's state into one Rich Layout per frame; it never
raises for out-of-range indices or tiny terminals. show_error() is the
out-of-band full-screen error notice that waits for a key.
"""

from typing import Optional, Sequence

from blessed import Terminal
from loguru import logger
from rich.console import Console, RenderableType
from rich.layout import Layout

from termix.core.config import UIConfig
from termix.core.console import get_console
from termix.ui.components.file_table import build_rows, render_file_table
from termix.ui.components.footer import render_footer
from termix.ui.components.header import format_header, render_header
from termix.ui.components.layout import build_body, compose
from termix.ui.helpers.scrolling import page_size_for_height
from termix.ui.helpers.terminal import get_terminal_height, wait_for_key
from termix.ui.state import FileEntry, ViewportState, footer_content
from termix.ui.styles.formatting import escape_markup
from termix.ui.styles.palette import STYLES


class FileManagerRenderer:
    """Builds the header/body/footer render tree from the caller's state."""

    def __init__(
        self,
        config: Optional[UIConfig] = None,
        console: Optional[Console] = None,
        term: Optional[Terminal] = None,
    ) -> None:
        self.config = config or UIConfig()
        self._console = console
        self._term = term

    @property
    def console(self) -> Console:
        return self._console or get_console()

    def viewport(
        self,
        items: Sequence[FileEntry],
        selected_index: int,
        view_offset: int,
        terminal_height: Optional[int] = None,
    ) -> ViewportState:
        """
        Snapshot the frame's items, cursor and window.

        Args:
            items: Full ordered item list
            selected_index: Cursor position (absolute index)
            view_offset: Absolute index of the first visible item
            terminal_height: Terminal rows; read from the terminal if omitted

        Returns:
            ViewportState with page size derived from the terminal height
        """
        if terminal_height is None:
            terminal_height = get_terminal_height(self._term)
        page_size = page_size_for_height(terminal_height, self.config.chrome_rows)
        return ViewportState(
            items=tuple(items),
            selected_index=selected_index,
            view_offset=view_offset,
            page_size=page_size,
        )

    def render(
        self,
        current_path: str,
        items: Sequence[FileEntry],
        selected_index: int,
        preview: Optional[RenderableType],
        view_offset: int,
        footer_message: Optional[str] = None,
        terminal_height: Optional[int] = None,
    ) -> Layout:
        """
        Build the full screen for one frame.

        Args:
            current_path: Directory being browsed
            items: Full ordered item list
            selected_index: Cursor position (absolute index)
            preview: Preview pane renderable, used as-is
            view_offset: Absolute index of the first visible item
            footer_message: Status text; the key legend is shown when empty
            terminal_height: Terminal rows; read from the terminal if omitted

        Returns:
            Root Layout with "header", "body" ("file_list", "preview") and "footer"
        """
        viewport = self.viewport(items, selected_index, view_offset, terminal_height)
        use_icons = self.config.use_icons

        header = render_header(format_header(current_path, use_icons))
        table = render_file_table(build_rows(viewport, use_icons))
        footer = render_footer(footer_content(footer_message))

        return compose(header, build_body(table, preview), footer)

    def show_error(self, message: str) -> str:
        """
        Clear the screen, show an error and block until a key is pressed.

        Args:
            message: Error text (shown literally)

        Returns:
            The key that dismissed the notice
        """
        logger.error(f"Showing error screen: {message}")
        console = self.console
        console.clear()
        console.print(
            f"[{STYLES['error_label']}]Error:[/] "
            f"[{STYLES['error']}]{escape_markup(message)}[/]",
            highlight=False,
        )
        console.print(
            f"[{STYLES['hint']}]Press any key to continue...[/]", highlight=False
        )
        return wait_for_key(self._term)


_default_renderer: Optional[FileManagerRenderer] = None


def get_renderer() -> FileManagerRenderer:
    """Get or create the renderer used by the module-level helpers."""
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = FileManagerRenderer()
    return _default_renderer


def render(
    current_path: str,
    items: Sequence[FileEntry],
    selected_index: int,
    preview: Optional[RenderableType],
    view_offset: int,
    footer_message: Optional[str] = None,
    terminal_height: Optional[int] = None,
) -> Layout:
    """Render one frame with the default renderer."""
    return get_renderer().render(
        current_path,
        items,
        selected_index,
        preview,
        view_offset,
        footer_message=footer_message,
        terminal_height=terminal_height,
    )


def show_error(message: str) -> str:
    """Show the full-screen error notice with the default renderer."""
    return get_renderer().show_error(message)
