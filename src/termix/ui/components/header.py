"""Header: the current path in a rounded panel."""

from rich import box
from rich.panel import Panel

from termix.ui.state import StyledText
from termix.ui.styles.formatting import to_rich_text
from termix.ui.styles.palette import STYLES, path_icon

MAX_PATH_LENGTH = 80
ELLIPSIS = "..."


def truncate_path(path: str, max_length: int = MAX_PATH_LENGTH) -> str:
    """
    Shorten a long path, keeping its tail.

    Args:
        path: Path to display
        max_length: Longest displayed length

    Returns:
        path unchanged if it fits, otherwise "..." plus the last
        max_length - 3 characters (max_length characters in total)
    """
    if len(path) <= max_length:
        return path
    return ELLIPSIS + path[-(max_length - len(ELLIPSIS)) :]


def format_header(path: str, use_icons: bool = True) -> StyledText:
    """Styled header line for the current path."""
    return StyledText(
        f"{path_icon(use_icons)} {truncate_path(path)}", frozenset({"header"})
    )


def render_header(header: StyledText) -> Panel:
    return Panel(
        to_rich_text(header),
        box=box.ROUNDED,
        border_style=STYLES["header_border"],
    )
