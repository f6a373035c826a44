"""Footer: a status notice or the key-binding legend."""

from rich import box
from rich.align import Align
from rich.console import RenderableType
from rich.panel import Panel

from termix.ui.state import FooterContent, Status, StyledText
from termix.ui.styles.formatting import to_rich_text
from termix.ui.styles.palette import KEY_BINDINGS, STYLES


def legend_segments() -> list[StyledText]:
    """Static legend: "Use <keys> <effect> | <keys> <effect> | ..."."""
    segments = [StyledText("Use ", frozenset({"legend_text"}))]
    for i, (keys, description) in enumerate(KEY_BINDINGS):
        if i:
            segments.append(StyledText(" | ", frozenset({"separator"})))
        segments.append(StyledText(keys, frozenset({"legend_key"})))
        segments.append(StyledText(f" {description}", frozenset({"legend_text"})))
    return segments


def format_footer(content: FooterContent) -> list[StyledText]:
    """
    Pure function: styled segments for the footer.

    Args:
        content: Status notice or DefaultLegend

    Returns:
        A single status segment, or the legend segments
    """
    if isinstance(content, Status):
        return [StyledText(content.text, frozenset({"status"}))]
    return legend_segments()


def render_footer(content: FooterContent) -> RenderableType:
    """Status notices are boxed in yellow; the legend is plain. Both centered."""
    text = to_rich_text(format_footer(content))

    inner: RenderableType
    if isinstance(content, Status):
        inner = Panel(
            text,
            box=box.ROUNDED,
            border_style=STYLES["status_border"],
            padding=(0, 1),
            expand=False,
        )
    else:
        inner = text

    return Align.center(inner)
