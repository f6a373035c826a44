"""Adapter from structured styled text to Rich renderables.

Styled text carries semantic style names; this module is the only place that
knows how those names look in the terminal. Text is appended to rich Text
objects verbatim, so bracketed strings in file names are never treated as
markup.
"""

from typing import Iterable, Union

from rich.markup import escape
from rich.style import Style
from rich.text import Text

from termix.ui.state import StyledText
from termix.ui.styles.palette import STYLES


def resolve_style(styles: Iterable[str]) -> Style:
    """
    Combine semantic style names into one Rich style.

    Unknown names are ignored. Names are combined in sorted order so the
    result does not depend on set iteration order.

    Args:
        styles: Semantic style names

    Returns:
        Combined Rich Style (Style.null() when nothing applies)
    """
    combined = Style.null()
    for name in sorted(styles):
        definition = STYLES.get(name)
        if definition:
            combined += Style.parse(definition)
    return combined


def to_rich_text(content: Union[StyledText, Iterable[StyledText]]) -> Text:
    """
    Build a Rich Text from one styled segment or a sequence of them.

    Args:
        content: Styled segment(s)

    Returns:
        Text with each segment's style applied to its span
    """
    segments = [content] if isinstance(content, StyledText) else list(content)
    text = Text()
    for segment in segments:
        text.append(segment.text, style=resolve_style(segment.styles))
    return text


def escape_markup(value: str) -> str:
    """Escape a value before it is embedded in a Rich markup string."""
    return escape(value)
