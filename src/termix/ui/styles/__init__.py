"""Styles, icons and the Rich adapter."""

from .formatting import escape_markup, resolve_style, to_rich_text
from .palette import KEY_BINDINGS, STYLES, icon_for, path_icon

__all__ = [
    "escape_markup",
    "resolve_style",
    "to_rich_text",
    "KEY_BINDINGS",
    "STYLES",
    "icon_for",
    "path_icon",
]
