"""File browser screen: data model, render entry points and components."""

from .renderer import FileManagerRenderer, get_renderer, render, show_error
from .state import (
    DefaultLegend,
    FileEntry,
    FooterContent,
    Marker,
    Page,
    Status,
    StyledRow,
    StyledText,
    ViewportState,
    footer_content,
)

__all__ = [
    "FileManagerRenderer",
    "get_renderer",
    "render",
    "show_error",
    "DefaultLegend",
    "FileEntry",
    "FooterContent",
    "Marker",
    "Page",
    "Status",
    "StyledRow",
    "StyledText",
    "ViewportState",
    "footer_content",
]
