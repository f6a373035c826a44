"""Helper functions for the file browser screen."""

from .scrolling import (
    MIN_PAGE_SIZE,
    page,
    page_size_for_height,
    scroll_marker,
    scroll_markers,
    thumb_band,
)
from .terminal import get_terminal, get_terminal_height, wait_for_key

__all__ = [
    "MIN_PAGE_SIZE",
    "page",
    "page_size_for_height",
    "scroll_marker",
    "scroll_markers",
    "thumb_band",
    "get_terminal",
    "get_terminal_height",
    "wait_for_key",
]
