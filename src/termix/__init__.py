"""termix - presentation layer for a terminal file browser."""

from termix.ui import FileEntry, FileManagerRenderer, render, show_error

__version__ = "0.1.0"

__all__ = ["FileEntry", "FileManagerRenderer", "render", "show_error", "__version__"]
