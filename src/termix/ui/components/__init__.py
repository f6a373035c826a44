"""Rendering components for the file browser screen."""

from .file_table import build_rows, format_row, render_file_table
from .footer import format_footer, render_footer
from .header import format_header, render_header, truncate_path
from .layout import FOOTER_SIZE, HEADER_SIZE, build_body, compose

__all__ = [
    "build_rows",
    "format_row",
    "render_file_table",
    "format_footer",
    "render_footer",
    "format_header",
    "render_header",
    "truncate_path",
    "FOOTER_SIZE",
    "HEADER_SIZE",
    "build_body",
    "compose",
]
