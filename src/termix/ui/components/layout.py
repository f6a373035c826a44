"""Screen layout: header, body (file table | preview) and footer."""

from typing import Optional

from rich.console import RenderableType
from rich.layout import Layout
from rich.text import Text

# Header: one framed line. Footer: one framed line plus padding.
HEADER_SIZE = 3
FOOTER_SIZE = 4


def _region(
    renderable: RenderableType,
    name: str,
    size: Optional[int] = None,
    ratio: int = 1,
) -> Layout:
    # Layout(renderable) swaps falsy renderables such as Text("") for a
    # debug placeholder; update() stores them as given.
    region = Layout(name=name, size=size, ratio=ratio)
    region.update(renderable)
    return region


def build_body(file_table: RenderableType, preview: Optional[RenderableType]) -> Layout:
    """
    Split the body into file list (left) and preview (right) of equal weight.

    Args:
        file_table: Rendered file table
        preview: Preview renderable produced elsewhere (empty when None)

    Returns:
        Layout named "body" with "file_list" and "preview" children
    """
    body = Layout(name="body")
    body.split_row(
        _region(file_table, "file_list"),
        _region(preview if preview is not None else Text(""), "preview"),
    )
    return body


def compose(
    header: RenderableType, body: RenderableType, footer: RenderableType
) -> Layout:
    """
    Stack header, body and footer into the root layout.

    Args:
        header: Header renderable (fixed height)
        body: Body layout or renderable (fills remaining height)
        footer: Footer renderable (fixed height)

    Returns:
        Layout named "root" with "header", "body" and "footer" children
    """
    if not isinstance(body, Layout):
        body = _region(body, "body")

    root = Layout(name="root")
    root.split_column(
        _region(header, "header", size=HEADER_SIZE),
        body,
        _region(footer, "footer", size=FOOTER_SIZE),
    )
    return root
