"""Tests for layout composition and the render entry points."""

import io
from contextlib import contextmanager

import pytest
from rich.align import Align
from rich.console import Console
from rich.layout import Layout
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from termix.core.config import UIConfig
from termix.ui import renderer as renderer_module
from termix.ui.components.layout import FOOTER_SIZE, HEADER_SIZE, build_body, compose
from termix.ui.helpers.terminal import FALLBACK_HEIGHT, get_terminal_height
from termix.ui.renderer import FileManagerRenderer, render
from termix.ui.state import FileEntry


class FakeTerminal:
    """Stand-in for blessed.Terminal."""

    def __init__(self, height=40, key="x"):
        self.height = height
        self.key = key
        self.cbreak_entered = False

    @contextmanager
    def cbreak(self):
        self.cbreak_entered = True
        yield

    def inkey(self):
        return self.key


class BrokenTerminal:
    @property
    def height(self):
        raise OSError("not a tty")


def make_items(count: int) -> list[FileEntry]:
    return [FileEntry(f"file{i:02d}.txt", False, "1 KB", "2024-01-01") for i in range(count)]


def file_table(layout: Layout) -> Table:
    table = layout["body"]["file_list"].renderable
    assert isinstance(table, Table)
    return table


@pytest.fixture
def renderer():
    return FileManagerRenderer(
        config=UIConfig(use_icons=False),
        console=Console(file=io.StringIO(), width=100, record=True),
        term=FakeTerminal(height=40),
    )


class TestCompose:
    """Test the three-region layout."""

    def test_regions_and_sizes(self):
        root = compose(Text("h"), build_body(Text("t"), Text("p")), Text("f"))

        assert root.name == "root"
        assert [child.name for child in root.children] == ["header", "body", "footer"]
        assert root["header"].size == HEADER_SIZE == 3
        assert root["footer"].size == FOOTER_SIZE == 4
        assert root["body"].size is None

    def test_body_splits_evenly(self):
        body = build_body(Text("table"), Text("preview"))

        assert [child.name for child in body.children] == ["file_list", "preview"]
        assert body["file_list"].ratio == body["preview"].ratio

    def test_plain_body_is_wrapped(self):
        root = compose(Text("h"), Text("body"), Text("f"))
        assert root["body"].renderable.plain == "body"

    def test_missing_preview_still_has_region(self):
        body = build_body(Text("table"), None)
        preview = body["preview"].renderable
        assert isinstance(preview, Text)
        assert preview.plain == ""

    def test_empty_preview_is_kept_as_given(self):
        preview = Text("")
        body = build_body(Text("table"), preview)
        assert body["preview"].renderable is preview

    def test_empty_regions_do_not_show_layout_placeholder(self):
        root = compose(Text(""), build_body(Text(""), Text("")), Text(""))
        console = Console(file=io.StringIO(), width=80, height=20, record=True)
        console.print(root)
        output = console.export_text()
        assert "Layout(name=" not in output
        assert "'preview'" not in output


class TestRender:
    """Test the full render entry point."""

    def test_page_size_from_terminal_height(self, renderer):
        layout = renderer.render("/tmp", make_items(40), 0, Text("preview"), 0)
        # 40 rows - 12 chrome rows
        assert file_table(layout).row_count == 28

    def test_explicit_terminal_height(self, renderer):
        layout = renderer.render("/tmp", make_items(40), 0, Text(""), 0, terminal_height=20)
        assert file_table(layout).row_count == 8

    def test_tiny_terminal_shows_minimum_rows(self, renderer):
        layout = renderer.render("/tmp", make_items(40), 0, Text(""), 0, terminal_height=3)
        assert file_table(layout).row_count == 5

    def test_empty_directory_keeps_structure(self, renderer):
        layout = renderer.render("/tmp/empty", [], 0, Text("nothing"), 0)

        table = file_table(layout)
        assert table.row_count == 0
        assert len(table.columns) == 4
        assert isinstance(layout["header"].renderable, Panel)

        renderer.console.print(layout)
        output = renderer.console.export_text()
        assert "Name" in output
        assert "/tmp/empty" in output

    def test_preview_is_passed_through(self, renderer):
        preview = Panel(Text("file contents"))
        layout = renderer.render("/tmp", make_items(3), 0, preview, 0)
        assert layout["body"]["preview"].renderable is preview

    def test_empty_preview_is_passed_through(self, renderer):
        preview = Text("")
        layout = renderer.render("/tmp", [FileEntry("a.txt", False)], 0, preview, 0, terminal_height=30)
        assert layout["body"]["preview"].renderable is preview

        renderer.console.print(layout)
        assert "Layout(name='preview')" not in renderer.console.export_text()

    def test_footer_message_is_framed(self, renderer):
        layout = renderer.render("/tmp", make_items(3), 0, Text(""), 0, footer_message="Copied")
        footer = layout["footer"].renderable
        assert isinstance(footer, Align)
        assert isinstance(footer.renderable, Panel)

    def test_footer_defaults_to_legend(self, renderer):
        layout = renderer.render("/tmp", make_items(3), 0, Text(""), 0)
        footer = layout["footer"].renderable
        assert isinstance(footer.renderable, Text)
        assert "Quit" in footer.renderable.plain

    def test_invalid_indices_do_not_raise(self, renderer):
        for selected, offset in [(99, 500), (-1, -5), (2, 3), (0, 12)]:
            layout = renderer.render("/tmp", make_items(12), selected, Text(""), offset)
            assert file_table(layout).row_count <= 28

    def test_negative_offset_starts_at_top(self, renderer):
        layout = renderer.render("/tmp", make_items(12), 0, Text(""), -5, terminal_height=17)
        table = file_table(layout)
        assert table.row_count == 5
        assert table.rows[0].style is not None

    def test_scrolled_window_renders(self, renderer):
        layout = renderer.render("/tmp", make_items(12), 7, Text(""), 5, terminal_height=17)
        renderer.console.print(layout)
        output = renderer.console.export_text()
        assert "file05.txt" in output
        assert "file09.txt" in output
        assert "file04.txt" not in output
        assert "file10.txt" not in output

    def test_ascii_icons_from_config(self, renderer):
        layout = renderer.render("/tmp", [FileEntry("docs", True)], 0, Text(""), 0)
        renderer.console.print(layout)
        assert "/  docs" in renderer.console.export_text()

    def test_module_level_render(self, monkeypatch):
        monkeypatch.setattr(renderer_module, "_default_renderer", None)
        layout = render("/srv", make_items(2), 1, Text(""), 0, terminal_height=30)
        assert file_table(layout).row_count == 2


class TestTerminalHeight:
    """Test terminal height reads."""

    def test_reads_height(self):
        assert get_terminal_height(FakeTerminal(height=55)) == 55

    def test_broken_terminal_falls_back(self):
        assert get_terminal_height(BrokenTerminal()) == FALLBACK_HEIGHT

    def test_zero_height_falls_back(self):
        assert get_terminal_height(FakeTerminal(height=0)) == FALLBACK_HEIGHT

    def test_render_with_broken_terminal(self):
        renderer = FileManagerRenderer(term=BrokenTerminal())
        layout = renderer.render("/tmp", make_items(40), 0, Text(""), 0)
        # 24 fallback rows - 12 chrome rows
        assert file_table(layout).row_count == 12


class TestShowError:
    """Test the blocking error notice."""

    def test_prints_message_and_waits_for_key(self):
        term = FakeTerminal(key="q")
        console = Console(file=io.StringIO(), width=100, record=True)
        renderer = FileManagerRenderer(console=console, term=term)

        key = renderer.show_error("Permission denied: /root")

        output = console.export_text()
        assert "Error: Permission denied: /root" in output
        assert "Press any key to continue..." in output
        assert term.cbreak_entered
        assert key == "q"

    def test_message_markup_is_escaped(self):
        console = Console(file=io.StringIO(), width=100, record=True)
        renderer = FileManagerRenderer(console=console, term=FakeTerminal())

        renderer.show_error("cannot open [bold]x[/bold]")

        assert "cannot open [bold]x[/bold]" in console.export_text()

    def test_message_is_not_auto_highlighted(self):
        console = Console(file=io.StringIO(), width=100, record=True, force_terminal=True)
        renderer = FileManagerRenderer(console=console, term=FakeTerminal())

        renderer.show_error("disk 42 full at /var/log")

        # A single red span covers the whole message, numbers and paths included
        segments = [
            segment
            for segment in console._record_buffer
            if "42" in segment.text or "/var/log" in segment.text
        ]
        assert segments
        assert all(segment.style.color.name == "red" for segment in segments)
        assert not any(segment.style.bold for segment in segments)
        assert "disk 42 full at /var/log" in console.export_text()
