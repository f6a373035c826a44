"""Style names, icons and the key-binding legend for the file browser."""

from termix.ui.state import FileEntry

# Semantic style name -> Rich style string
STYLES: dict[str, str] = {
    "directory": "bold",
    "highlight": "on dodger_blue1",
    "header": "bold cyan3",
    "header_border": "cyan1",
    "status": "",
    "status_border": "yellow",
    "legend_key": "cyan",
    "legend_text": "grey50",
    "separator": "",
    "error_label": "bold red",
    "error": "red",
    "hint": "grey50",
}

# Nerd Font glyphs (private use area)
PATH_ICON = "\ue5ff"
DIRECTORY_ICON = "\uf07b"
FILE_ICON = "\uf15b"

EXTENSION_ICONS: dict[str, str] = {
    "py": "\ue73c",
    "js": "\ue74e",
    "ts": "\ue628",
    "json": "\ue60b",
    "md": "\uf48a",
    "txt": "\uf15c",
    "cs": "\uf81a",
    "sh": "\uf489",
    "toml": "\ue615",
    "yml": "\ue615",
    "yaml": "\ue615",
    "png": "\uf1c5",
    "jpg": "\uf1c5",
    "jpeg": "\uf1c5",
    "gif": "\uf1c5",
    "zip": "\uf1c6",
    "gz": "\uf1c6",
    "tar": "\uf1c6",
}

# ASCII fallbacks when icons are disabled
ASCII_DIRECTORY_ICON = "/"
ASCII_FILE_ICON = "-"
ASCII_PATH_ICON = ">"

# Key binding definitions: (keys, description)
KEY_BINDINGS: list[tuple[str, str]] = [
    ("↑↓/JK", "Move"),
    ("H/L", "Up/Open"),
    ("Enter/O", "Open"),
    ("S", "Search"),
    ("A", "Add"),
    ("R", "Rename"),
    ("D", "Delete"),
    ("Q", "Quit"),
]


def icon_for(entry: FileEntry, use_icons: bool = True) -> str:
    """
    Pick the glyph shown before an entry's name.

    Args:
        entry: Entry being rendered
        use_icons: Nerd Font glyphs when True, ASCII markers otherwise

    Returns:
        Single glyph string
    """
    if not use_icons:
        return ASCII_DIRECTORY_ICON if entry.is_dir else ASCII_FILE_ICON
    if entry.is_dir:
        return DIRECTORY_ICON
    return EXTENSION_ICONS.get(entry.extension, FILE_ICON)


def path_icon(use_icons: bool = True) -> str:
    """Glyph shown before the current path in the header."""
    return PATH_ICON if use_icons else ASCII_PATH_ICON
