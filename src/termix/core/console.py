"""Centralized Rich Console management.

Components build renderables and hand them back; only the renderer and the
error screen print, and they share this console instance.
"""

from rich.console import Console

_console: Console | None = None


def get_console() -> Console:
    """Get or create the global Rich Console instance.

    Returns:
        Console: The global Rich Console instance
    """
    global _console
    if _console is None:
        _console = Console()
    return _console
