"""Terminal access through blessed: size reads and blocking key waits."""

from typing import Optional

from blessed import Terminal
from loguru import logger

# Assumed height when the terminal cannot report one (piped output, CI).
FALLBACK_HEIGHT = 24

_terminal: Optional[Terminal] = None


def get_terminal() -> Terminal:
    """Get or create the shared blessed Terminal instance."""
    global _terminal
    if _terminal is None:
        _terminal = Terminal()
    return _terminal


def get_terminal_height(term: Optional[Terminal] = None) -> int:
    """Read the terminal height once, falling back to FALLBACK_HEIGHT.

    Args:
        term: blessed Terminal (shared instance if omitted)

    Returns:
        Terminal height in rows
    """
    if term is None:
        term = get_terminal()
    try:
        height = term.height
    except Exception as e:
        logger.warning(f"Could not read terminal height: {e}")
        return FALLBACK_HEIGHT

    if not height or height <= 0:
        logger.warning(f"Terminal reported height {height!r}, using {FALLBACK_HEIGHT}")
        return FALLBACK_HEIGHT
    return height


def wait_for_key(term: Optional[Terminal] = None) -> str:
    """Block until a single key is pressed and return it (not echoed).

    Args:
        term: blessed Terminal (shared instance if omitted)

    Returns:
        The pressed key as blessed reports it
    """
    if term is None:
        term = get_terminal()
    with term.cbreak():
        key = term.inkey()
    return str(key)
