"""
Loguru setup for termix.

The full-screen UI owns the terminal, so log records only ever go to a file.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from .config import Config, get_data_dir


def get_log_file_path() -> Path:
    """Get the default path to the log file."""
    return get_data_dir() / "termix.log"


def setup_loguru(log_file: Path, level: str = "INFO") -> None:
    """
    Configure loguru for file-only logging.

    Args:
        log_file: Path to log file
        level: Minimum level for file logging (DEBUG, INFO, WARNING, ERROR)
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)

    # Remove default stderr handler
    logger.remove()

    logger.add(
        log_file,
        rotation="10 MB",
        retention=5,
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
        enqueue=False,
    )

    logger.info(f"Loguru initialized: {log_file} (level={level})")


def setup_logging_from_config(config: Config, log_file: Optional[Path] = None) -> Path:
    """Configure loguru from the [logging] section.

    Args:
        config: Loaded configuration
        log_file: Overrides both the configured and the default log file

    Returns:
        The log file in use
    """
    if log_file is None:
        if config.logging.log_file:
            log_file = Path(config.logging.log_file)
        else:
            log_file = get_log_file_path()
    setup_loguru(log_file, config.logging.level)
    return log_file
