"""
Configuration management for termix
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from loguru import logger


@dataclass
class UIConfig:
    """Configuration for the file browser screen."""

    use_icons: bool = True  # Nerd Font glyphs; ASCII markers when False
    chrome_rows: int = 12  # Rows used by header, footer and table borders

    def validate(self) -> None:
        """Validate UI configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if not isinstance(self.use_icons, bool):
            raise ValueError(f"use_icons must be true or false, got {self.use_icons!r}")
        if (
            isinstance(self.chrome_rows, bool)
            or not isinstance(self.chrome_rows, int)
            or self.chrome_rows < 0
        ):
            raise ValueError(
                f"chrome_rows must be zero or positive, got {self.chrome_rows}"
            )


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/termix/termix.log)
    )

    def validate(self) -> None:
        """Validate logging configuration values.

        Raises:
            ValueError: If the level is not a loguru level name
        """
        try:
            logger.level(self.level)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Unknown log level {self.level!r}") from e


@dataclass
class Config:
    """Main configuration object."""

    ui: UIConfig = field(default_factory=UIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "termix"
    return Path.home() / ".config" / "termix"


def _find_project_config() -> Optional[Path]:
    """Find config.toml in project root by looking for pyproject.toml.

    Returns:
        Path to config.toml in project root, or None if not found
    """
    current = Path(__file__).resolve().parent
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            config_path = parent / "config.toml"
            if config_path.exists():
                return config_path
            return None
    return None


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Project root (detected via pyproject.toml) - for development
    2. Current working directory
    3. XDG_CONFIG_HOME/termix (or ~/.config/termix)
    """
    project_config = _find_project_config()
    if project_config:
        return project_config

    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "termix"
    return Path.home() / ".local" / "share" / "termix"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# termix Configuration

[ui]
# Show Nerd Font icons next to file names (disable for ASCII markers)
use_icons = true

# Terminal rows reserved for header, footer and table chrome.
# The file table gets the remaining rows (never fewer than 5).
chrome_rows = 12

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/termix/termix.log)
# log_file = "/path/to/custom/termix.log"
""".strip()


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file or create default.

    Environment variables override TOML values:
    - TERMIX_LOG_LEVEL

    Args:
        config_path: Explicit config file; resolved with get_config_path() if omitted

    Returns:
        Parsed configuration, or defaults when the file is missing or invalid
    """
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    if config_path is None:
        config_path = get_config_path()

    config = Config()

    if not config_path.exists():
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w", encoding="utf-8") as f:
                f.write(create_default_config())
            print(f"Created default configuration at: {config_path}")
        except OSError as e:
            print(f"Could not write default configuration to {config_path}: {e}")
        return _apply_env_overrides(config)

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        print(f"Error loading configuration from {config_path}: {e}")
        print("Using default configuration.")
        return _apply_env_overrides(config)

    if "ui" in toml_data:
        ui_data = toml_data["ui"]
        config.ui = UIConfig(
            use_icons=ui_data.get("use_icons", config.ui.use_icons),
            chrome_rows=ui_data.get("chrome_rows", config.ui.chrome_rows),
        )
        try:
            config.ui.validate()
        except ValueError as e:
            print(f"Warning: Invalid ui configuration: {e}")
            print("Using default ui configuration.")
            config.ui = UIConfig()

    if "logging" in toml_data:
        logging_data = toml_data["logging"]
        log_file = logging_data.get("log_file")
        if log_file:
            log_file = str(Path(log_file).expanduser())
        config.logging = LoggingConfig(
            level=str(logging_data.get("level", config.logging.level)).upper(),
            log_file=log_file,
        )
        try:
            config.logging.validate()
        except ValueError as e:
            print(f"Warning: Invalid logging configuration: {e}")
            print(f"Using default log level {LoggingConfig.level}.")
            config.logging.level = LoggingConfig.level

    return _apply_env_overrides(config)


def _apply_env_overrides(config: Config) -> Config:
    level = os.environ.get("TERMIX_LOG_LEVEL")
    if level:
        override = LoggingConfig(level=level.upper(), log_file=config.logging.log_file)
        try:
            override.validate()
        except ValueError as e:
            print(f"Warning: Ignoring TERMIX_LOG_LEVEL: {e}")
        else:
            config.logging = override
    return config

