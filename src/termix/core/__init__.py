"""Core infrastructure layer - no rendering logic.

This module provides foundation-level services:
- Configuration management (TOML)
- Console management (Rich)
- Logging (Loguru)
"""

# Configuration
from .config import (
    Config,
    LoggingConfig,
    UIConfig,
    load_config,
    get_config_dir,
    get_config_path,
    get_data_dir,
    create_default_config,
)

# Console
from .console import get_console

# Logging
from .output import get_log_file_path, setup_loguru, setup_logging_from_config

__all__ = [
    # Config
    "Config",
    "LoggingConfig",
    "UIConfig",
    "load_config",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "create_default_config",
    # Console
    "get_console",
    # Logging
    "get_log_file_path",
    "setup_loguru",
    "setup_logging_from_config",
]
