# Common utilities and shared modules
"""
Shared components used by the importer helpers:
- Configuration loading (dish.json)
- Logging configuration
"""

from .config import (
    CONFIG_FILENAME,
    ConfigNotFoundError,
    DhisSettings,
    DishConfig,
    get_config,
    load_config,
    reset_config,
    resolve_config_path,
)
from .logging import setup_logging

__all__ = [
    "CONFIG_FILENAME",
    "ConfigNotFoundError",
    "DhisSettings",
    "DishConfig",
    "get_config",
    "load_config",
    "reset_config",
    "resolve_config_path",
    "setup_logging",
]
