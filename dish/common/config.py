"""Configuration loading for dish.

Loads connection settings from a ``dish.json`` file located via the
``DHIS2_HOME`` environment variable, the user's home directory, or the
current working directory, in that order.
"""

from __future__ import annotations

import json
import logging
import os
import sys
import threading
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "dish.json"
HOME_ENV_VAR = "DHIS2_HOME"

# Load .env from the working directory (may provide DHIS2_HOME)
load_dotenv(Path.cwd() / ".env")


class ConfigNotFoundError(RuntimeError):
    """Raised when dish.json is missing, unreadable, or invalid."""

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = path
        super().__init__(
            f'Configuration file "{CONFIG_FILENAME}" was not found or could not be parsed'
        )


class DhisSettings(BaseModel):
    """Connection settings for the DHIS2 instance."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    base_url: str = Field(default="", alias="baseUrl")
    username: str
    password: str


class DishConfig(BaseModel):
    """Top-level contents of dish.json."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    dhis: DhisSettings

    @property
    def auth(self) -> str:
        """Basic authentication string, ``username:password``."""
        return f"{self.dhis.username}:{self.dhis.password}"


def resolve_config_path() -> Path:
    """Locate dish.json: $DHIS2_HOME, then the OS home, then the working dir."""
    dhis_home = os.getenv(HOME_ENV_VAR)
    home_var = "USERPROFILE" if sys.platform == "win32" else "HOME"
    os_home = os.getenv(home_var)

    if dhis_home:
        path = Path(dhis_home) / CONFIG_FILENAME
        logger.info("Using %s environment variable pointing to: %s", HOME_ENV_VAR, path)
    elif os_home:
        path = Path(os_home) / CONFIG_FILENAME
        logger.info("Using your home directory which seems to be: %s", path)
    else:
        path = Path(CONFIG_FILENAME)
        logger.info("Falling back to default config location: %s", path)
    return path


def load_config(path: Path | str | None = None) -> DishConfig:
    """Read and validate dish.json.

    Args:
        path: Explicit config file path. Resolved with
              :func:`resolve_config_path` when omitted.

    Returns:
        Validated, immutable configuration.

    Raises:
        ConfigNotFoundError: If the file is missing, unreadable, not JSON,
            or lacks the required ``dhis`` settings.
    """
    config_path = Path(path) if path is not None else resolve_config_path()

    try:
        text = config_path.read_text(encoding="utf-8")
        return DishConfig.model_validate(json.loads(text))
    except (OSError, ValueError, ValidationError) as exc:
        logger.error("Could not load configuration from %s: %s", config_path, exc)
        raise ConfigNotFoundError(config_path) from exc


_config: DishConfig | None = None
_config_lock = threading.Lock()


def get_config() -> DishConfig:
    """Return the process-wide configuration, loading it on first use."""
    global _config
    if _config is not None:
        return _config
    with _config_lock:
        if _config is None:
            _config = load_config()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next access reloads it."""
    global _config
    with _config_lock:
        _config = None
