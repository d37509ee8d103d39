"""Configuration management utilities."""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from ..core.constants import CONFIG_DIR_ENV, CONFIG_FILE_NAME, DEFAULT_CONFIG_DIR
from ..models.config import PsDefaults

logger = logging.getLogger(__name__)


def default_config_dir() -> Path:
    """Config directory from the environment, falling back to the user default."""
    env_dir = os.environ.get(CONFIG_DIR_ENV)
    return Path(env_dir) if env_dir else DEFAULT_CONFIG_DIR


class ConfigManager:
    """Manages stored ps defaults."""

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize config manager."""
        self.config_dir = config_dir or default_config_dir()
        self.config_file = self.config_dir / CONFIG_FILE_NAME

    def load_defaults(self) -> PsDefaults:
        """Load stored defaults, or built-in ones if none are stored."""
        if not self.config_file.exists():
            return PsDefaults()
        try:
            data = json.loads(self.config_file.read_text())
            return PsDefaults(**data)
        except (OSError, ValueError, TypeError) as e:
            # pydantic's ValidationError is a ValueError
            logger.warning(f"Ignoring unreadable config {self.config_file}: {e}")
            return PsDefaults()

    def save_defaults(self, defaults: PsDefaults):
        """Save defaults to the config file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(defaults.model_dump_json(indent=2))

    def set_value(self, key: str, value: Any) -> PsDefaults:
        """Validate and store a single default.

        Raises:
            KeyError: If ``key`` is not a known default
            ValidationError: If ``value`` is not valid for ``key``
        """
        if key not in PsDefaults.model_fields:
            raise KeyError(key)
        data = self.load_defaults().model_dump()
        data[key] = value
        defaults = PsDefaults.model_validate(data)
        self.save_defaults(defaults)
        return defaults

    def reset(self) -> PsDefaults:
        """Restore built-in defaults."""
        defaults = PsDefaults()
        self.save_defaults(defaults)
        return defaults
