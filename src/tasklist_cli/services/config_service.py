"""Configuration service for managing Tasklist CLI configuration.

This module provides the ConfigService class, the single source of truth
for configuration. It handles:

- Loading and saving config.json
- Config file initialization with sensible defaults
- Reading and updating single keys
- A per-run override of the tasks file (``--file``)
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import ValidationError

from tasklist_cli.exceptions import ConfigError
from tasklist_cli.models.config_models import AppConfig

_APP_NAME = "tasklist_cli"


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir(_APP_NAME))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir(_APP_NAME))

        self._config: AppConfig | None = None
        self._tasks_file_override: str | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    @property
    def tasks_file(self) -> str:
        """Tasks file for this run: the override if set, else the configured one."""
        return self._tasks_file_override or self.config.tasks_file

    def override_tasks_file(self, path: str | None) -> None:
        """Use ``path`` as tasks file for this run without persisting it."""
        self._tasks_file_override = path

    def load_config(self) -> AppConfig:
        """Load configuration from storage, creating defaults on first run."""
        if self._config is not None:
            return self._config  # Return cached config if already loaded

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # Config file doesn't exist yet - expected on first run
            self._config = self.create_default_config()
        except (OSError, ValidationError) as e:
            raise ConfigError(f"Failed to load config {self.config_path}: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
        except OSError as e:
            raise ConfigError(f"Failed to save config: {e}") from e

    def create_default_config(self) -> AppConfig:
        """Create and save the default configuration."""
        self._config = AppConfig(tasks_file=str(self.data_dir / "tasks.json"))
        self.save_config()
        return self._config

    def reset_config(self) -> AppConfig:
        """Reset configuration to defaults."""
        self._config = None
        if self.config_path.exists():
            self.config_path.unlink()
        return self.create_default_config()

    def get(self, key: str) -> Any:
        """Get a configuration value.

        Raises:
            ConfigError: If the key does not exist
        """
        if key not in AppConfig.model_fields:
            raise ConfigError(
                f"Unknown configuration key '{key}'."
                f" Available: {', '.join(AppConfig.model_fields)}"
            )
        return getattr(self.config, key)

    def set(self, key: str, value: Any) -> Any:
        """Set a configuration value, validated through the model, and save.

        Returns:
            The stored (coerced) value

        Raises:
            ConfigError: If the key does not exist or the value is invalid
        """
        self.get(key)
        data = self.config.model_dump()
        data[key] = value
        try:
            self._config = AppConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid value for '{key}': {e.errors()[0]['msg']}") from e
        self.save_config()
        return getattr(self._config, key)


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
