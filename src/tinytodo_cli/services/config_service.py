"""Configuration service for TinyTodo CLI.

This module provides the ConfigService class, the single source of truth for
display preferences. It handles:

- Loading and saving config.json
- Creating the default configuration on first run
- Reading and writing dotted keys (e.g. "view.default_mode")
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import ValidationError

from tinytodo_cli.models.config_models import AppConfig


class ConfigService:
    """Service for managing application configuration.

    The configuration is loaded lazily on first access and cached on the
    instance. Every write validates the whole model before touching disk.
    """

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir("tinytodo_cli"))
        self.config_path = self.config_dir / "config.json"

        # Ensure directories exist
        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config  # Return cached config if already loaded

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # Expected on first run
            self._config = AppConfig()
            self.save_config()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        if self._config is None:
            raise RuntimeError("No configuration to save")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self._config.model_dump_json(indent=4))
        except Exception as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def reset_config(self) -> AppConfig:
        """Reset configuration to defaults."""
        self._config = AppConfig()
        self.save_config()
        return self._config

    def get(self, key: str) -> Any:
        """Get a value by dotted key.

        Returns:
            The value, or None if the key does not exist
        """
        node: Any = self.config.model_dump(mode="json")
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node

    def set(self, key: str, value: Any) -> Any:
        """Set a value by dotted key and persist it.

        Returns:
            The value as stored after validation

        Raises:
            KeyError: If the key does not exist
            ValueError: If the value does not validate
        """
        data = self.config.model_dump(mode="json")
        parts = key.split(".")
        node = data
        for part in parts[:-1]:
            if not isinstance(node.get(part), dict):
                raise KeyError(key)
            node = node[part]
        if parts[-1] not in node or isinstance(node[parts[-1]], dict):
            raise KeyError(key)
        node[parts[-1]] = value

        try:
            self._config = AppConfig.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid value for '{key}': {value!r}") from e
        self.save_config()
        return self.get(key)


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get the singleton ConfigService instance."""
    return ConfigService()
