"""Configuration management for the application."""
from __future__ import annotations

import copy
import json
import logging
import os
import threading
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from pattern_showcase.config.defaults import DEFAULT_CONFIG
from pattern_showcase.config.schemas.app_schema import AppConfig, LoggingConfig
from pattern_showcase.config.utils.env_expansion import expand_env_vars
from pattern_showcase.domain.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is assembled from the built-in defaults, an optional JSON or
    YAML file merged on top, and environment placeholders expanded last. The
    result is validated through the pydantic schema and loaded lazily on first
    access.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        return self.app_config.logging

    def reload(self) -> None:
        """Reload configuration from sources on next access."""
        with self._lock:
            self._app_config = None

    def _load_app_config(self) -> AppConfig:
        config_data = copy.deepcopy(DEFAULT_CONFIG)

        if self._config_file:
            file_data = self._load_file(self._config_file)
            config_data = _deep_merge(config_data, file_data)

        config_data = expand_env_vars(config_data)

        try:
            app_config = AppConfig.model_validate(config_data)
        except PydanticValidationError as e:
            missing = [
                ".".join(str(part) for part in error["loc"])
                for error in e.errors()
                if error["type"] == "missing"
            ]
            raise ConfigurationError(f"Invalid configuration: {e}", missing) from e

        logger.debug("Configuration loaded from %s", self._config_file or "defaults")
        return app_config

    @staticmethod
    def _load_file(path: str) -> Dict[str, Any]:
        if not os.path.exists(path):
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                if path.endswith((".yml", ".yaml")):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Failed to read configuration file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")
        return data


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge ``override`` into ``base``, recursing into nested mappings."""
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result
