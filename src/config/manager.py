"""Unified configuration management for the application."""
from __future__ import annotations
import json
import logging
import os
import threading
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import ValidationError

from src.domain.core.exceptions import ConfigurationError
from src.config.schemas import AppConfig, DemoConfig, LoggingConfig

T = TypeVar('T')
logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration comes from an optional JSON file; anything the file leaves
    out falls back to the schema defaults. Loading is lazy and happens once.
    """

    _type_mapping: Dict[Type, str] = {
        LoggingConfig: 'logging',
        DemoConfig: 'demo',
    }

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

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from its sources."""
        config_data: Dict[str, Any] = {}
        if self._config_file is not None:
            config_data = self._load_from_file(self._config_file)

        try:
            app_config = AppConfig.from_dict(config_data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e.error_count()} validation error(s)",
                details=e.errors()
            ) from e

        logger.debug("Configuration loaded from %s", self._config_file or "defaults")
        return app_config

    def _load_from_file(self, path: str) -> Dict[str, Any]:
        """Read a JSON configuration file."""
        if not os.path.exists(path):
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Configuration file {path} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")
        return data

    def get_typed(self, config_type: Type[T]) -> T:
        """Get a typed configuration section."""
        attr_name = self._type_mapping.get(config_type)
        if attr_name is None:
            raise ConfigurationError(f"Unknown configuration type: {config_type.__name__}")
        return getattr(self.app_config, attr_name)

    def reload(self) -> None:
        """Reload configuration from sources on next access."""
        with self._lock:
            self._app_config = None
