"""Configuration package with clean public API."""

# Main configuration classes
from .schemas import (
    AppConfig, validate_config,
    DemoConfig,
    LoggingConfig, LogLevel, LogDestination,
)

# Configuration management
from .manager import ConfigurationManager

__all__ = [
    # Main configuration
    'AppConfig',
    'validate_config',

    # Specific configurations
    'DemoConfig',
    'LoggingConfig',
    'LogLevel',
    'LogDestination',

    # Management
    'ConfigurationManager',
]
