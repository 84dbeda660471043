"""Configuration management for the mobility import core."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config
from .models import ImportConfig, LogFormat, LoggingConfig, LogLevel

__all__ = [
    # Loader functions
    "load_config",
    "load_environment_config",
    # Configuration models
    "ImportConfig",
    "LoggingConfig",
    "EnvironmentConfig",
    # Enums
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
