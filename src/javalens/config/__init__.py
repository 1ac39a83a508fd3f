"""
javalens - Configuration Management

This module provides configuration management including:
- YAML configuration loading and validation
- Environment variable handling (.env files, JAVALENS_* overrides)
- Logging setup
"""

from javalens.config.environment import load_environment, reset_environment
from javalens.config.loader import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_PATHS,
    ENV_VAR_OVERRIDES,
    ConfigLoader,
    ConfigurationError,
    load_config,
)
from javalens.config.log_setup import PACKAGE_LOGGER, configure_logging
from javalens.config.models import (
    AnalysisConfig,
    JavalensConfig,
    LoggingConfig,
    LogLevel,
)

__all__ = [
    # Config models
    "AnalysisConfig",
    "LoggingConfig",
    "LogLevel",
    "JavalensConfig",
    # Loader
    "ConfigLoader",
    "ConfigurationError",
    "load_config",
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATHS",
    "ENV_VAR_OVERRIDES",
    # Environment
    "load_environment",
    "reset_environment",
    # Logging
    "configure_logging",
    "PACKAGE_LOGGER",
]
