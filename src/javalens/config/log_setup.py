"""
Logging setup for the javalens package.
"""

import logging

from javalens.config.models import LoggingConfig

PACKAGE_LOGGER = "javalens"


def configure_logging(config: LoggingConfig | None = None, verbose: bool = False) -> None:
    """Configure logging from a LoggingConfig.

    Args:
        config: Logging configuration (defaults to LoggingConfig())
        verbose: Raise the level to at least INFO
    """
    config = config or LoggingConfig()
    level = getattr(logging, config.level.value)
    if verbose:
        level = min(level, logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.file:
        handlers.append(logging.FileHandler(config.file))

    logging.basicConfig(
        level=level,
        format=config.format,
        handlers=handlers,
    )
    # Set javalens loggers to appropriate level
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)

