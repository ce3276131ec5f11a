"""Logging utilities."""

import logging
import sys

from shenzhen_solitaire.config import LoggingConfig


def setup_logging(config: LoggingConfig | str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        config: LoggingConfig, or a level name (DEBUG, INFO, WARNING, ERROR)

    Raises:
        ValueError: If the level name is unknown
    """
    level_name = config.level if isinstance(config, LoggingConfig) else config
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {level_name}")

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )
