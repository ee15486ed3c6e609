"""Logging helpers for applications embedding hexnumgen."""

import logging
from typing import Optional

from omegaconf import DictConfig


def setup_logging(level: int = logging.INFO,
                  format_string: Optional[str] = None) -> None:
    """Setup logging configuration.

    Args:
        level: Logging level
        format_string: Custom format string
    """
    if format_string is None:
        if level <= logging.DEBUG:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_string = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt="%Y-%m-%d %H:%M:%S"
    )


def apply_logging_config(config: DictConfig) -> int:
    """Set the ``hexnumgen`` logger level from ``logging.level``.

    Returns:
        The level that was applied
    """
    level_name = str(config.get('logging', {}).get('level', 'INFO')).upper()
    level = logging.getLevelName(level_name)
    logging.getLogger('hexnumgen').setLevel(level)
    return level
