"""Configuration validation for hexnumgen."""

import logging
from omegaconf import DictConfig

logger = logging.getLogger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


def validate_config(config: DictConfig) -> None:
    """Validate the complete configuration.

    Args:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        validate_numgen_config(config.get('numgen', {}))
        validate_logging_config(config.get('logging', {}))

        logger.info("Configuration validation passed")

    except Exception as e:
        raise ConfigValidationError(f"Configuration validation failed: {e}")


def validate_numgen_config(numgen_config: DictConfig) -> None:
    """Validate the pattern generator section.

    Args:
        numgen_config: Generator configuration section
    """
    if not numgen_config:
        return

    for key in ['trim_larger', 'allow_fractions']:
        flag = numgen_config.get(key, False)
        if not isinstance(flag, bool):
            raise ConfigValidationError(
                f"numgen.{key} must be a boolean, got {flag!r}"
            )


def validate_logging_config(logging_config: DictConfig) -> None:
    """Validate logging configuration section.

    Args:
        logging_config: Logging configuration section
    """
    if not logging_config:
        return

    level = logging_config.get('level', 'INFO')
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ConfigValidationError(
            f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
        )
