"""Configuration management for hexnumgen.

This module provides Hydra-based configuration management with runtime
override capabilities.
"""

from .config_manager import ConfigManager, ConfigContext, load_config, get_config, get_parameter, reset_config
from .validators import validate_config, ConfigValidationError

__all__ = [
    'ConfigManager',
    'ConfigContext',
    'load_config',
    'get_config',
    'get_parameter',
    'reset_config',
    'validate_config',
    'ConfigValidationError'
]
