"""Hydra-composed configuration for pattern generation.

``conf/config.yaml`` holds the ``numgen`` search flags and the ``logging``
level. Loading it validates both sections, makes it the global config read
by ``generate_number_pattern`` and applies the configured log level to the
``hexnumgen`` logger.
"""

import logging
from typing import Any, Dict, List, Optional, Union
from pathlib import Path
from omegaconf import DictConfig, OmegaConf, open_dict
from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra

from hexnumgen.utils import apply_logging_config
from .validators import validate_config

logger = logging.getLogger(__name__)

# conf/ at the project root
DEFAULT_CONFIG_DIR = Path(__file__).parent.parent.parent.parent / "conf"

_global_config: Optional[DictConfig] = None


class ConfigManager:
    """Composes and validates the generator configuration with Hydra."""

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        self.config_dir = Path(config_dir or DEFAULT_CONFIG_DIR).resolve()
        self.config: Optional[DictConfig] = None

        if not self.config_dir.exists():
            raise FileNotFoundError(f"Configuration directory not found: {self.config_dir}")

    def load_config(self,
                    config_name: str = "config",
                    overrides: Optional[List[str]] = None,
                    validate: bool = True) -> DictConfig:
        """Compose ``config_name`` and make it the global configuration.

        Args:
            config_name: Config file name without ``.yaml``
            overrides: Hydra overrides, e.g. ``["numgen.trim_larger=false"]``
            validate: Check the ``numgen`` and ``logging`` sections

        Returns:
            The composed configuration

        Raises:
            ConfigValidationError: if a flag is not a boolean or the log
                level is unknown
        """
        global _global_config

        GlobalHydra.instance().clear()
        with initialize_config_dir(config_dir=str(self.config_dir), version_base=None):
            cfg = compose(config_name=config_name, overrides=overrides or [])

        if validate:
            validate_config(cfg)

        self.config = cfg
        _global_config = cfg
        level = apply_logging_config(cfg)

        logger.info(f"Loaded {config_name} from {self.config_dir} "
                    f"(log level {logging.getLevelName(level)}, overrides {overrides or []})")
        return cfg

    def get_config(self) -> Optional[DictConfig]:
        return self.config

    def get_parameter(self, key: str, default: Any = None) -> Any:
        """Dot-notation lookup, e.g. ``numgen.trim_larger``."""
        if self.config is None:
            raise RuntimeError("No configuration loaded. Call load_config() first.")
        return OmegaConf.select(self.config, key, default=default)


def load_config(config_name: str = "config",
                overrides: Optional[List[str]] = None,
                config_dir: Optional[Union[str, Path]] = None,
                validate: bool = True) -> DictConfig:
    """Load the global configuration through a fresh ``ConfigManager``."""
    return ConfigManager(config_dir).load_config(config_name, overrides, validate)


def get_config() -> Optional[DictConfig]:
    """The global configuration, or None if nothing is loaded."""
    return _global_config


def get_parameter(key: str, default: Any = None) -> Any:
    """Dot-notation lookup in the global configuration.

    Returns ``default`` when the key is absent or nothing is loaded.
    """
    if _global_config is None:
        return default
    return OmegaConf.select(_global_config, key, default=default)


def reset_config() -> None:
    """Forget the global configuration."""
    global _global_config
    _global_config = None


class ConfigContext:
    """Temporarily change global settings, e.g. the search flags.

        with ConfigContext(**{"numgen.allow_fractions": True}):
            generate_number_pattern("1/2", trim_larger=False)

    Keys that did not exist before are removed again on exit.
    """

    _MISSING = object()

    def __init__(self, **changes: Any):
        self.changes: Dict[str, Any] = changes
        self.saved: Dict[str, Any] = {}
        self.added: List[str] = []
        self.config = get_config()

    def __enter__(self) -> DictConfig:
        if self.config is None:
            raise RuntimeError("No global configuration loaded")

        for key in self.changes:
            missing = self._first_missing(key)
            if missing is None:
                self.saved[key] = OmegaConf.select(self.config, key)
            elif missing not in self.added:
                self.added.append(missing)

        with open_dict(self.config):
            for key, value in self.changes.items():
                OmegaConf.update(self.config, key, value)
        return self.config

    def __exit__(self, exc_type, exc_val, exc_tb):
        with open_dict(self.config):
            for key, value in self.saved.items():
                OmegaConf.update(self.config, key, value)
            for key in self.added:
                parent_key, _, leaf = key.rpartition('.')
                parent = OmegaConf.select(self.config, parent_key) if parent_key else self.config
                del parent[leaf]

    def _first_missing(self, key: str) -> Optional[str]:
        """Shortest dotted prefix of ``key`` absent from the config."""
        parts = key.split('.')
        for end in range(1, len(parts) + 1):
            prefix = '.'.join(parts[:end])
            if OmegaConf.select(self.config, prefix, default=self._MISSING) is self._MISSING:
                return prefix
        return None
