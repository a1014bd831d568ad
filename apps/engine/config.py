"""
Configuration loading for the GCD engine service.

Values from a YAML file are merged over the built-in defaults, so a config
file only needs to name the keys it changes.
"""
import copy
import logging
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from pkgs.observability import setup_logging

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / 'configs' / 'default.yaml'

DEFAULT_CONFIG: Dict[str, Any] = {
    'engine': {
        'default_algorithm': 'euclidean',
        'timed': False,
        'enable_metrics': True
    },
    'logging': {
        'level': 'INFO',
        'format': 'structured'
    },
    'benchmark': {
        'samples': 200,
        'operands_per_set': 3,
        'repeats': 5,
        'seed': 0,
        'max_magnitude': 2**31 - 1
    }
}


def get_default_config() -> Dict[str, Any]:
    """Get a fresh copy of the default configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from a YAML file, falling back to defaults."""
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    config = get_default_config()
    try:
        with open(config_path, 'r') as f:
            loaded = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}; using defaults")
        return config

    if loaded is None:
        return config
    if not isinstance(loaded, dict):
        logger.warning(f"Config in {config_path} is not a mapping; using defaults")
        return config

    logger.info(f"Loaded configuration from {config_path}")
    return _merge(config, loaded)


def setup_logging_from_config(cfg: Dict[str, Any]) -> logging.Logger:
    """Apply the ``logging`` section of a configuration."""
    log_cfg = cfg.get('logging', {})
    return setup_logging(log_cfg.get('level', 'INFO'), log_cfg.get('format', 'structured'))
