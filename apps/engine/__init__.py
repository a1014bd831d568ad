"""
Engine application package.

Contains the configuration loader and the high-level service wrapper for the
GCD engine.
"""

from .config import load_config, get_default_config, setup_logging_from_config
from .engine_service import GcdService, GcdRequest, GcdResult, ALGORITHMS, get_algorithm

__all__ = [
    'load_config', 'get_default_config', 'setup_logging_from_config',
    'GcdService', 'GcdRequest', 'GcdResult', 'ALGORITHMS', 'get_algorithm'
]
