# core/__init__.py
"""
number-wordify Core Module
==========================

Public API:
    - Configuration: Config, get_config, validate_config
    - Logging: LoggingConfig
    - Utilities: SingletonMeta
"""

from .singleton import SingletonMeta
from .config import Config, get_config, get_log_level, validate_config
from .logging_config import LoggingConfig

__all__ = [
    "SingletonMeta",
    "Config",
    "get_config",
    "get_log_level",
    "validate_config",
    "LoggingConfig",
]
