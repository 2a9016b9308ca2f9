"""
Configuration Manager with Environment Variables Support

Usage:
    from number_wordify.core.config import get_config

    config = get_config()
    scale = config.get("WORDIFY_SCALE", default="international")
    singular = config.get_bool("WORDIFY_SINGULAR_UNITS")
"""
import os
import re
import json
import logging
from typing import Any, Dict
from pathlib import Path
from dotenv import load_dotenv

from number_wordify.core.singleton import SingletonMeta
from number_wordify.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "wordify.json"

DEFAULTS: Dict[str, Any] = {
    "WORDIFY_SCALE": "international",
    "WORDIFY_CURRENCY": "INR",
    "WORDIFY_SINGULAR_UNITS": False,
    "WORDIFY_LOG_DIR": None,
    "WORDIFY_LOG_RETENTION_DAYS": 30,
    "LOG_LEVEL": "INFO",
}


class Config(metaclass=SingletonMeta):
    """
    Settings for the service defaults and the command line, read from:
    - Environment variables (.env is loaded first)
    - JSON configuration file (wordify.json or WORDIFY_CONFIG_FILE)
    - Built-in defaults
    """

    def __init__(self):
        self._config_cache: Dict[str, Any] = {}

        # WORDIFY_CONFIG_FILE may itself come from .env
        env_file = Path(".env")
        if env_file.exists():
            load_dotenv(env_file)
            logger.debug(f"Environment variables loaded from {env_file}")

        self._config_file_path = Path(os.getenv("WORDIFY_CONFIG_FILE", DEFAULT_CONFIG_FILE))
        self._load_json_config()

    def _load_json_config(self):
        if not self._config_file_path.exists():
            logger.debug(f"Config file not found: {self._config_file_path}")
            return

        try:
            with open(self._config_file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load config file: {e}")
            return

        if not isinstance(data, dict):
            logger.error(f"Config file {self._config_file_path} must hold a JSON object")
            return

        self._config_cache = data
        logger.info(f"Configuration loaded from {self._config_file_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value.

        Priority order:
        1. Environment variable
        2. JSON config file
        3. `default`
        4. Built-in value from DEFAULTS
        """
        env_value = os.getenv(key)
        if env_value is not None:
            return env_value

        if key in self._config_cache:
            return self._config_cache[key]

        if default is not None:
            return default

        return DEFAULTS.get(key)

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get boolean configuration value"""
        value = self.get(key, default)

        if isinstance(value, bool):
            return value

        if isinstance(value, str):
            return value.strip().lower() in ('true', '1', 'yes', 'on')

        return bool(value)

    def get_int(self, key: str, default: int = 0) -> int:
        """Get integer configuration value"""
        value = self.get(key, default)

        try:
            return int(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid int value for '{key}': {value}, using default")
            return default

    def validate(self, schema: Dict[str, Dict[str, Any]]):
        """
        Validate configuration against schema.

        Rules per key: "required", "type", "pattern", "choices"
        (choices are compared lower-cased).
        """
        errors = []

        for key, rules in schema.items():
            value = self.get(key)

            if value is None:
                if rules.get("required", False):
                    errors.append(f"Required config '{key}' is missing")
                continue

            if "type" in rules and not isinstance(value, rules["type"]):
                errors.append(
                    f"Config '{key}' must be {rules['type'].__name__}, "
                    f"got {type(value).__name__}"
                )
                continue

            if "pattern" in rules and not re.match(rules["pattern"], str(value)):
                errors.append(
                    f"Config '{key}' does not match pattern {rules['pattern']}"
                )

            if "choices" in rules and str(value).lower() not in rules["choices"]:
                errors.append(
                    f"Config '{key}' must be one of {', '.join(rules['choices'])}, "
                    f"got {value!r}"
                )

        if errors:
            raise ConfigurationError(
                "Configuration validation failed:\n" + "\n".join(f"- {e}" for e in errors)
            )


def get_config() -> Config:
    """Return the process-wide Config instance"""
    return Config.get_instance()


def get_log_level() -> str:
    return str(get_config().get("LOG_LEVEL", default="INFO")).upper()


def config_schema() -> Dict[str, Dict[str, Any]]:
    """Schema for validate_config(); scale choices follow the registry."""
    from number_wordify.services.scales import SCALE_SYSTEMS

    return {
        "WORDIFY_SCALE": {
            "type": str,
            "required": True,
            "choices": sorted(SCALE_SYSTEMS),
        },
        "WORDIFY_CURRENCY": {
            "type": str,
            "required": True,
            "pattern": r"^[A-Za-z]{3}$",
        },
        "WORDIFY_LOG_DIR": {
            "type": str,
        },
        "WORDIFY_LOG_RETENTION_DAYS": {
            "pattern": r"^\d+$",
        },
        "LOG_LEVEL": {
            "type": str,
            "pattern": r"^(?i:DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        },
    }


def validate_config():
    """Validate configuration on startup"""
    try:
        get_config().validate(config_schema())
        logger.debug("Configuration validated successfully")
    except ConfigurationError as e:
        logger.error(f"Configuration validation failed: {e}")
        raise
