"""Provides functions for loading and accessing configuration settings.

Supports loading from environment variables, a .env file and a YAML
configuration file (~/.petcli/config.yaml).
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from petcli.domain.models.common import BarkCount, FilePath

logger = logging.getLogger(__name__)

# --- Configuration Constants ---
DEFAULT_CONFIG_DIR = Path.home() / ".petcli"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.yaml"
ENV_FILE_NAME = ".env"

DEFAULT_DATA_FILE = "dog_data.txt"
DEFAULT_BARK_COUNT = 3
DEFAULT_LOG_LEVEL = "WARNING"

# --- Global Configuration Store ---
_config: Dict[str, Any] = {}
_test_config: Dict[str, Any] = {}
_loaded = False


def load_configuration(config_file: Path = DEFAULT_CONFIG_FILE, env_file: Optional[Path] = None) -> None:
    """Loads configuration from environment, .env file, and YAML file.

    Priority order (highest to lowest):
    1. Environment Variables
    2. .env file
    3. YAML configuration file
    4. Default values passed to get_config

    Args:
        config_file: Path to the YAML configuration file.
        env_file: Path to the .env file (searches upwards from cwd if None).

    Raises:
        yaml.YAMLError: If the YAML file exists but cannot be parsed.
    """
    global _config, _loaded
    if _loaded:
        logger.debug("Configuration already loaded.")
        return

    _config = {}

    # 1. YAML file (lowest priority)
    if config_file.is_file():
        with open(config_file, 'r', encoding='utf-8') as f:
            yaml_config = yaml.safe_load(f)
        if isinstance(yaml_config, dict):
            _config.update(_flatten(yaml_config))
            logger.info(f"Loaded configuration from YAML: {config_file}")
        elif yaml_config is not None:
            logger.warning(f"YAML config file {config_file} did not contain a dictionary.")
    else:
        logger.debug(f"YAML config file not found: {config_file}")

    # 2. .env file; override=False so real environment variables win
    dotenv_path = env_file or find_dotenv_path()
    if dotenv_path and load_dotenv(dotenv_path=dotenv_path, override=False):
        logger.info(f"Loaded environment variables from: {dotenv_path}")
    else:
        logger.debug("No .env file loaded.")

    # 3. Environment variables are read on demand by get_config
    _loaded = True
    logger.debug("Configuration loading process completed.")


def _flatten(data: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    """Turns nested YAML mappings into dotted keys ({'logging': {'level': x}} -> 'logging.level')."""
    flat: Dict[str, Any] = {}
    for key, value in data.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, prefix=f"{dotted}."))
        else:
            flat[dotted] = value
    return flat


def _env_key(key: str) -> str:
    return key.upper().replace('.', '_')


def _coerce(value: str) -> Any:
    if value.lower() == 'true':
        return True
    if value.lower() == 'false':
        return False
    try:
        if '.' in value:
            return float(value)
        return int(value)
    except ValueError:
        return value


def get_config(key: str, default: Any = None, coerce: bool = True) -> Any:
    """Get a configuration value by key.

    Priority:
    1. Test configuration
    2. Environment variable (``logging.level`` -> ``LOGGING_LEVEL``)
    3. YAML config
    4. Default value

    Args:
        key: The configuration key
        default: Default value if the key is not found
        coerce: Convert environment strings such as "true" or "3" to bool/int/float.
            Pass False for values that must stay text (e.g. file names).

    Returns:
        The configuration value
    """
    if key in _test_config:
        return _test_config[key]

    env_key = _env_key(key)
    if env_key in os.environ:
        value = os.environ[env_key]
        return _coerce(value) if coerce else value

    if key in _config:
        return _config[key]

    logger.debug(f"Config key '{key}' not found in environment or loaded config. Returning default: {default}")
    return default


def find_dotenv_path() -> Optional[Path]:
    """Searches for the .env file upwards from the current directory."""
    cwd = Path.cwd()
    for path in [cwd] + list(cwd.parents):
        env_path = path / ENV_FILE_NAME
        if env_path.is_file():
            return env_path
    return None


def set_config(key: str, value: Any) -> None:
    """Sets a configuration value in memory, as if read from the YAML file.

    Environment variables and test overrides still take precedence.

    Args:
        key: Configuration key (e.g., 'logging.level')
        value: Value to set
    """
    logger.debug(f"Setting config: {key} = {value}")
    _config[key] = value


# --- Convenience Functions ---

def get_data_file() -> FilePath:
    """Gets the default data file path."""
    return FilePath(str(get_config('data_file', DEFAULT_DATA_FILE, coerce=False)))


def get_bark_count() -> BarkCount:
    """Gets the default number of barks.

    Raises:
        ValueError: If the configured value is not an integer.
    """
    return BarkCount(int(get_config('bark_count', DEFAULT_BARK_COUNT)))


def get_log_level() -> str:
    """Gets the configured log level name."""
    return str(get_config('logging.level', DEFAULT_LOG_LEVEL)).upper()


def set_config_for_testing(config_dict: Dict[str, Any]) -> None:
    """Set configuration values that override everything else (tests only).

    Args:
        config_dict: Dictionary of configuration values to set
    """
    _test_config.update(config_dict)
    logger.debug(f"Set testing configuration: {config_dict}")


def clear_test_config() -> None:
    """Clear all testing configuration values."""
    _test_config.clear()
    logger.debug("Cleared testing configuration")


def reset_configuration() -> None:
    """Forget everything loaded so load_configuration reads the sources again."""
    global _config, _loaded
    _config = {}
    _loaded = False
