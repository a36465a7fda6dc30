"""Settings loader module.

This module provides functions for loading settings from a YAML file and from
environment variables and transforming them into a validated FinderSettings.
"""

import os
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from object_finder.core.exceptions import ConfigError
from object_finder.core.utils.logging import get_logger

from .schema import FinderSettings

logger = get_logger(__name__)

DEFAULT_ENV_PREFIX = "OBJECT_FINDER"
DEFAULT_SETTINGS_FILE = "object_finder.yaml"
SECTION_NAME = "object_finder"


def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge dictionaries.

    Args:
        base: Base dictionary
        override: Dictionary with values that override the base

    Returns:
        Merged dictionary where override values take precedence
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value

    return result


def load_yaml_file(path: str) -> Dict[str, Any]:
    """Load settings from a YAML file.

    A top-level ``object_finder:`` section is unwrapped when present, so the
    settings can live inside a larger application config file.

    Args:
        path: Path to YAML file

    Returns:
        Dictionary of settings values, empty if the file does not exist

    Raises:
        ConfigError: If the file cannot be read or parsed
    """
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Error reading {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {path}, got {type(data).__name__}")
    section = data.get(SECTION_NAME)
    if isinstance(section, dict):
        return section
    return data


def load_from_env(prefix: str = DEFAULT_ENV_PREFIX) -> Dict[str, Any]:
    """Load settings from environment variables with given prefix.

    ``OBJECT_FINDER_TRIM_WHITESPACE=false`` becomes ``{"trim_whitespace": "false"}``;
    the string is validated by the settings model.

    Args:
        prefix: Prefix for environment variables to consider

    Returns:
        Dictionary containing settings from environment
    """
    result: Dict[str, Any] = {}
    prefix_upper = f"{prefix.upper()}_"

    for key, value in os.environ.items():
        if not key.startswith(prefix_upper):
            continue
        name = key[len(prefix_upper):].lower()
        # The settings file path is not itself a setting
        if name == "config":
            continue
        result[name] = value

    return result


def load_settings(
    file_path: Optional[str] = None,
    env_prefix: str = DEFAULT_ENV_PREFIX,
) -> FinderSettings:
    """Load FinderSettings from file and environment.

    Args:
        file_path: Path to a YAML settings file (defaults to ``${PREFIX}_CONFIG``
            from the environment, then ``object_finder.yaml``)
        env_prefix: Prefix for environment variables

    Returns:
        Validated FinderSettings instance

    Raises:
        ConfigError: On loading or validation failure
    """
    path = file_path or os.environ.get(f"{env_prefix.upper()}_CONFIG", DEFAULT_SETTINGS_FILE)

    settings_data: Dict[str, Any] = {}

    if os.path.exists(path):
        logger.debug("Loading settings from %s", path)
        settings_data = merge_dicts(settings_data, load_yaml_file(path))

    # Environment overrides file
    env_data = load_from_env(env_prefix)
    if env_data:
        settings_data = merge_dicts(settings_data, env_data)

    try:
        return FinderSettings.model_validate(settings_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e


__all__ = ["merge_dicts", "load_yaml_file", "load_from_env", "load_settings"]
