"""Global configuration management for jjnamer.

Handles user-level configuration stored in ~/.jjnamer/config.yaml.
"""

from pathlib import Path
from typing import Any, Dict

import yaml


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".jjnamer"


def get_global_config_dir() -> Path:
    """Get the global jjnamer configuration directory.

    Returns:
        Path to ~/.jjnamer/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.jjnamer/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.jjnamer/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def is_configured() -> bool:
    """Check whether a global config file exists."""
    return get_config_file_path().exists()


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.jjnamer/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file cannot be read or is not a mapping.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Expected a mapping in {config_file}, got {type(config).__name__}")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.jjnamer/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def set_config_value(key: str, value: Any) -> None:
    """Set a single key in the global config file."""
    config = load_global_config()
    config[key] = value
    save_global_config(config)


def unset_config_value(key: str) -> bool:
    """Remove a key from the global config file.

    Returns:
        True if the key was present, False otherwise.
    """
    config = load_global_config()
    if key not in config:
        return False
    del config[key]
    save_global_config(config)
    return True
