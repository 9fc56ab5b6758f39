"""Configuration for jjnamer.

Settings are resolved from, highest priority first: CLI options,
environment variables (a .env file is honoured), ~/.jjnamer/config.yaml,
and the defaults below. Use 'jj-namer config' commands to edit the file.
"""

import os
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from jjnamer import global_config
from jjnamer.global_config import GlobalConfigError
from jjnamer.logging import get_logger

logger = get_logger("config")


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================

DEFAULT_MODEL = "llama3.2"
DEFAULT_HOST = "http://localhost:11434"
DEFAULT_TIMEOUT = 120.0
DEFAULT_TOP_K = 10
DEFAULT_REVISION = "trunk()..@"
DEFAULT_JJ_EXECUTABLE = "jj"

# Environment variables overriding config file values
ENV_VARS = {
    "model": "JJNAMER_MODEL",
    "host": "OLLAMA_HOST",
    "timeout": "JJNAMER_TIMEOUT",
    "prefix": "JJNAMER_PREFIX",
    "remote": "JJNAMER_REMOTE",
}


class NamerConfig(BaseModel):
    """Effective settings for one jj-namer run."""

    model: str = DEFAULT_MODEL
    host: str = DEFAULT_HOST
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    top_k: Optional[int] = Field(default=DEFAULT_TOP_K, ge=1)
    temperature: Optional[float] = Field(default=None, ge=0)
    revision: str = DEFAULT_REVISION
    prefix: Optional[str] = None
    remote: Optional[str] = None
    allow_new: bool = True
    full_descriptions: bool = False
    jj_executable: str = DEFAULT_JJ_EXECUTABLE

    @field_validator("model", "host", "revision", "jj_executable")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v.strip()

    @field_validator("prefix", "remote")
    @classmethod
    def blank_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v


def config_keys() -> list[str]:
    """Names of all settable configuration keys."""
    return list(NamerConfig.model_fields)


def validate_value(key: str, value: Any) -> Any:
    """Coerce a raw value for `key` the way NamerConfig would.

    Raises:
        GlobalConfigError: If the key is unknown or the value invalid.
    """
    if key not in NamerConfig.model_fields:
        raise GlobalConfigError(f"Unknown config key: {key}. Valid keys: {', '.join(config_keys())}")
    try:
        return getattr(NamerConfig(**{key: value}), key)
    except ValidationError as e:
        raise GlobalConfigError(f"Invalid value for {key}: {value!r}\n{e}")


def _file_values() -> dict[str, Any]:
    values = {}
    for key, value in global_config.load_global_config().items():
        if key in NamerConfig.model_fields:
            values[key] = value
        else:
            logger.warning("Ignoring unknown key %r in %s", key, global_config.get_config_file_path())
    return values


def _env_values() -> dict[str, Any]:
    values = {}
    for key, env_var in ENV_VARS.items():
        value = os.getenv(env_var)
        if value:
            values[key] = value
    return values


def load_config(**overrides: Any) -> NamerConfig:
    """Load the effective configuration.

    Args:
        **overrides: Values from the command line. None means "not given".

    Returns:
        A validated NamerConfig.

    Raises:
        GlobalConfigError: If the config file is unreadable or a value is invalid.
    """
    load_dotenv()

    values = _file_values()
    values.update(_env_values())
    values.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return NamerConfig(**values)
    except ValidationError as e:
        raise GlobalConfigError(f"Invalid configuration:\n{e}")
