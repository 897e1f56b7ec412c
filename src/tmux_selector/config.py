"""Settings for tmux-selector.

There is no configuration file; every field can be overridden with an
environment variable named TMUX_SELECTOR_<SECTION>_<FIELD>.
"""
import logging
import os
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

ENV_PREFIX = "TMUX_SELECTOR"


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: str = Field("WARNING", description="Log level name")
    file: Optional[str] = Field(None, description="Log to this file instead of stderr")


class TmuxConfig(BaseModel):
    """tmux invocation settings."""

    binary: str = Field("tmux", description="tmux executable to run")


class Config(BaseModel):
    """Main configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    tmux: TmuxConfig = Field(default_factory=TmuxConfig)


# Global config instance
_config: Optional[Config] = None


def generate_env_var_name(section: str, field: str) -> str:
    """Build the environment variable name for a config field.

    Example:
        >>> generate_env_var_name("tmux", "binary")
        'TMUX_SELECTOR_TMUX_BINARY'
    """
    return f"{ENV_PREFIX}_{section.upper()}_{field.upper()}"


def get_all_env_mappings() -> Dict[str, Tuple[str, str]]:
    """Map every environment variable name to its (section, field)."""
    mappings = {}
    for section, section_field in Config.model_fields.items():
        for field in section_field.annotation.model_fields:
            mappings[generate_env_var_name(section, field)] = (section, field)
    return mappings


def _field_type(section: str, field: str) -> Any:
    """Get the declared type of a config field."""
    return Config.model_fields[section].annotation.model_fields[field].annotation


def _convert_env_value(value: str, field_type: Any = str) -> Any:
    """Convert an environment string to the field's bool or int type.

    Values for any other field type are passed through as strings.
    """
    if field_type is not bool and field_type is not int:
        return value

    if field_type is bool:
        lowered = value.lower()
        if lowered in ("true", "yes", "on", "1"):
            return True
        if lowered in ("false", "no", "off", "0"):
            return False
        return value

    try:
        return int(value)
    except ValueError:
        return value


def load_all_env_overrides() -> Dict[str, Dict[str, Any]]:
    """Collect overrides from the environment, grouped by section."""
    overrides: Dict[str, Dict[str, Any]] = {}
    for env_var, (section, field) in get_all_env_mappings().items():
        value = os.environ.get(env_var)
        if value is None:
            continue
        overrides.setdefault(section, {})[field] = _convert_env_value(value, _field_type(section, field))
        logger.debug(f"Config override from {env_var}")
    return overrides


def load_config() -> Config:
    """Build the configuration from defaults and environment overrides."""
    return Config(**load_all_env_overrides())


def get_config() -> Config:
    """Get the global configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: Optional[Config]) -> None:
    """Replace the global configuration (None forces a reload)."""
    global _config
    _config = config
