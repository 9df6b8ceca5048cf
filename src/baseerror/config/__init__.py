"""Configuration: YAML + env overlay."""

from baseerror.config.loader import _deep_update, load_config, load_config_with_env
from baseerror.config.schema import Settings, cfg

__all__ = ["Settings", "_deep_update", "cfg", "load_config", "load_config_with_env"]
