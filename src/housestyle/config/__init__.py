"""Configuration loading, schema, and defaults."""

from housestyle.config.loader import ConfigError, load_config
from housestyle.config.schema import HouseStyleConfig

__all__ = [
    "ConfigError",
    "HouseStyleConfig",
    "load_config",
]
