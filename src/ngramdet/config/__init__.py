"""Configuration module."""

from ngramdet.config.loader import (
    ConfigurationError,
    find_config_file,
    get_default_config,
    load_config,
    load_config_file,
)
from ngramdet.config.schema import (
    DEFAULT_MINIMUM_CONFIDENCE,
    DetectionConfig,
    NgramdetConfig,
    ProfilesConfig,
    heal_minimum_confidence,
)

__all__ = [
    "DEFAULT_MINIMUM_CONFIDENCE",
    "ConfigurationError",
    "DetectionConfig",
    "NgramdetConfig",
    "ProfilesConfig",
    "find_config_file",
    "get_default_config",
    "heal_minimum_confidence",
    "load_config",
    "load_config_file",
]
