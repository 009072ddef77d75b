"""
Configuration module for sdklocator.
"""

from sdklocator.config.parser import (
    DEFAULT_RUNTIME_HEADERS,
    DEFAULT_SDK_HEADERS,
    DiscoveryConfig,
    load_config,
    parse_config_data,
)
from sdklocator.core.exceptions import ConfigError

__all__ = [
    "ConfigError",
    "DEFAULT_RUNTIME_HEADERS",
    "DEFAULT_SDK_HEADERS",
    "DiscoveryConfig",
    "load_config",
    "parse_config_data",
]
