"""
Core functionality for sdklocator.

This package contains the foundational modules that other components depend on.
The process runner lives in ``sdklocator.core.process`` and is imported from
there directly.
"""

from .exceptions import (
    SdkLocatorError,
    DiscoveryError,
    ToolUnavailableError,
    MalformedOutputError,
    InvalidInstallationError,
    InvalidVersionError,
    ConfigError,
)

__all__ = [
    "SdkLocatorError",
    "DiscoveryError",
    "ToolUnavailableError",
    "MalformedOutputError",
    "InvalidInstallationError",
    "InvalidVersionError",
    "ConfigError",
]
