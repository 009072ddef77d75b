"""YAML configuration parser for sdklocator.

The discovery core never reads files on its own. A ``DiscoveryConfig`` is
built with defaults or loaded from YAML by the CLI and passed in.
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List

import yaml

from sdklocator.core.exceptions import ConfigError

DEFAULT_SDK_HEADERS = [".NET Core SDKs installed", ".NET SDKs installed"]
DEFAULT_RUNTIME_HEADERS = [".NET Core runtimes installed", ".NET runtimes installed"]

_LIST_FIELDS = ("arguments", "sdk_headers", "runtime_headers")


@dataclass
class DiscoveryConfig:
    """Settings for the ``dotnet --info`` discovery pipeline."""

    command: str = "dotnet"
    arguments: List[str] = field(default_factory=lambda: ["--info"])
    locale_variable: str = "DOTNET_CLI_UI_LANGUAGE"
    locale: str = "en-US"
    # Older CLIs print ".NET Core ...", newer ones drop "Core"
    sdk_headers: List[str] = field(default_factory=lambda: list(DEFAULT_SDK_HEADERS))
    runtime_headers: List[str] = field(
        default_factory=lambda: list(DEFAULT_RUNTIME_HEADERS)
    )
    marker_file: str = "Microsoft.Build.dll"
    version_file: str = ".version"
    record_name: str = ".NET Core SDK"


def load_config(config_path: Path) -> DiscoveryConfig:
    """
    Load discovery configuration from a YAML file.

    Args:
        config_path: Path to the YAML file

    Returns:
        Parsed configuration (defaults for an empty file)

    Raises:
        ConfigError: If the file is missing or invalid
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        return DiscoveryConfig()

    return parse_config_data(data)


def parse_config_data(data: Any) -> DiscoveryConfig:
    """Validate a decoded YAML document and build a ``DiscoveryConfig``."""
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    known = {f.name for f in fields(DiscoveryConfig)}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    values: Dict[str, Any] = {}
    for key, value in data.items():
        if key in _LIST_FIELDS:
            values[key] = _validate_string_list(key, value)
        else:
            values[key] = _validate_string(key, value)

    return DiscoveryConfig(**values)


def _validate_string(key: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"'{key}' must be a non-empty string")
    return value


def _validate_string_list(key: str, value: Any) -> List[str]:
    if not isinstance(value, list):
        raise ConfigError(f"'{key}' must be a list of strings")

    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise ConfigError(f"'{key}' entries must be non-empty strings")

    # An empty header list would match nothing; arguments may be empty
    if not value and key != "arguments":
        raise ConfigError(f"'{key}' must contain at least one entry")

    return list(value)
