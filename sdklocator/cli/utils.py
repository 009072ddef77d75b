"""
Shared utilities for CLI commands.
"""

import json
import logging
from typing import Iterable

from sdklocator.config.parser import DiscoveryConfig, load_config
from sdklocator.locator.models import InstallationRecord

logger = logging.getLogger(__name__)


def load_cli_config(args) -> DiscoveryConfig:
    """
    Load the discovery configuration selected on the command line.

    Args:
        args: Parsed arguments (``config`` may be None)

    Returns:
        Configuration from ``--config``, or defaults

    Raises:
        ConfigError: If the configuration file is missing or invalid
    """
    config_path = getattr(args, "config", None)
    if config_path is None:
        return DiscoveryConfig()

    logger.debug(f"Loading configuration from {config_path}")
    return load_config(config_path)


def print_records(records: Iterable[InstallationRecord], as_json: bool = False) -> None:
    """
    Print installation records as text lines or a JSON array.

    Args:
        records: Records to print, in display order
        as_json: Print a JSON array instead of one line per record
    """
    records = list(records)
    if as_json:
        print(json.dumps([record.to_dict() for record in records], indent=2))
        return

    for record in records:
        print(f"{record.version}  {record.path}")
