"""
SDK discovery module for sdklocator.

This module provides functionality for:
- Parsing ``dotnet --info`` output
- Validating SDK installation directories
- Building version-ordered installation records
"""

from sdklocator.locator.info_parser import (
    DotNetInfo,
    SdkCandidate,
    extract_base_path,
    extract_sdk_list,
    parse_info_output,
)
from sdklocator.locator.models import DiscoveryType, InstallationRecord, SdkVersion
from sdklocator.locator.sdk_locator import SdkLocator, get_instance, get_instances

__all__ = [
    # Models
    "DiscoveryType",
    "InstallationRecord",
    "SdkVersion",
    # Parser
    "DotNetInfo",
    "SdkCandidate",
    "extract_base_path",
    "extract_sdk_list",
    "parse_info_output",
    # Locator
    "SdkLocator",
    "get_instance",
    "get_instances",
]
