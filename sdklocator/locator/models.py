"""
Data model for discovered SDK installations.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, NamedTuple

from sdklocator.core.exceptions import InvalidVersionError

_VERSION_PATTERN = re.compile(r"^([0-9]+)\.([0-9]+)\.([0-9]+)", re.MULTILINE)


class SdkVersion(NamedTuple):
    """
    Three-component SDK version.

    Compares as a plain tuple, so ``SdkVersion(7, 0, 100) > SdkVersion(6, 0, 400)``.

    Example:
        >>> SdkVersion.parse("6.0.100-preview")
        SdkVersion(major=6, minor=0, patch=100)
    """

    major: int
    minor: int
    patch: int

    @classmethod
    def parse(cls, text: str) -> "SdkVersion":
        """
        Parse the first ``major.minor.patch`` found at the start of a line.

        Anything after the patch number (``-preview``, ``-rc.1``) is ignored.

        Args:
            text: Version string or whole version-file content

        Returns:
            Parsed version

        Raises:
            InvalidVersionError: If no line starts with a three-part version
        """
        match = _VERSION_PATTERN.search(text)
        if not match:
            raise InvalidVersionError(f"No major.minor.patch version in: {text[:80]!r}")

        return cls(int(match.group(1)), int(match.group(2)), int(match.group(3)))

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


class DiscoveryType(Enum):
    """How an installation was found."""

    VISUAL_STUDIO_SETUP = "visual_studio_setup"
    DEVELOPER_CONSOLE = "developer_console"
    DOTNET_SDK = "dotnet_sdk"


@dataclass(frozen=True)
class InstallationRecord:
    """
    Represents one validated SDK installation.

    Attributes:
        name: Label of the discovery source (e.g. '.NET Core SDK')
        path: Installation directory, with trailing separator when discovered
        version: Version read from the installation's version file
        discovery_type: Strategy that found this installation
    """

    name: str
    path: str
    version: SdkVersion
    discovery_type: DiscoveryType = DiscoveryType.DOTNET_SDK

    def __str__(self) -> str:
        """String representation."""
        return f"{self.name} {self.version} at {self.path}"

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON output.

        Returns:
            Dictionary representation suitable for serialization
        """
        return {
            "name": self.name,
            "path": self.path,
            "version": str(self.version),
            "discovery_type": self.discovery_type.value,
        }
