"""
sdklocator/locator/sdk_locator.py

.NET SDK discovery - runs ``dotnet --info``, parses the installed SDK list and
validates each candidate directory.

Failures never propagate to the caller. A missing tool or malformed output
yields no instances, and an invalid candidate is skipped without affecting
its siblings.
"""

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Union

from sdklocator.config.parser import DiscoveryConfig
from sdklocator.core.exceptions import (
    InvalidInstallationError,
    InvalidVersionError,
    MalformedOutputError,
)
from sdklocator.core.process import ProcessRunner
from sdklocator.locator.info_parser import parse_info_output
from sdklocator.locator.models import DiscoveryType, InstallationRecord, SdkVersion

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class SdkLocator:
    """
    Discovers .NET SDK installations reported by ``dotnet --info``.

    Example:
        >>> locator = SdkLocator()
        >>> latest = locator.find_latest(".")
        >>> if latest:
        ...     print(latest.version, latest.path)
    """

    def __init__(
        self,
        config: Optional[DiscoveryConfig] = None,
        runner: Optional[ProcessRunner] = None,
    ):
        """
        Initialize locator.

        Args:
            config: Discovery configuration (defaults used if None)
            runner: Process runner (one built from ``config`` if None)
        """
        self.config = config or DiscoveryConfig()
        self.runner = runner or ProcessRunner(self.config)

    def validate_installation(self, sdk_path: PathLike) -> SdkVersion:
        """
        Check that ``sdk_path`` is an SDK installation and read its version.

        Args:
            sdk_path: Candidate installation directory

        Returns:
            Version parsed from the version file

        Raises:
            InvalidInstallationError: On the first failed check
        """
        path_str = str(sdk_path) if sdk_path is not None else ""
        if not path_str.strip():
            raise InvalidInstallationError(path_str, "empty path")

        directory = Path(path_str)

        self._require_file(path_str, directory / self.config.marker_file)

        version_file = directory / self.config.version_file
        self._require_file(path_str, version_file)

        try:
            content = version_file.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise InvalidInstallationError(
                path_str, f"cannot read {self.config.version_file}: {e}"
            ) from e

        try:
            return SdkVersion.parse(content)
        except InvalidVersionError as e:
            raise InvalidInstallationError(path_str, str(e)) from e

    def _require_file(self, path_str: str, file_path: Path) -> None:
        """Raise InvalidInstallationError unless ``file_path`` is a regular file."""
        try:
            found = file_path.is_file()
        except OSError as e:
            # is_file() only swallows ENOENT-like errors
            raise InvalidInstallationError(
                path_str, f"cannot access {file_path.name}: {e}"
            ) from e

        if not found:
            raise InvalidInstallationError(path_str, f"{file_path.name} not found")

    def get_instance(
        self, working_directory: PathLike, sdk_path: PathLike
    ) -> Optional[InstallationRecord]:
        """
        Build a record for one known SDK directory.

        Args:
            working_directory: Directory discovery was run from (not used
                for validation)
            sdk_path: SDK installation directory

        Returns:
            InstallationRecord or None if the directory is not a valid SDK
        """
        try:
            version = self.validate_installation(sdk_path)
        except InvalidInstallationError as e:
            logger.debug(f"Skipping candidate: {e}")
            return None

        return InstallationRecord(
            name=self.config.record_name,
            path=str(sdk_path),
            version=version,
            discovery_type=DiscoveryType.DOTNET_SDK,
        )

    def get_instances(
        self, working_directory: PathLike
    ) -> Iterator[Optional[InstallationRecord]]:
        """
        Discover SDKs visible from ``working_directory``.

        The tool runs when iteration starts. Elements are yielded newest
        first; an element is None when its candidate failed validation.

        Args:
            working_directory: Directory to run the tool in

        Yields:
            InstallationRecord or None, one per listed SDK
        """
        output = self.runner.run(working_directory)
        if output is None:
            return

        try:
            info = parse_info_output(
                output, self.config.sdk_headers, self.config.runtime_headers
            )
        except MalformedOutputError as e:
            logger.debug(f"Ignoring tool output: {e}")
            return

        logger.debug(f"Tool reports base path {info.base_path}")

        for candidate in info.candidates:
            yield self.get_instance(working_directory, candidate.path)

    def find_instances(self, working_directory: PathLike) -> List[InstallationRecord]:
        """
        Discover valid SDKs, newest first.

        Args:
            working_directory: Directory to run the tool in

        Returns:
            Validated installation records
        """
        instances = [
            instance
            for instance in self.get_instances(working_directory)
            if instance is not None
        ]
        logger.info(f"Found {len(instances)} .NET SDK instance(s)")
        return instances

    def find_latest(self, working_directory: PathLike) -> Optional[InstallationRecord]:
        """
        Return the newest valid SDK, or None if there is none.
        """
        for instance in self.get_instances(working_directory):
            if instance is not None:
                logger.info(f"Latest SDK: {instance}")
                return instance

        logger.info("No .NET SDK found")
        return None


def get_instance(
    working_directory: PathLike, sdk_path: PathLike
) -> Optional[InstallationRecord]:
    """Validate a single SDK directory with the default configuration."""
    return SdkLocator().get_instance(working_directory, sdk_path)


def get_instances(working_directory: PathLike) -> Iterator[Optional[InstallationRecord]]:
    """Run discovery with the default configuration."""
    return SdkLocator().get_instances(working_directory)
