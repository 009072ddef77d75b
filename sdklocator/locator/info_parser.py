"""
Parsing of ``dotnet --info`` output.

Parsing is staged: the base path line is located first, then the SDK list
section is found by its header and consumed line by line until the runtimes
header or the first line that does not look like an SDK entry. A change in
one section of the output does not affect extraction from another.

Typical input::

    .NET SDK:
     Version:   7.0.100
     ...
     Base Path:   /usr/share/dotnet/sdk/7.0.100/

    .NET SDKs installed:
      6.0.100 [/usr/share/dotnet/sdk]
      7.0.100 [/usr/share/dotnet/sdk]

    .NET runtimes installed:
      ...
"""

import os
import re
import logging
from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Sequence

from sdklocator.config.parser import DEFAULT_RUNTIME_HEADERS, DEFAULT_SDK_HEADERS
from sdklocator.core.exceptions import MalformedOutputError

logger = logging.getLogger(__name__)

BASE_PATH_PATTERN = re.compile(r"Base Path:(.*)$", re.MULTILINE)

# "  7.0.100 [/usr/share/dotnet/sdk]" or "  8.0.100-rc.1.23455.8 [C:\Program Files\dotnet\sdk]"
SDK_LINE_PATTERN = re.compile(
    r"^\s*(?P<version>\d+\.\d+\.\d+(?:-[0-9A-Za-z.\-]+)?)\s+\[(?P<path>.*)\]\s*$"
)


class SdkCandidate(NamedTuple):
    """An SDK entry read from the output, not yet validated on disk."""

    version: str
    path: str


@dataclass
class DotNetInfo:
    """Parsed ``dotnet --info`` output."""

    base_path: str
    candidates: List[SdkCandidate] = field(default_factory=list)


def extract_base_path(text: str) -> Optional[str]:
    """
    Extract the value of the ``Base Path:`` line.

    Args:
        text: Captured tool output

    Returns:
        Stripped base path, or None if no such line exists
    """
    match = BASE_PATH_PATTERN.search(text)
    if not match:
        return None
    return match.group(1).strip()


def _contains_any(line: str, phrases: Sequence[str]) -> bool:
    return any(phrase in line for phrase in phrases)


def extract_sdk_list(
    lines: Sequence[str],
    sdk_headers: Sequence[str] = DEFAULT_SDK_HEADERS,
    runtime_headers: Sequence[str] = DEFAULT_RUNTIME_HEADERS,
) -> List[SdkCandidate]:
    """
    Extract SDK entries from the "SDKs installed" section.

    Consumption stops at the runtimes header or at the first line that does
    not match ``SDK_LINE_PATTERN``; lines after that are never examined.
    Each candidate is inserted at the front, so the tool's ascending listing
    comes back newest first.

    Args:
        lines: Output split into lines
        sdk_headers: Phrases identifying the SDK list header
        runtime_headers: Phrases identifying the following section header

    Returns:
        Candidates, last listed first; empty if the header is missing
    """
    start = next(
        (i for i, line in enumerate(lines) if _contains_any(line, sdk_headers)), None
    )
    if start is None:
        logger.debug("No SDK list header found in output")
        return []

    candidates: List[SdkCandidate] = []

    for line in lines[start + 1 :]:
        if _contains_any(line, runtime_headers):
            break

        match = SDK_LINE_PATTERN.match(line)
        if not match:
            logger.debug(f"Stopping SDK list at unrecognized line: {line!r}")
            break

        version = match.group("version").strip()
        root = match.group("path").strip()
        path = os.path.join(root, version) + os.sep

        candidates.insert(0, SdkCandidate(version, path))

    logger.debug(f"Extracted {len(candidates)} SDK candidates")
    return candidates


def parse_info_output(
    text: str,
    sdk_headers: Sequence[str] = DEFAULT_SDK_HEADERS,
    runtime_headers: Sequence[str] = DEFAULT_RUNTIME_HEADERS,
) -> DotNetInfo:
    """
    Parse the full captured output.

    Args:
        text: Captured tool output
        sdk_headers: Phrases identifying the SDK list header
        runtime_headers: Phrases identifying the following section header

    Returns:
        Base path and SDK candidates (newest first)

    Raises:
        MalformedOutputError: If the output has no ``Base Path:`` line
    """
    base_path = extract_base_path(text)
    if base_path is None:
        raise MalformedOutputError("No 'Base Path:' line in tool output")

    candidates = extract_sdk_list(text.splitlines(), sdk_headers, runtime_headers)
    return DotNetInfo(base_path=base_path, candidates=candidates)
