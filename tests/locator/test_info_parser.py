"""
Tests for sdklocator.locator.info_parser module.
"""

import os

import pytest

from sdklocator.core.exceptions import MalformedOutputError
from sdklocator.locator.info_parser import (
    DotNetInfo,
    SdkCandidate,
    extract_base_path,
    extract_sdk_list,
    parse_info_output,
)
from tests.fixtures.sdks import build_info_output

ROOT = "/usr/share/dotnet/sdk"


def candidate_path(version, root=ROOT):
    return os.path.join(root, version) + os.sep


class TestExtractBasePath:
    """Tests for extract_base_path."""

    def test_base_path_found(self):
        """Test base path value is captured and stripped."""
        text = ".NET SDK:\n Version: 7.0.100\n Base Path:   /usr/share/dotnet/sdk/7.0.100/  \nHost:\n"

        assert extract_base_path(text) == "/usr/share/dotnet/sdk/7.0.100/"

    def test_base_path_windows(self):
        """Test Windows style base path."""
        text = " Base Path:   C:\\Program Files\\dotnet\\sdk\\8.0.100\\"

        assert extract_base_path(text) == "C:\\Program Files\\dotnet\\sdk\\8.0.100\\"

    def test_base_path_missing(self):
        """Test None when there is no Base Path line."""
        assert extract_base_path("Version: 7.0.100\nCommit: abc\n") is None

    def test_base_path_only_first_line_captured(self):
        """Test capture stops at end of line."""
        text = "Base Path: /a/\nBase Path: /b/\n"

        assert extract_base_path(text) == "/a/"


class TestExtractSdkList:
    """Tests for extract_sdk_list."""

    def test_end_to_end_example(self):
        """Test two SDK lines produce candidates newest first."""
        lines = [
            ".NET SDKs installed:",
            "  6.0.100 [/usr/share/dotnet/sdk]",
            "  7.0.100 [/usr/share/dotnet/sdk]",
            ".NET runtimes installed:",
        ]

        candidates = extract_sdk_list(lines)

        assert candidates == [
            SdkCandidate("7.0.100", candidate_path("7.0.100")),
            SdkCandidate("6.0.100", candidate_path("6.0.100")),
        ]

    @pytest.mark.parametrize("count", [1, 3, 8])
    def test_n_lines_give_n_candidates_reversed(self, count):
        """Test N well-formed lines give N candidates, last line first."""
        versions = [f"{major}.0.100" for major in range(1, count + 1)]
        lines = [".NET SDKs installed:"]
        lines += [f"  {v} [{ROOT}]" for v in versions]
        lines += [".NET runtimes installed:"]

        candidates = extract_sdk_list(lines)

        assert [c.version for c in candidates] == list(reversed(versions))

    def test_legacy_header_wording(self):
        """Test the '.NET Core' header wording is accepted."""
        lines = [
            ".NET Core SDKs installed:",
            "  2.1.500 [/usr/share/dotnet/sdk]",
            "  3.1.100 [/usr/share/dotnet/sdk]",
            "",
            ".NET Core runtimes installed:",
            "  Microsoft.NETCore.App 3.1.0 [/usr/share/dotnet/shared]",
        ]

        candidates = extract_sdk_list(lines)

        assert [c.version for c in candidates] == ["3.1.100", "2.1.500"]

    def test_missing_header(self):
        """Test no candidates when the SDK header is absent."""
        lines = ["  6.0.100 [/usr/share/dotnet/sdk]", ".NET runtimes installed:"]

        assert extract_sdk_list(lines) == []

    def test_empty_section(self):
        """Test header directly followed by the runtimes header."""
        lines = [".NET SDKs installed:", ".NET runtimes installed:"]

        assert extract_sdk_list(lines) == []

    def test_no_sdks_message(self):
        """Test the tool's 'No SDKs were found.' line ends the list."""
        lines = [".NET SDKs installed:", "  No SDKs were found.", ".NET runtimes installed:"]

        assert extract_sdk_list(lines) == []

    def test_header_at_end_of_output(self):
        """Test header on the last line gives no candidates."""
        assert extract_sdk_list(["info", ".NET SDKs installed:"]) == []

    def test_list_without_terminator(self):
        """Test list running to end of output."""
        lines = [".NET SDKs installed:", "  6.0.100 [/sdk]", "  7.0.100 [/sdk]"]

        candidates = extract_sdk_list(lines)

        assert [c.version for c in candidates] == ["7.0.100", "6.0.100"]

    @pytest.mark.parametrize("k", [0, 1, 2, 3])
    def test_malformed_line_truncates(self, k):
        """Test a malformed line at position k keeps exactly k candidates."""
        entries = [f"  {major}.0.100 [{ROOT}]" for major in range(1, 5)]
        entries[k] = "  this is not an sdk line"
        lines = [".NET SDKs installed:"] + entries + [".NET runtimes installed:"]

        candidates = extract_sdk_list(lines)

        assert len(candidates) == k
        assert [c.version for c in candidates] == [
            f"{major}.0.100" for major in range(k, 0, -1)
        ]

    def test_lines_after_malformed_never_recovered(self):
        """Test valid lines after a break are ignored."""
        lines = [
            ".NET SDKs installed:",
            "  6.0.100 [/sdk]",
            "  garbage",
            "  7.0.100 [/sdk]",
            "  8.0.100 [/sdk]",
        ]

        assert [c.version for c in extract_sdk_list(lines)] == ["6.0.100"]

    def test_prerelease_version(self):
        """Test prerelease versions keep their full directory name."""
        lines = [
            ".NET SDKs installed:",
            "  7.0.100 [/usr/share/dotnet/sdk]",
            "  8.0.100-rc.1.23455.8 [/usr/share/dotnet/sdk]",
        ]

        candidates = extract_sdk_list(lines)

        assert candidates[0] == SdkCandidate(
            "8.0.100-rc.1.23455.8", candidate_path("8.0.100-rc.1.23455.8")
        )

    def test_path_with_spaces_trimmed(self):
        """Test bracketed path with spaces is trimmed but kept intact."""
        lines = [".NET SDKs installed:", "  8.0.100 [  /opt/my dotnet/sdk  ]"]

        candidates = extract_sdk_list(lines)

        assert candidates[0].path == candidate_path("8.0.100", "/opt/my dotnet/sdk")

    def test_candidate_path_has_trailing_separator(self):
        """Test candidate paths end with the path separator."""
        lines = [".NET SDKs installed:", "  6.0.100 [/sdk]"]

        assert extract_sdk_list(lines)[0].path.endswith(os.sep)

    def test_custom_headers(self):
        """Test configurable header and terminator phrases."""
        lines = [
            "Installed SDK versions:",
            "  6.0.100 [/sdk]",
            "Installed runtimes:",
            "  7.0.100 [/sdk]",
        ]

        candidates = extract_sdk_list(
            lines,
            sdk_headers=["Installed SDK versions"],
            runtime_headers=["Installed runtimes"],
        )

        assert [c.version for c in candidates] == ["6.0.100"]


class TestParseInfoOutput:
    """Tests for parse_info_output."""

    def test_parse_full_output(self, sdk_root):
        """Test base path and candidates from realistic output."""
        text = build_info_output(
            sdk_root, ["6.0.100", "7.0.100"], base_path=f"{sdk_root}/7.0.100/"
        )

        info = parse_info_output(text)

        assert isinstance(info, DotNetInfo)
        assert info.base_path == f"{sdk_root}/7.0.100/"
        assert [c.version for c in info.candidates] == ["7.0.100", "6.0.100"]

    def test_missing_base_path(self, sdk_root):
        """Test output without Base Path is rejected."""
        text = build_info_output(sdk_root, ["6.0.100"], base_path=None)

        with pytest.raises(MalformedOutputError):
            parse_info_output(text)

    def test_base_path_without_sdk_list(self):
        """Test base path present but SDK list missing gives no candidates."""
        info = parse_info_output(" Base Path: /sdk/6.0.100/\nHost:\n  Version: 6.0.0\n")

        assert info.base_path == "/sdk/6.0.100/"
        assert info.candidates == []

    def test_windows_line_endings(self):
        """Test CRLF output is split correctly."""
        text = (
            " Base Path: /sdk/7.0.100/\r\n"
            ".NET SDKs installed:\r\n"
            "  6.0.100 [/sdk]\r\n"
            "  7.0.100 [/sdk]\r\n"
            ".NET runtimes installed:\r\n"
        )

        info = parse_info_output(text)

        assert info.base_path == "/sdk/7.0.100/"
        assert [c.version for c in info.candidates] == ["7.0.100", "6.0.100"]
