"""Test fixtures for sdklocator tests.

Fixtures are organized by type:

- sdks: Fake SDK installation directories and ``dotnet --info`` output

Import fixtures in your tests using:
    from tests.fixtures.sdks import sdk_root, make_sdk
"""

__all__ = [
    "sdks",
]
